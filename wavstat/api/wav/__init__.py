"""WAV header parsing."""

from .calculate_duration import calculate_duration
from .read_wav_header import read_wav_header
from .WavErrorKind import WavErrorKind
from .WavHeader import WavHeader
from .WavReadError import WavReadError

__all__ = [
    "WavErrorKind",
    "WavHeader",
    "WavReadError",
    "calculate_duration",
    "read_wav_header",
]
