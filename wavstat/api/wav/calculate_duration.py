"""Compute the duration of a WAV file from its header."""

from pathlib import Path

from .read_wav_header import read_wav_header
from .WavErrorKind import WavErrorKind
from .WavReadError import WavReadError


def calculate_duration(path: Path) -> float:
    """Return the duration of a WAV file in seconds.

    Raises:
        WavReadError: If the header cannot be read or its byte rate is zero
    """
    header = read_wav_header(path)
    byte_rate = header.byte_rate
    if byte_rate == 0:
        raise WavReadError(
            WavErrorKind.ZERO_DIVISOR,
            Path(path),
            f"Zero byte rate (sample_rate={header.sample_rate}, channels={header.channels}, "
            f"bits_per_sample={header.bits_per_sample})",
        )
    return header.data_length / byte_rate
