"""Read the header of a WAV file without touching its sample payload."""

import os
from pathlib import Path
from typing import BinaryIO

from ._constants import (
    CHUNK_HEADER,
    DATA_TAG,
    FMT_FIELDS,
    FMT_TAG,
    RIFF_HEADER_SIZE,
    RIFF_TAG,
    WAVE_TAG,
)
from .WavErrorKind import WavErrorKind
from .WavHeader import WavHeader
from .WavReadError import WavReadError


def read_wav_header(path: Path) -> WavHeader:
    """Parse the RIFF header, fmt sub-chunk and data sub-chunk length of a WAV file.

    Chunks are walked by seeking past their bodies, so only a few dozen bytes
    are read regardless of file size.

    Args:
        path: File to parse

    Returns:
        WavHeader with format fields and the data chunk length in bytes

    Raises:
        WavReadError: If the file cannot be opened or is not a usable WAV container
    """
    path = Path(path)
    try:
        with path.open("rb") as fh:
            return _parse(fh, path)
    except OSError as exc:
        raise WavReadError(WavErrorKind.IO_ERROR, path, str(exc)) from exc


def _parse(fh: BinaryIO, path: Path) -> WavHeader:
    file_size = os.fstat(fh.fileno()).st_size

    header = fh.read(RIFF_HEADER_SIZE)
    if not header:
        raise WavReadError(WavErrorKind.IO_ERROR, path, "Failed to read enough bytes")
    # Judge the magic on whatever bytes exist, so short junk is still not a container
    if not RIFF_TAG.startswith(header[0:4]) or not WAVE_TAG.startswith(header[8:12]):
        raise WavReadError(WavErrorKind.NOT_A_CONTAINER, path, "Not a RIFF/WAVE file")
    if len(header) < RIFF_HEADER_SIZE:
        raise WavReadError(WavErrorKind.IO_ERROR, path, "Failed to read enough bytes")

    fmt: tuple[int, ...] | None = None
    data_length: int | None = None
    pos = RIFF_HEADER_SIZE

    while fmt is None or data_length is None:
        fh.seek(pos)
        raw = fh.read(CHUNK_HEADER.size)
        if not raw:
            break
        if len(raw) < CHUNK_HEADER.size:
            raise WavReadError(WavErrorKind.IO_ERROR, path, f"Truncated chunk header at offset {pos}")
        tag, size = CHUNK_HEADER.unpack(raw)
        body = pos + CHUNK_HEADER.size

        if tag == FMT_TAG and fmt is None:
            if size < FMT_FIELDS.size:
                raise WavReadError(
                    WavErrorKind.MISSING_FORMAT_CHUNK, path, f"Malformed fmt chunk ({size} bytes)"
                )
            fmt_raw = fh.read(FMT_FIELDS.size)
            if len(fmt_raw) < FMT_FIELDS.size:
                raise WavReadError(WavErrorKind.IO_ERROR, path, "Truncated fmt chunk")
            fmt = FMT_FIELDS.unpack(fmt_raw)
        elif tag == DATA_TAG and data_length is None:
            # Declared size may be a streaming placeholder or exceed a truncated file
            data_length = max(0, min(size, file_size - body))

        pos = body + size + (size % 2)

    if fmt is None:
        raise WavReadError(WavErrorKind.MISSING_FORMAT_CHUNK, path, "No fmt chunk found")
    if data_length is None:
        raise WavReadError(WavErrorKind.MISSING_DATA_CHUNK, path, "No data chunk found")

    audio_format, channels, sample_rate, _byte_rate, _block_align, bits_per_sample = fmt
    return WavHeader(
        audio_format=audio_format,
        channels=channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        data_length=data_length,
    )
