"""Kinds of per-file WAV read failures."""

from enum import Enum


class WavErrorKind(str, Enum):
    NOT_A_CONTAINER = "not_a_container"
    MISSING_FORMAT_CHUNK = "missing_format_chunk"
    MISSING_DATA_CHUNK = "missing_data_chunk"
    ZERO_DIVISOR = "zero_divisor"
    IO_ERROR = "io_error"
