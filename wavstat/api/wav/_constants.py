"""RIFF/WAVE layout constants (private)."""

import struct

RIFF_TAG = b"RIFF"
WAVE_TAG = b"WAVE"
FMT_TAG = b"fmt "
DATA_TAG = b"data"

RIFF_HEADER_SIZE = 12
CHUNK_HEADER = struct.Struct("<4sI")
# format tag, channels, sample rate, byte rate, block align, bits per sample
FMT_FIELDS = struct.Struct("<HHIIHH")
