"""Unit test fixtures.

Builders and helpers live in tests/conftest.py; this module re-exports them.
"""

from tests.conftest import (
    chunk,
    fmt_body,
    run_cmd,
    wav_bytes,
    write_wav,
    write_wav_seconds,
)

__all__ = [
    "chunk",
    "fmt_body",
    "run_cmd",
    "wav_bytes",
    "write_wav",
    "write_wav_seconds",
]
