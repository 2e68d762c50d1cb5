"""Shared pytest configuration and fixtures for all tests."""

import io
import json
import struct
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "cli: tests driving the command line entry point")
    config.addinivalue_line("markers", "wav: WAV header parsing")
    config.addinivalue_line("markers", "scan: directory scanning and statistics")
    config.addinivalue_line("markers", "config: configuration loading")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def wavstat_home(tmp_path_factory, monkeypatch) -> Path:
    """Point WAVSTAT_HOME at an empty per-test directory outside tmp_path.

    Returns:
        Path to the wavstat home directory
    """
    home = tmp_path_factory.mktemp("wavstat_home")
    monkeypatch.setenv("WAVSTAT_HOME", str(home))
    return home


@pytest.fixture
def write_config(wavstat_home: Path):
    """Write a config.json into the test home directory."""

    def _write(data: dict) -> Path:
        path = wavstat_home / "config.json"
        path.write_text(json.dumps(data))
        return path

    return _write


# =============================================================================
# WAV Builders
# =============================================================================


def chunk(tag: bytes, body: bytes, size: int | None = None) -> bytes:
    """Build a RIFF sub-chunk, padding odd bodies."""
    declared = len(body) if size is None else size
    pad = b"\x00" if len(body) % 2 else b""
    return struct.pack("<4sI", tag, declared) + body + pad


def fmt_body(
    sample_rate: int = 8000,
    channels: int = 1,
    bits_per_sample: int = 16,
    audio_format: int = 1,
) -> bytes:
    block_align = channels * bits_per_sample // 8
    byte_rate = sample_rate * block_align
    return struct.pack("<HHIIHH", audio_format, channels, sample_rate, byte_rate, block_align, bits_per_sample)


def wav_bytes(
    sample_rate: int = 8000,
    channels: int = 1,
    bits_per_sample: int = 16,
    data_length: int = 0,
    chunks_before_data: tuple[bytes, ...] = (),
) -> bytes:
    """Build a complete RIFF/WAVE file with a silent data chunk."""
    body = (
        b"WAVE"
        + chunk(b"fmt ", fmt_body(sample_rate, channels, bits_per_sample))
        + b"".join(chunks_before_data)
        + chunk(b"data", b"\x00" * data_length)
    )
    return b"RIFF" + struct.pack("<I", len(body)) + body


def write_wav(path: Path, **kwargs) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(wav_bytes(**kwargs))
    return path


def write_wav_seconds(path: Path, seconds: int, sample_rate: int = 100, channels: int = 1) -> Path:
    """Write an 8-bit WAV of the given whole-second duration (kept small on disk)."""
    return write_wav(
        path,
        sample_rate=sample_rate,
        channels=channels,
        bits_per_sample=8,
        data_length=seconds * sample_rate * channels,
    )


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def run_cli(args):
    """Execute CLI command and capture stdout/stderr."""
    from wavstat.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        try:
            rc = main(args)
        except SystemExit as exc:  # commands exit through sys.exit
            rc = exc.code if isinstance(exc.code, int) else 0
    return rc, out_buf.getvalue(), err_buf.getvalue()
