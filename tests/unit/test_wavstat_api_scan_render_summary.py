"""Unit tests for wavstat.api.scan.render_summary module."""

from pathlib import Path

import pytest

from wavstat.api.scan import ScanFailure, ScanSuccess, render_summary, summarize

pytestmark = pytest.mark.scan


def test_render_populated_summary():
    summary = summarize(
        [
            ScanSuccess(path=Path("a.wav"), duration=45.0),
            ScanSuccess(path=Path("b.wav"), duration=74.0),
            ScanSuccess(path=Path("c.wav"), duration=252.0),
        ]
    )

    assert render_summary(summary) == "\n".join(
        [
            "WAV File Statistics:",
            "====================",
            "Total files processed: 3",
            "Total duration: 6m 11s",
            "Average duration: 2m 3s",
            "Shortest file: 45s",
            "Longest file: 4m 12s",
            "====================",
            "Number of errors/warnings: 0",
        ]
    )


def test_render_empty_summary_shows_no_data_and_no_warnings_section():
    report = render_summary(summarize([]))

    assert "Total files processed: 0" in report
    assert "Total duration: 0s" in report
    assert "Average duration: no data" in report
    assert "Shortest file: no data" in report
    assert "Longest file: no data" in report
    assert "Warnings:" not in report


def test_render_lists_warnings_last():
    summary = summarize(
        [
            ScanFailure(path=Path("x/bad.wav"), reason="Not a RIFF/WAVE file", kind="not_a_container"),
            ScanSuccess(path=Path("good.wav"), duration=45.0),
        ]
    )

    lines = render_summary(summary).splitlines()

    assert lines[-3:] == [
        "",
        "Warnings:",
        f"  - Failed to read WAV file {Path('x/bad.wav')}: Not a RIFF/WAVE file",
    ]
    assert "Number of errors/warnings: 1" in lines
