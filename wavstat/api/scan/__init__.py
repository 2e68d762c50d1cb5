"""Directory scanning and duration statistics."""

from .format_duration import format_duration
from .iter_wav_files import iter_wav_files
from .render_summary import render_summary
from .scan_directory import scan_directory
from .ScanOutcome import ScanFailure, ScanOutcome, ScanSuccess
from .StatsSummary import StatsSummary
from .summarize import summarize

__all__ = [
    "ScanFailure",
    "ScanOutcome",
    "ScanSuccess",
    "StatsSummary",
    "format_duration",
    "iter_wav_files",
    "render_summary",
    "scan_directory",
    "summarize",
]
