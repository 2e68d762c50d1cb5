"""Scan constants (private)."""

TRAVERSAL_ERROR = "traversal_error"

REPORT_TITLE = "WAV File Statistics:"
REPORT_RULE = "=" * 20
NO_DATA = "no data"
