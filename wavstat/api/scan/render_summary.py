"""Render a StatsSummary as the plain-text report."""

from ._constants import NO_DATA, REPORT_RULE, REPORT_TITLE
from .format_duration import format_duration
from .StatsSummary import StatsSummary


def _fmt(seconds: float | None) -> str:
    return NO_DATA if seconds is None else format_duration(seconds)


def render_summary(summary: StatsSummary) -> str:
    """Return the multi-line statistics report, warnings last."""
    lines = [
        REPORT_TITLE,
        REPORT_RULE,
        f"Total files processed: {summary.count}",
        f"Total duration: {format_duration(summary.total_seconds)}",
        f"Average duration: {_fmt(summary.average_seconds)}",
        f"Shortest file: {_fmt(summary.min_seconds)}",
        f"Longest file: {_fmt(summary.max_seconds)}",
        REPORT_RULE,
        f"Number of errors/warnings: {len(summary.warnings)}",
    ]
    if summary.warnings:
        lines.append("")
        lines.append("Warnings:")
        lines.extend(f"  - {warning}" for warning in summary.warnings)
    return "\n".join(lines)
