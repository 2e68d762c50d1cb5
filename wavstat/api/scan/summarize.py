"""Fold a sequence of scan outcomes into a StatsSummary."""

from collections.abc import Iterable

from .ScanOutcome import ScanOutcome
from .StatsSummary import StatsSummary


def summarize(outcomes: Iterable[ScanOutcome]) -> StatsSummary:
    """Consume outcomes once, in order, and return the finished summary."""
    summary = StatsSummary()
    for outcome in outcomes:
        summary.fold(outcome)
    return summary
