"""Running duration statistics over scan outcomes."""

from dataclasses import dataclass, field

from .ScanOutcome import ScanFailure, ScanOutcome, ScanSuccess


@dataclass
class StatsSummary:
    """Accumulator for folded scan outcomes.

    min_seconds and max_seconds stay None until the first success; average
    is None while count is 0.
    """

    count: int = 0
    total_seconds: float = 0.0
    min_seconds: float | None = None
    max_seconds: float | None = None
    warnings: list[str] = field(default_factory=list)

    def fold(self, outcome: ScanOutcome) -> None:
        """Fold one outcome into the summary."""
        if isinstance(outcome, ScanSuccess):
            duration = outcome.duration
            self.count += 1
            self.total_seconds += duration
            if self.min_seconds is None or duration < self.min_seconds:
                self.min_seconds = duration
            if self.max_seconds is None or duration > self.max_seconds:
                self.max_seconds = duration
        elif isinstance(outcome, ScanFailure):
            self.warnings.append(outcome.warning)
        else:
            raise TypeError(f"Unsupported scan outcome: {outcome!r}")

    @property
    def average_seconds(self) -> float | None:
        if self.count == 0:
            return None
        return self.total_seconds / self.count
