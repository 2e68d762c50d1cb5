"""Per-file scan outcomes."""

from dataclasses import dataclass
from pathlib import Path

from ._constants import TRAVERSAL_ERROR


@dataclass(frozen=True)
class ScanSuccess:
    """A WAV file whose duration was computed."""

    path: Path
    duration: float


@dataclass(frozen=True)
class ScanFailure:
    """A WAV file (or directory entry) that could not be read.

    kind is a WavErrorKind value, or TRAVERSAL_ERROR for entries the
    directory walk itself could not list.
    """

    path: Path
    reason: str
    kind: str

    @property
    def warning(self) -> str:
        if self.kind == TRAVERSAL_ERROR:
            return f"Failed to read entry {self.path}: {self.reason}"
        return f"Failed to read WAV file {self.path}: {self.reason}"


ScanOutcome = ScanSuccess | ScanFailure
