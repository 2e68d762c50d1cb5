"""Exception raised when a WAV header cannot be used to compute a duration."""

from pathlib import Path

from .WavErrorKind import WavErrorKind


class WavReadError(Exception):
    """A WAV file could not be read.

    Attributes:
        kind: Which check failed
        path: The offending file
        reason: Human-readable description (also the exception message)
    """

    def __init__(self, kind: WavErrorKind, path: Path, reason: str):
        super().__init__(reason)
        self.kind = kind
        self.path = path
        self.reason = reason
