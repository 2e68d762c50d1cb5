"""Turn discovered WAV paths into scan outcomes."""

from collections.abc import Iterator
from pathlib import Path

from ...logging_config import get_logger
from ..config.ScanConfig import ScanConfig
from ..wav.calculate_duration import calculate_duration
from ..wav.WavReadError import WavReadError
from .iter_wav_files import iter_wav_files
from .ScanOutcome import ScanFailure, ScanOutcome, ScanSuccess

logger = get_logger("scan")


def scan_directory(root: Path, scan_config: ScanConfig) -> Iterator[ScanOutcome]:
    """Yield one ScanOutcome per WAV file under root, in traversal order.

    Raises:
        OSError: If root itself cannot be listed
    """
    candidates = iter_wav_files(
        root,
        extensions=scan_config.extensions,
        follow_symlinks=scan_config.follow_symlinks,
    )
    return _outcomes(candidates)


def _outcomes(candidates: Iterator[Path | ScanFailure]) -> Iterator[ScanOutcome]:
    for candidate in candidates:
        if isinstance(candidate, ScanFailure):
            logger.debug(candidate.warning)
            yield candidate
            continue
        try:
            duration = calculate_duration(candidate)
        except WavReadError as exc:
            failure = ScanFailure(path=candidate, reason=exc.reason, kind=exc.kind.value)
            logger.debug(failure.warning)
            yield failure
            continue
        yield ScanSuccess(path=candidate, duration=duration)
