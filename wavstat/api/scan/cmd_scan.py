"""Scan command - duration statistics for every WAV file under a directory."""

from collections.abc import Iterator
from pathlib import Path

from ...logging_config import get_logger
from .._output_schemas.scan import ScanOutput
from ..config.WavstatConfig import WavstatConfig
from ..StageResult import StageResult
from .render_summary import render_summary
from .scan_directory import scan_directory
from .StatsSummary import StatsSummary
from .summarize import summarize

logger = get_logger("scan")


def _output(root: Path, summary: StatsSummary, report: str = "", errors: list[str] | None = None) -> dict:
    return ScanOutput(
        errors=errors or [],
        warnings=list(summary.warnings),
        root=str(root),
        count=summary.count,
        total_seconds=summary.total_seconds,
        average_seconds=summary.average_seconds,
        min_seconds=summary.min_seconds,
        max_seconds=summary.max_seconds,
        report=report,
    ).model_dump(mode="python")


def cmd_scan(path: Path, follow_symlinks: bool | None = None) -> StageResult:
    """Scan a directory tree for WAV files and summarize their durations.

    Per-file failures become warnings and do not affect success. A missing
    or unlistable root, or an invalid configuration, fails the command.

    Args:
        path: Root directory to scan
        follow_symlinks: Override scan.follow_symlinks from the config
    """
    root = Path(path).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = WavstatConfig.load()
        except ValueError as e:
            result_obj.result = str(e)
            result_obj.output = _output(root, StatsSummary(), errors=[str(e)])
            result_obj.success = False
            yield (1.0, "Complete")
            return

        scan_config = config.scan
        if follow_symlinks is not None:
            scan_config = scan_config.model_copy(update={"follow_symlinks": follow_symlinks})

        if not root.exists():
            message = f"Provided path does not exist: {root}"
        elif not root.is_dir():
            message = f"Provided path is not a directory: {root}"
        else:
            message = ""
        if message:
            result_obj.result = message
            result_obj.output = _output(root, StatsSummary(), errors=[message])
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.2, f"Scanning {root}...")
        try:
            outcomes = scan_directory(root, scan_config)
        except OSError as e:
            message = f"Cannot scan {root}: {e}"
            result_obj.result = message
            result_obj.output = _output(root, StatsSummary(), errors=[message])
            result_obj.success = False
            yield (1.0, "Complete")
            return

        summary = summarize(outcomes)

        yield (0.9, "Rendering report...")
        logger.info(
            f"Scanned {root}: {summary.count} files, {summary.total_seconds:.3f}s total, "
            f"{len(summary.warnings)} warnings"
        )
        result_obj.result = f"Scanned {summary.count} WAV file(s) with {len(summary.warnings)} warning(s)"
        result_obj.output = _output(root, summary, report=render_summary(summary))
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Scanning {root} for WAV files...",
        progress_callback=do_work,
    )
