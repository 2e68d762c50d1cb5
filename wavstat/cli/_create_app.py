"""Create the main Typer CLI app."""

from pathlib import Path

import typer

from wavstat.api.scan.cmd_scan import cmd_scan

from ._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from .display import CLIDisplay


def _print_report(display: CLIDisplay, output: dict) -> None:
    """Write the rendered scan report; failed scans have none."""
    if output.get("report"):
        display.text_output(output["report"])


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Duration statistics for the WAV files under a directory",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command(name="scan")
    def scan_cmd(
        path: Path = typer.Argument(..., help="Root directory to scan for WAV files"),
        follow_symlinks: bool | None = typer.Option(
            None,
            "--follow-symlinks/--no-follow-symlinks",
            help="Descend into symlinked directories (default from config)",
        ),
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        """Scan PATH recursively and report WAV duration statistics."""
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        run_scan = _handle_stage_result(cmd_scan, display_format=display, text_printer=_print_report)
        run_scan(path, follow_symlinks=follow_symlinks)

    return app
