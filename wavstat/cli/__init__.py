"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from wavstat.api.config.WavstatConfig import WavstatConfig
    from wavstat.cli._create_app import _create_app
    from wavstat.logging_config import setup_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from wavstat.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"wavstat {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    try:
        config = WavstatConfig.load()
    except ValueError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        return 1

    log_file = WavstatConfig.get_logfile_path() if config.log.file else None
    try:
        setup_logging(level=config.log.level, log_file=log_file)
    except OSError as e:
        # An unwritable home must not block a scan; keep logging on stderr
        setup_logging(level=config.log.level)
        typer.echo(f"Warning: cannot open log file {log_file}: {e}", err=True)

    app = _create_app()
    try:
        rc = app(argv, prog_name="wavstat", standalone_mode=False)
    except typer.TyperException as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rc if isinstance(rc, int) else 0
