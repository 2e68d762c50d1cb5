"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _handle_stage_result(
    func: F,
    display_format: str = "text",
    text_printer: Callable[[CLIDisplay, dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout): text_printer for the text format, otherwise JSON/YAML

    Args:
        func: Function that returns StageResult
        display_format: One of DISPLAY_FORMATS, as given by --display
        text_printer: Renders the output dict when the display format is "text";
            without one, text falls back to YAML
    """
    if display_format not in DISPLAY_FORMATS:
        raise ValueError(f"Invalid display_format value: {display_format!r}")

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        output_format = display_format

        result_printer = None
        if output_format == "text":
            if text_printer is not None:
                result_printer = functools.partial(text_printer, display)
            else:
                output_format = "yaml"

        _run_single_execution(func, args, kwargs, display, output_format, result_printer)

    return wrapper  # type: ignore[return-value]
