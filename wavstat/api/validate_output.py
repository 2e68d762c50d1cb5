"""Validate a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize output for a cmd_* function.

    The schema is looked up by the function's API package (wavstat.api.<domain>)
    and its name without the "cmd_" prefix.

    Raises:
        ValueError: If no schema is registered or the output does not match it
    """
    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or module_parts[:2] != ["wavstat", "api"]:
        raise ValueError(f"Cannot derive output schema domain from {func.__module__!r}")
    domain = module_parts[2]
    command_name = func.__name__.removeprefix("cmd_")

    schema = get_output_schema(domain, command_name)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")

    try:
        return schema(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(str(e)) from e
