"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for the version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "version", ConfigVersionOutput)
