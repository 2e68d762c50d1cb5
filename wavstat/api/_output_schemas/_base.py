"""Base output schema with standard errors and warnings fields."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Base schema for all command outputs.

    Every output carries errors and warnings lists; unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Fatal error messages, empty list if none")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal warning messages, empty list if none")
