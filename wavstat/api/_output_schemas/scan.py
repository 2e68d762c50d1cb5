"""Output schemas for scan commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ScanOutput(BaseOutputSchema):
    """Output schema for the scan command.

    Output structure:
    - errors: list[str] - fatal errors, empty list when the scan ran
    - warnings: list[str] - per-file failures in traversal order
    - root: str - directory that was scanned
    - count: int - number of WAV files whose duration was computed
    - total_seconds: float - sum of durations
    - average_seconds / min_seconds / max_seconds: float or None when count is 0
    - report: str - rendered text report, empty string if the scan did not run
    """

    root: str = Field(..., description="Directory that was scanned")
    count: int = Field(..., ge=0, description="Number of WAV files read successfully")
    total_seconds: float = Field(..., ge=0, description="Sum of durations in seconds")
    average_seconds: float | None = Field(..., description="Mean duration, None when no files were read")
    min_seconds: float | None = Field(..., description="Shortest duration, None when no files were read")
    max_seconds: float | None = Field(..., description="Longest duration, None when no files were read")
    report: str = Field(..., description="Rendered text report")


register_output_schema("scan", "scan", ScanOutput)
