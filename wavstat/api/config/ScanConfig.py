"""Scan configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScanConfig(BaseModel):
    """Which files a scan picks up and how it walks the tree."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(default_factory=lambda: [".wav"], description="File extensions treated as WAV")
    follow_symlinks: bool = Field(False, description="Descend into symlinked directories")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one extension is required")
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext or ext == ".":
                raise ValueError("extensions must not be empty")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized
