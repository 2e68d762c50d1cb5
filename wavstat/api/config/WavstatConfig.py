"""Top-level wavstat configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .LogConfig import LogConfig
from .ScanConfig import ScanConfig


class WavstatConfig(BaseModel):
    """Top-level configuration for wavstat."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanConfig = Field(default_factory=ScanConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get wavstat home directory based on WAVSTAT_HOME or default to ~/.wavstat."""
        home_env = os.environ.get("WAVSTAT_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".wavstat"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def get_logfile_path(cls) -> Path:
        return cls.get_home_dir() / "wavstat.log"

    @classmethod
    def load(cls) -> "WavstatConfig":
        """Load and validate config from file.

        A missing config file yields the defaults for every section.

        Raises:
            ValueError: If the file is not valid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: top level of {path} must be an object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert WavstatConfig instance to a dictionary for serialization."""
        return {
            "scan": self.scan.model_dump(),
            "log": self.log.model_dump(),
        }
