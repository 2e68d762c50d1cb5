"""Config API module."""

from .LogConfig import LogConfig
from .ScanConfig import ScanConfig
from .WavstatConfig import WavstatConfig

__all__ = ["LogConfig", "ScanConfig", "WavstatConfig"]
