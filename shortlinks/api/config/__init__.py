"""Config API module."""

from .ContextConfig import ContextConfig
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig
from .ShortlinksConfig import ShortlinksConfig

__all__ = ["ContextConfig", "LogConfig", "ScanConfig", "ShortlinksConfig"]
