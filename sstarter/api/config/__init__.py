"""Config module - top-level configuration file and home directory."""

from .get_home_dir import get_home_dir
from .HelperConfig import HelperConfig
from .LogConfig import LogConfig

__all__ = ["HelperConfig", "LogConfig", "get_home_dir"]
