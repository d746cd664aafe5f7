"""Config API module."""

from .HostsvcConfig import HostsvcConfig
from .LogConfig import LogConfig

__all__ = ["HostsvcConfig", "LogConfig"]
