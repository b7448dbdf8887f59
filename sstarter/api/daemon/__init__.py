"""Daemon module - fork/exec a command as a tracked background process."""

from .Daemon import Daemon
from .DaemonError import DaemonError
from .DaemonSpec import DaemonSpec

__all__ = [
    "Daemon",
    "DaemonError",
    "DaemonSpec",
]
