"""Resolved control-file locations for one service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServicePaths:
    """File-system locations of a service's control state."""

    pid_file: str
    """PID file of the daemon wrapper."""

    helper_pid_file: str
    """PID file written by the graceful-restart helper."""

    status_file: str
    """Status file written by the graceful-restart helper."""
