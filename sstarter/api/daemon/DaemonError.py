"""Daemonization failures."""


class DaemonError(RuntimeError):
    """Raised when a daemon cannot be started, confirmed, or stopped."""
