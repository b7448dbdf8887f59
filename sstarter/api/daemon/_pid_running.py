"""Check if a process ID is running."""

import os
from contextlib import suppress


def _pid_running(pid: int) -> bool:
    """Check if a process ID is running.

    Exited children of the current process are reaped first so they do not
    linger as zombies that still answer signal 0.

    Args:
        pid: Process ID to check

    Returns:
        True if process is running, False otherwise
    """
    if pid <= 0:
        return False
    with suppress(ChildProcessError):
        reaped, _status = os.waitpid(pid, os.WNOHANG)
        if reaped == pid:
            return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        # Process exists but belongs to another user
        return True
    return True
