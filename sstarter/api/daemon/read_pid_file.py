"""Read a PID file."""

from pathlib import Path


def read_pid_file(pid_file: Path) -> int | None:
    """Read the PID stored in ``pid_file``.

    Returns:
        The PID, or None if the file is missing, unreadable, or does not hold a positive integer
    """
    try:
        content = pid_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None
    if not content:
        return None
    try:
        pid = int(content.splitlines()[0])
    except ValueError:
        return None
    return pid if pid > 0 else None
