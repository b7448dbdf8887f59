"""Write a PID file atomically."""

from pathlib import Path

from ...utils.atomic_write import atomic_write_text


def write_pid_file(pid_file: Path, pid: int) -> None:
    """Record ``pid`` in ``pid_file`` as a decimal number followed by a newline."""
    atomic_write_text(pid_file, f"{pid}\n")
