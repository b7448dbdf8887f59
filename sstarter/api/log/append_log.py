"""Unified logfile with entries formatted as ``[TIMESTAMP] [DOMAIN] LEVEL: message``."""

from datetime import datetime, timezone
from pathlib import Path


def get_logfile_path(sstarter_home: Path) -> Path:
    """Get the unified logfile path."""
    return sstarter_home / "logfile"


def append_log(log_path: Path, domain: str, level: str, message: str) -> None:
    """Append a timestamped entry to a logfile.

    Args:
        log_path: Path to the logfile
        domain: Domain name (e.g., 'service', 'guardian')
        level: Log level (DEBUG, INFO, WARN, ERROR)
        message: Log message
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"[{timestamp}] [{domain}] {level}: {message}\n")
    except OSError:
        pass  # Logging should never raise
