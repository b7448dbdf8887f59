"""Log module - unified logfile shared by all sstarter domains."""

from .append_log import append_log, get_logfile_path

__all__ = ["append_log", "get_logfile_path"]
