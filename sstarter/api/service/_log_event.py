"""Record service lifecycle events in the unified logfile."""

from ..config.get_home_dir import get_home_dir
from ..log.append_log import append_log, get_logfile_path


def _log_event(level: str, message: str) -> None:
    append_log(get_logfile_path(get_home_dir()), "service", level, message)
