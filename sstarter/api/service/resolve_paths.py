"""Derive PID and status file locations for a service."""

from ...constants import DEFAULT_PID_DIR
from .ServiceConfig import ServiceConfig
from .ServicePaths import ServicePaths


def resolve_pid_file(config: ServiceConfig, full_name: str) -> str:
    """Explicit ``pid_file``, else ``/tmp/{app_name}.pid``, else ``/tmp/{full_name}.pid``."""
    if config.pid_file is not None:
        return config.pid_file
    if config.app_name is not None:
        return f"{DEFAULT_PID_DIR}/{config.app_name}.pid"
    return f"{DEFAULT_PID_DIR}/{full_name}.pid"


def resolve_paths(config: ServiceConfig, full_name: str) -> ServicePaths:
    """Resolve all three control-file paths.

    Pure string manipulation: no I/O, same inputs always give the same paths.

    Args:
        config: Service configuration
        full_name: Host-assigned full service name, used when neither
            ``pid_file`` nor ``app_name`` is configured

    Returns:
        ServicePaths with the wrapper PID file, helper PID file and status file
    """
    pid_file = resolve_pid_file(config, full_name)
    helper_pid_file = config.helper_args.get("pid-file")
    status_file = config.helper_args.get("status-file")
    return ServicePaths(
        pid_file=pid_file,
        helper_pid_file=str(helper_pid_file) if helper_pid_file else f"{pid_file}.ss",
        status_file=str(status_file) if status_file else f"{pid_file}.status.ss",
    )
