"""Build the helper argv that restarts the target in place."""

from .ServicePaths import ServicePaths


def build_reload_command(paths: ServicePaths, helper_tokens: list[str]) -> list[str]:
    """Build ``<helper...> --restart --pid-file <helper pid> --status-file <status>``."""
    return [
        *helper_tokens,
        "--restart",
        "--pid-file",
        paths.helper_pid_file,
        "--status-file",
        paths.status_file,
    ]
