"""Build the helper argv that launches the target command."""

from .ServiceConfig import ServiceConfig
from .ServicePaths import ServicePaths


def option_flag(key: str) -> str:
    """Render an option name as ``-k`` for one-letter keys, ``--key`` otherwise."""
    return f"-{key}" if len(key) == 1 else f"--{key}"


def build_command(config: ServiceConfig, paths: ServicePaths, helper_tokens: list[str]) -> list[str]:
    """Build ``<helper...> [--key value]... -- <command...>``.

    ``pid-file`` and ``status-file`` always come first and always carry a
    value (the resolved paths). The other helper options follow in
    configuration order; options whose value is None are dropped. The
    command tokens are appended verbatim after the ``--`` terminator.

    Args:
        config: Service configuration
        paths: Resolved control-file paths for the service
        helper_tokens: Helper command line, already split into tokens

    Returns:
        argv suitable for direct execution (no shell)
    """
    options: dict[str, str | int | float | None] = {
        "pid-file": paths.helper_pid_file,
        "status-file": paths.status_file,
    }
    for key, value in config.helper_args.items():
        if key not in options:
            options[key] = value

    argv = list(helper_tokens)
    for key, value in options.items():
        if value is None:
            continue
        argv.extend([option_flag(key), str(value)])
    argv.append("--")
    argv.extend(config.command)
    return argv
