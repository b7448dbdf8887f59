"""Service controller that runs a command under the graceful-restart helper."""

import subprocess

from ...constants import DEFAULT_STOP_TIMEOUT, DEFAULT_TERM_TIMEOUT, STATUS_RELOADED
from ...utils.logger import get_logger
from ..config.get_helper_bin import get_helper_bin
from ..daemon._AbstractDaemon import _AbstractDaemon
from ..daemon.Daemon import Daemon
from ..daemon.DaemonSpec import DaemonSpec
from ._AbstractService import _AbstractService
from ._default_identity import default_group, default_user
from .build_command import build_command
from .build_reload_command import build_reload_command
from .resolve_paths import resolve_paths
from .ServiceConfig import ServiceConfig
from .ServicePaths import ServicePaths
from .StatusProbe import probe_status


class ServerStarterService(_AbstractService):
    """Run ``config.command`` under the helper, itself supervised by a daemon wrapper.

    The daemon wrapper's PID file (``pid_file``) tracks the process tree for
    start/stop/status. Reload bypasses the wrapper and asks the helper to
    replace the target process in place.
    """

    def __init__(
        self,
        config: ServiceConfig,
        full_name: str,
        helper_bin: str | None = None,
        daemon: _AbstractDaemon | None = None,
    ):
        """Initialize the controller.

        Args:
            config: Validated service configuration
            full_name: Host-assigned full service name, used for default paths
            helper_bin: Helper command line; defaults to SSTARTER_HELPER_BIN or ``start_server``,
                captured once here
            daemon: Daemonization primitive; defaults to the POSIX guardian implementation
        """
        if not full_name:
            raise ValueError("Service full name is required")
        helper_bin = helper_bin if helper_bin is not None else get_helper_bin()
        if not helper_bin.split():
            raise ValueError("Helper command line must not be empty")
        self.config = config
        self.full_name = full_name
        self.helper_bin = helper_bin
        self._daemon = daemon if daemon is not None else Daemon()
        self._log = get_logger("service")

    @property
    def paths(self) -> ServicePaths:
        return resolve_paths(self.config, self.full_name)

    @property
    def pid_file(self) -> str:
        return self.paths.pid_file

    @property
    def helper_pid_file(self) -> str:
        return self.paths.helper_pid_file

    @property
    def status_file(self) -> str:
        return self.paths.status_file

    def helper_tokens(self) -> list[str]:
        """Helper command line split on whitespace."""
        return self.helper_bin.split()

    def bin(self) -> list[str]:
        """Full helper argv, ending with ``-- <command...>``."""
        return build_command(self.config, self.paths, self.helper_tokens())

    def reload_command(self) -> list[str]:
        """Helper argv requesting an in-place restart."""
        return build_reload_command(self.paths, self.helper_tokens())

    def daemon_spec(self) -> DaemonSpec:
        """Launch descriptor handed to the daemonization primitive."""
        config = self.config
        return DaemonSpec(
            bin=tuple(self.bin()),
            pid_file=self.pid_file,
            term_timeout=DEFAULT_TERM_TIMEOUT,
            cwd=config.working_directory,
            env=config.environment,
            stdout=config.stdout,
            stderr=config.stderr,
            daemon_log=config.daemon_log,
            user=config.user,
            groups=config.group,
        )

    def start(self) -> None:
        spec = self.daemon_spec()
        self._log.info("Starting %s: %s", self.full_name, list(spec.bin))
        self._daemon.start_daemon(spec)

    def stop(self) -> str:
        self._log.info("Stopping %s (pid file %s)", self.full_name, self.pid_file)
        return self._daemon.stop_daemon(self.pid_file, timeout=DEFAULT_STOP_TIMEOUT)

    def status(self) -> str:
        alive = self._daemon.check_daemon(self.pid_file) is not None
        status = probe_status(alive, self.config.status_probe)
        self._log.debug("Status of %s: %s", self.full_name, status)
        return status

    def reload(self) -> str:
        argv = self.reload_command()
        self._log.info("Reloading %s: %s", self.full_name, argv)
        subprocess.run(argv, check=True)
        return STATUS_RELOADED

    def user(self) -> str:
        """Configured user, else the current effective user."""
        return self.config.user if self.config.user is not None else default_user()

    def group(self) -> tuple[str, ...]:
        """Configured groups, else the current effective group."""
        return self.config.group if self.config.group is not None else (default_group(),)
