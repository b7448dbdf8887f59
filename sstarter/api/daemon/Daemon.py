"""POSIX daemonization primitive backed by a guardian process."""

import os
import signal
import subprocess
import sys
import time
from contextlib import suppress
from pathlib import Path

from ...constants import DEFAULT_STOP_TIMEOUT, STATUS_NOT_RUNNING, STATUS_STOPPED
from ...utils.logger import get_logger
from ._AbstractDaemon import _AbstractDaemon
from ._pid_running import _pid_running
from .DaemonError import DaemonError
from .DaemonSpec import DaemonSpec
from .read_pid_file import read_pid_file


class Daemon(_AbstractDaemon):
    """Launch commands under a detached guardian that owns the PID file.

    The guardian (``python -m sstarter.api.daemon._guardian_runner``) runs in
    its own session, writes its PID to ``spec.pid_file``, and forwards
    termination to the command it supervises.
    """

    def __init__(self, startup_timeout: float = 5.0, poll_interval: float = 0.1):
        self.startup_timeout = startup_timeout
        self.poll_interval = poll_interval
        self._log = get_logger("daemon")

    def _guardian_argv(self, spec: DaemonSpec) -> list[str]:
        return [sys.executable, "-m", "sstarter.api.daemon._guardian_runner", spec.model_dump_json()]

    def start_daemon(self, spec: DaemonSpec) -> int:
        existing_pid = self.check_daemon(spec.pid_file)
        if existing_pid is not None:
            raise DaemonError(f"Daemon already running (pid {existing_pid}, pid file {spec.pid_file})")

        Path(spec.pid_file).parent.mkdir(parents=True, exist_ok=True)
        self._log.info("Starting daemon %s (pid file %s)", list(spec.bin), spec.pid_file)
        try:
            proc = subprocess.Popen(
                self._guardian_argv(spec),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,  # Detach from parent process group
            )
        except OSError as e:
            raise DaemonError(f"Failed to spawn daemon wrapper: {e}") from e

        deadline = time.monotonic() + self.startup_timeout
        while time.monotonic() < deadline:
            if read_pid_file(Path(spec.pid_file)) == proc.pid and _pid_running(proc.pid):
                self._log.info("Daemon started (pid %d)", proc.pid)
                return proc.pid
            if proc.poll() is not None:
                raise DaemonError(
                    f"Daemon wrapper exited with code {proc.returncode} before recording {spec.pid_file}"
                )
            time.sleep(self.poll_interval)

        raise DaemonError(f"Daemon did not record its pid in {spec.pid_file} within {self.startup_timeout}s")

    def stop_daemon(self, pid_file: str, timeout: float = DEFAULT_STOP_TIMEOUT) -> str:
        path = Path(pid_file)
        pid = self.check_daemon(pid_file)
        if pid is None:
            # Stale or missing pid file
            with suppress(FileNotFoundError):
                path.unlink()
            return STATUS_NOT_RUNNING

        self._log.info("Stopping daemon (pid %d, timeout %ss)", pid, timeout)
        try:
            os.kill(pid, signal.SIGTERM)
        except ProcessLookupError:
            return STATUS_NOT_RUNNING
        except PermissionError as e:
            raise DaemonError(f"Not permitted to stop daemon (pid {pid}): {e}") from e

        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if not _pid_running(pid):
                if read_pid_file(path) == pid:
                    with suppress(FileNotFoundError):
                        path.unlink()
                self._log.info("Daemon stopped (pid %d)", pid)
                return STATUS_STOPPED
            time.sleep(self.poll_interval)

        raise DaemonError(f"Failed to stop daemon (pid {pid}) within {timeout}s")

    def check_daemon(self, pid_file: str) -> int | None:
        pid = read_pid_file(Path(pid_file))
        if pid is not None and _pid_running(pid):
            return pid
        return None
