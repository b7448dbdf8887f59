"""Guardian process: records itself in the PID file and supervises one command."""

import os
import signal
import subprocess
import time
from contextlib import ExitStack, suppress
from pathlib import Path
from typing import Any

from ..log.append_log import append_log
from ._identity_kwargs import _identity_kwargs
from .DaemonSpec import DaemonSpec
from .read_pid_file import read_pid_file
from .write_pid_file import write_pid_file

_POLL_INTERVAL = 0.1


def _guardian_main(spec: DaemonSpec) -> int:
    """Run the command in ``spec`` until it exits or the guardian receives SIGTERM.

    On SIGTERM the command gets SIGTERM, then SIGKILL after ``spec.term_timeout``
    seconds. The PID file is removed on the way out.

    Returns:
        Exit status for the guardian process
    """
    pid_file = Path(spec.pid_file)
    daemon_log = Path(spec.daemon_log) if spec.daemon_log else None

    def log(level: str, message: str) -> None:
        if daemon_log is not None:
            append_log(daemon_log, "guardian", level, message)

    stop_requested = False

    def handle_stop(signum, _frame):
        nonlocal stop_requested
        stop_requested = True
        log("INFO", f"Received signal {signum}")

    signal.signal(signal.SIGTERM, handle_stop)
    signal.signal(signal.SIGINT, handle_stop)

    write_pid_file(pid_file, os.getpid())
    log("INFO", f"Guardian started (pid {os.getpid()})")

    env = dict(os.environ)
    if spec.env:
        env.update(spec.env)

    try:
        with ExitStack() as stack:
            stdout: Any = subprocess.DEVNULL
            stderr: Any = subprocess.DEVNULL
            if spec.stdout:
                stdout = stack.enter_context(open(spec.stdout, "ab"))  # noqa: SIM115
            if spec.stderr:
                stderr = stack.enter_context(open(spec.stderr, "ab"))  # noqa: SIM115

            try:
                child = subprocess.Popen(
                    list(spec.bin),
                    cwd=spec.cwd,
                    env=env,
                    stdin=subprocess.DEVNULL,
                    stdout=stdout,
                    stderr=stderr,
                    **_identity_kwargs(spec),
                )
            except (OSError, ValueError) as exc:
                log("ERROR", f"Failed to spawn {list(spec.bin)}: {exc}")
                return 1

            log("INFO", f"Spawned {list(spec.bin)} (pid {child.pid})")

            while child.poll() is None and not stop_requested:
                time.sleep(_POLL_INTERVAL)

            if child.poll() is None:
                child.terminate()
                try:
                    child.wait(timeout=spec.term_timeout)
                except subprocess.TimeoutExpired:
                    log("WARN", f"Command did not exit within {spec.term_timeout}s, sending SIGKILL")
                    child.kill()
                    child.wait()

            log("INFO", f"Command exited with code {child.returncode}")
            return 0 if stop_requested else child.returncode
    finally:
        if read_pid_file(pid_file) == os.getpid():
            with suppress(FileNotFoundError):
                pid_file.unlink()
        log("INFO", "Guardian exiting")
