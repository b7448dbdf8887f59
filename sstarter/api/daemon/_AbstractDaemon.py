"""Abstract base class for daemonization primitives."""

from abc import ABC, abstractmethod

from .DaemonSpec import DaemonSpec


class _AbstractDaemon(ABC):
    """Fork/exec a command as a tracked background process and manage it through its PID file."""

    @abstractmethod
    def start_daemon(self, spec: DaemonSpec) -> int:
        """Launch the daemon described by ``spec`` and record it in ``spec.pid_file``.

        Returns:
            PID recorded in the PID file

        Raises:
            DaemonError: If the daemon is already running, cannot be spawned,
                or does not confirm startup
        """
        pass

    @abstractmethod
    def stop_daemon(self, pid_file: str, timeout: float) -> str:
        """Terminate the process recorded in ``pid_file``.

        Returns:
            ``"stopped"`` if a live process was terminated, ``"not running"`` otherwise

        Raises:
            DaemonError: If the process is still alive after ``timeout`` seconds
        """
        pass

    @abstractmethod
    def check_daemon(self, pid_file: str) -> int | None:
        """Return the PID recorded in ``pid_file`` if that process is alive, else None."""
        pass
