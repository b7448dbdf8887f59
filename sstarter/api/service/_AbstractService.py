"""Abstract interface the host depends on to control a service."""

from abc import ABC, abstractmethod

from .TimeoutOptions import TimeoutOptions


class _AbstractService(ABC):
    """Control operations for one supervised service.

    Calls are synchronous and must be serialized per service by the caller.
    """

    @abstractmethod
    def start(self) -> None:
        """Start the service. Failures propagate."""
        pass

    @abstractmethod
    def stop(self) -> str:
        """Stop the service. Stopping a service that is not running succeeds."""
        pass

    @abstractmethod
    def status(self) -> str:
        """Return ``"running"``, ``"not running"``, or a custom status string."""
        pass

    @abstractmethod
    def reload(self) -> str:
        """Reload the service without stopping it."""
        pass

    def timeout_options(self) -> TimeoutOptions:
        """Polling policy for the caller's start/stop confirmation loop."""
        return TimeoutOptions()
