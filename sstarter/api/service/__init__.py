"""Service module - run a command under the graceful-restart helper."""

from .ServerStarterService import ServerStarterService
from .ServiceConfig import ServiceConfig
from .ServiceNotFoundError import ServiceNotFoundError
from .ServicePaths import ServicePaths
from .StatusProbe import StatusProbe
from .TimeoutOptions import TimeoutOptions, TrialPolicy

__all__ = [
    "ServerStarterService",
    "ServiceConfig",
    "ServiceNotFoundError",
    "ServicePaths",
    "StatusProbe",
    "TimeoutOptions",
    "TrialPolicy",
]
