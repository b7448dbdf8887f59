"""Output schemas for service commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ServiceListOutput(BaseOutputSchema):
    """Output schema for service list command."""
    services: list[str] = Field(..., description="Configured service names")
    config_path: str = Field(..., description="Path to the config file")


class ServiceShowOutput(BaseOutputSchema):
    """Output schema for service show command."""
    name: str = Field(..., description="Service name")
    config: dict[str, Any] = Field(..., description="Service configuration, empty dict if unavailable")
    pid_file: str = Field(..., description="Daemon wrapper PID file, empty string if unavailable")
    helper_pid_file: str = Field(..., description="Helper PID file, empty string if unavailable")
    status_file: str = Field(..., description="Helper status file, empty string if unavailable")
    argv: list[str] = Field(..., description="Helper argv used on start, empty list if unavailable")
    reload_argv: list[str] = Field(..., description="Helper argv used on reload, empty list if unavailable")
    user: str = Field(..., description="User the service runs as, empty string if unavailable")
    group: list[str] = Field(..., description="Groups the service runs as, empty list if unavailable")


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command."""
    name: str = Field(..., description="Service name")
    status: str = Field(..., description="'running', 'not running', or a custom probe status; empty on error")
    running: bool = Field(..., description="Whether the daemon wrapper is alive")
    pid_file: str = Field(..., description="Daemon wrapper PID file, empty string if unavailable")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""
    name: str = Field(..., description="Service name")
    status: str = Field(..., description="Status observed after starting, empty string if unavailable")
    running: bool = Field(..., description="Whether the service is running")
    already_running: bool = Field(..., description="Whether the service was already running")
    pid_file: str = Field(..., description="Daemon wrapper PID file, empty string if unavailable")
    argv: list[str] = Field(..., description="Helper argv launched, empty list if not launched")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""
    name: str = Field(..., description="Service name")
    status: str = Field(..., description="'stopped' or 'not running', empty string on error")
    stopped: bool = Field(..., description="Whether the service is stopped")
    pid_file: str = Field(..., description="Daemon wrapper PID file, empty string if unavailable")


class ServiceReloadOutput(BaseOutputSchema):
    """Output schema for service reload command."""
    name: str = Field(..., description="Service name")
    status: str = Field(..., description="'reloaded' on success, empty string otherwise")
    reloaded: bool = Field(..., description="Whether the reload request was issued")
    argv: list[str] = Field(..., description="Helper argv invoked, empty list if not invoked")


class ServiceRestartOutput(BaseOutputSchema):
    """Output schema for service restart command."""
    name: str = Field(..., description="Service name")
    status: str = Field(..., description="Status observed after restarting, empty string if unavailable")
    restarted: bool = Field(..., description="Whether the service was stopped and started again")
    pid_file: str = Field(..., description="Daemon wrapper PID file, empty string if unavailable")
