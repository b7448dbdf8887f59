"""Service configuration with Pydantic validation."""

import functools
import importlib
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def _resolve_probe_reference(reference: str) -> Callable[[], str]:
    """Import a ``package.module:function`` reference (``package.module.function`` also accepted)."""
    module_name, sep, attr = reference.partition(":")
    if not sep:
        module_name, _, attr = reference.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"status_probe must look like 'package.module:function', got {reference!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"status_probe module {module_name!r} cannot be imported: {e}") from e
    try:
        probe = functools.reduce(getattr, attr.split("."), module)
    except AttributeError as e:
        raise ValueError(f"status_probe {attr!r} not found in module {module_name!r}") from e
    if not callable(probe):
        raise ValueError(f"status_probe {reference!r} is not callable")
    return probe


class ServiceConfig(BaseModel):
    """What to run under the graceful-restart helper and how.

    Validated once at construction and immutable afterwards. Everything derived
    from it (PID file locations, helper argv) is recomputed on demand.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    app_name: str | None = Field(None, description="Logical name used to derive the default PID file")
    command: tuple[str, ...] = Field(..., description="Target program and its arguments, placed after '--'")
    helper_args: dict[str, str | int | float | None] = Field(
        default_factory=dict, description="Options passed to the helper as --key value (-k value for one-letter keys)"
    )
    user: str | None = Field(None, description="User to run the daemon as")
    group: tuple[str, ...] | None = Field(None, description="Group(s) to run the daemon as")
    working_directory: str | None = Field(None, description="Working directory for the daemon")
    environment: dict[str, str] | None = Field(None, description="Extra environment variables for the daemon")
    daemon_log: str | None = Field(None, description="Log file for the daemon wrapper")
    stdout: str | None = Field(None, description="File receiving the daemon's stdout")
    stderr: str | None = Field(None, description="File receiving the daemon's stderr")
    pid_file: str | None = Field(None, description="Explicit PID file for the daemon wrapper")
    status_probe: Callable[[], str] | None = Field(
        None, description="Custom health check, consulted only while the daemon is alive"
    )

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("command is required: there must be something to run")
        if not v[0]:
            raise ValueError("command[0] must name a program")
        return v

    @field_validator("helper_args", mode="before")
    @classmethod
    def validate_helper_args(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError(f"helper_args must be a dict, got {type(v).__name__}")
        for key, value in v.items():
            if not isinstance(key, str) or not key:
                raise ValueError(f"helper_args keys must be non-empty strings, got {key!r}")
            if key.startswith("-") or any(c.isspace() for c in key):
                raise ValueError(f"helper_args key {key!r} must be a bare option name (no dashes prefix, no spaces)")
            if isinstance(value, bool):
                raise ValueError(f"helper_args[{key!r}] must be a string or number, got bool")
        return v

    @field_validator("group", mode="before")
    @classmethod
    def normalize_group(cls, v: Any) -> Any:
        # A single group and a list of groups both end up as a tuple
        if v is None:
            return None
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"group must be a string or a list of strings, got {type(v).__name__}")
        if not v:
            raise ValueError("group list must not be empty")
        if not all(isinstance(g, str) and g for g in v):
            raise ValueError(f"group entries must be non-empty strings, got {list(v)!r}")
        return tuple(v)

    @field_validator("status_probe", mode="before")
    @classmethod
    def resolve_status_probe(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _resolve_probe_reference(v)
        return v

    @field_serializer("status_probe")
    def serialize_status_probe(self, probe: Callable[[], str] | None) -> str | None:
        # Only importable functions survive serialization; lambdas and closures become None
        if probe is None:
            return None
        module = getattr(probe, "__module__", None)
        qualname = getattr(probe, "__qualname__", "")
        if not module or not qualname or "<" in qualname:
            return None
        return f"{module}:{qualname}"
