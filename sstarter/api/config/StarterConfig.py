"""The ``config.json`` file: helper binary, logging and managed services."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.atomic_write import atomic_write_text
from ..service.ServiceConfig import ServiceConfig
from .get_home_dir import get_home_dir
from .HelperConfig import HelperConfig
from .LogConfig import LogConfig


def _describe_first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


class StarterConfig(BaseModel):
    """Top-level configuration.

    ``services`` maps each service's full name (the name used on the command
    line and for default PID files) to its ServiceConfig.
    """

    model_config = ConfigDict(extra="forbid")

    helper: HelperConfig = Field(default_factory=HelperConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    services: dict[str, ServiceConfig] = Field(default_factory=dict)

    @property
    def path(self) -> Path:
        """Where this configuration is loaded from and saved to."""
        return self.get_config_path()

    @classmethod
    def get_config_path(cls) -> Path:
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "StarterConfig":
        """Read and validate ``config.json`` from the home directory.

        Raises:
            ValueError: If the file is missing, is not a JSON object, or fails
                validation. Validation messages name the first offending field.
        """
        path = cls.get_config_path()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ValueError(f"Configuration file not found at {path}") from None
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object, got {type(raw).__name__}")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Configuration validation error: {_describe_first_error(e)}") from e

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form, one key per section; unset service fields are left out."""
        return {
            "helper": self.helper.model_dump(mode="json"),
            "log": self.log.model_dump(mode="json"),
            "services": {name: svc.model_dump(mode="json", exclude_none=True) for name, svc in self.services.items()},
        }

    def save(self) -> None:
        """Write the configuration to ``config.json`` atomically.

        Status probes are stored as import references; lambdas and closures are dropped.

        Raises:
            RuntimeError: If the file cannot be written
        """
        try:
            atomic_write_text(self.get_config_path(), json.dumps(self.to_dict(), indent=4) + "\n")
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e
