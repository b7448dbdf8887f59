"""Log section of the config file."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Level for ``sstarter.log``."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")

    def python_level(self) -> int:
        """Numeric level understood by the ``logging`` module."""
        return logging.WARNING if self.level == "WARN" else getattr(logging, self.level)
