"""Graceful-restart helper configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .get_helper_bin import get_helper_bin


class HelperConfig(BaseModel):
    """Helper binary configuration.

    ``bin`` may hold several whitespace-separated tokens so the helper can be
    invoked through an interpreter (e.g. ``"perl /opt/bin/start_server"``).
    """

    model_config = ConfigDict(extra="forbid")

    bin: str = Field(default_factory=get_helper_bin, description="Helper command line")

    @field_validator("bin")
    @classmethod
    def validate_bin(cls, v: str) -> str:
        if not v.split():
            raise ValueError("helper.bin must not be empty")
        return v

    def tokens(self) -> list[str]:
        """Split the helper command line into argv tokens."""
        return self.bin.split()
