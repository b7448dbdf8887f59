"""Launch descriptor for a managed daemon."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_TERM_TIMEOUT


class DaemonSpec(BaseModel):
    """Everything the daemon wrapper needs to launch and supervise one command."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    bin: tuple[str, ...] = Field(..., description="argv of the supervised command")
    pid_file: str = Field(..., description="PID file recording the wrapper process")
    term_timeout: float = Field(
        DEFAULT_TERM_TIMEOUT, gt=0, description="Seconds between SIGTERM and SIGKILL when stopping the command"
    )
    cwd: str | None = Field(None, description="Working directory for the command")
    env: dict[str, str] | None = Field(None, description="Extra environment variables for the command")
    stdout: str | None = Field(None, description="File receiving the command's stdout")
    stderr: str | None = Field(None, description="File receiving the command's stderr")
    daemon_log: str | None = Field(None, description="Log file for the wrapper's own lifecycle messages")
    user: str | None = Field(None, description="User to run the command as")
    groups: tuple[str, ...] | None = Field(None, description="Primary group followed by supplementary groups")

    @field_validator("bin")
    @classmethod
    def validate_bin(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v or not v[0]:
            raise ValueError("daemon bin must name a program")
        return v

    @field_validator("pid_file")
    @classmethod
    def validate_pid_file(cls, v: str) -> str:
        if not v:
            raise ValueError("daemon pid_file is required")
        return v
