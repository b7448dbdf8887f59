"""Polling policy handed to the caller's retry loop."""

from pydantic import BaseModel, ConfigDict, Field


class TrialPolicy(BaseModel):
    """How many times to poll for a target state, and how long to wait between polls."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    trials: int = Field(15, gt=0, description="Maximum number of status polls")
    step: float = Field(0.1, gt=0, description="Seconds between status polls")


class TimeoutOptions(BaseModel):
    """Polling policy for start and stop."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: TrialPolicy = Field(default_factory=TrialPolicy)
    stop: TrialPolicy = Field(default_factory=TrialPolicy)
