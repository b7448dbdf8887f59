"""Fields shared by every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common ``errors``/``warnings`` envelope.

    A failed command reports its exception message in ``errors``; the
    remaining fields then hold empty values rather than being omitted.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages; empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal warnings")
