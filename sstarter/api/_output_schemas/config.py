"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""
    section: str = Field(..., description="Requested section, empty string when listing sections")
    content: dict[str, Any] = Field(..., description="Section content, or {'sections': [...]} when listing")
    config_path: str = Field(..., description="Path to the config file")
