"""Config show command - one section of config.json, or the list of sections."""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .StarterConfig import StarterConfig


def cmd_show(section: str = "") -> StageResult:
    """Show ``section`` of the configuration; an empty name lists the section names."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(StarterConfig.get_config_path())

        def finish(message: str, content: dict[str, Any], error: str | None = None) -> None:
            result_obj.result = message
            result_obj.output = ConfigShowOutput(
                errors=[error] if error else [],
                section=section,
                content=content,
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.success = error is None

        yield (0.3, "Loading configuration...")
        try:
            sections = StarterConfig.load().to_dict()
        except ValueError as e:
            yield (1.0, "Complete")
            finish(f"Error loading configuration: {e}", {}, str(e))
            return

        yield (1.0, "Complete")
        if not section:
            finish(f"Found {len(sections)} section(s)", {"sections": list(sections)})
        elif section in sections:
            finish(f"Retrieved configuration for '{section}'", sections[section])
        else:
            finish(f"Section '{section}' not found", {}, f"Unknown section: {section}")

    announce = f"Showing configuration for section '{section}'..." if section else "Listing configuration sections..."
    return StageResult(announce=announce, progress_callback=do_work)
