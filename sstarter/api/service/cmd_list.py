"""Service list command - names of configured services."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceListOutput
from ..config.StarterConfig import StarterConfig
from ..StageResult import StageResult


def cmd_list() -> StageResult:
    """List configured services."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = str(StarterConfig.get_config_path())
        try:
            config = StarterConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = ServiceListOutput(
                errors=[str(e)],
                services=[],
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        names = sorted(config.services)
        yield (1.0, "Complete")
        result_obj.result = f"Found {len(names)} service(s)"
        result_obj.output = ServiceListOutput(services=names, config_path=config_path).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing services...", progress_callback=do_work)
