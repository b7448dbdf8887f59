"""Service show command - resolved paths and helper command lines."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceShowOutput
from ..StageResult import StageResult
from .get_service import get_service


def cmd_show(name: str) -> StageResult:
    """Show the configuration, derived file locations, and helper argv of service ``name``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        try:
            yield (0.3, "Loading configuration...")
            service = get_service(name)
            yield (0.7, "Resolving paths...")
            paths = service.paths
            output = ServiceShowOutput(
                name=name,
                config=service.config.model_dump(mode="json", exclude_none=True),
                pid_file=paths.pid_file,
                helper_pid_file=paths.helper_pid_file,
                status_file=paths.status_file,
                argv=service.bin(),
                reload_argv=service.reload_command(),
                user=service.user(),
                group=list(service.group()),
            )
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error showing service '{name}': {e}"
            result_obj.output = ServiceShowOutput(
                errors=[str(e)],
                name=name,
                config={},
                pid_file="",
                helper_pid_file="",
                status_file="",
                argv=[],
                reload_argv=[],
                user="",
                group=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service '{name}'"
        result_obj.output = output.model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Showing service '{name}'...", progress_callback=do_work)
