"""Service status command - reports liveness or the custom probe's status."""

from collections.abc import Iterator

from ...constants import STATUS_RUNNING
from .._output_schemas.service import ServiceStatusOutput
from ..StageResult import StageResult
from .get_service import get_service


def cmd_status(name: str) -> StageResult:
    """Get status of service ``name``.

    A failing custom status probe makes the command fail rather than report
    the service as not running.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        pid_file = ""
        try:
            yield (0.2, "Loading configuration...")
            service = get_service(name)
            pid_file = service.pid_file

            yield (0.6, "Checking status...")
            status = service.status()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking status of service '{name}': {e}"
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                name=name,
                status="",
                running=False,
                pid_file=pid_file,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service '{name}': {status}"
        result_obj.output = ServiceStatusOutput(
            name=name,
            status=status,
            running=status == STATUS_RUNNING,
            pid_file=pid_file,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Checking status of service '{name}'...",
        progress_callback=do_work,
    )
