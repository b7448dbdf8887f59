"""Service stop command - terminates the daemon wrapper."""

from collections.abc import Iterator

from ...constants import STATUS_NOT_RUNNING
from .._output_schemas.service import ServiceStopOutput
from ..StageResult import StageResult
from ._log_event import _log_event
from .get_service import get_service
from .wait_for_status import wait_for_status


def cmd_stop(name: str) -> StageResult:
    """Stop service ``name``. Stopping a service that is not running succeeds."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        pid_file = ""
        try:
            yield (0.1, "Loading configuration...")
            service = get_service(name)
            pid_file = service.pid_file

            yield (0.4, "Stopping daemon...")
            stop_result = service.stop()
            _log_event("INFO", f"Stop {name}: {stop_result}")

            yield (0.7, "Waiting for service to report not running...")
            _status, stopped = wait_for_status(
                service, lambda s: s == STATUS_NOT_RUNNING, service.timeout_options().stop
            )
        except Exception as e:
            yield (1.0, "Complete")
            _log_event("ERROR", f"Failed to stop {name}: {e}")
            result_obj.result = f"Error stopping service '{name}': {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                name=name,
                status="",
                stopped=False,
                pid_file=pid_file,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if not stopped:
            result_obj.result = f"Error: Service '{name}' still reports running after stop"
        elif stop_result == STATUS_NOT_RUNNING:
            result_obj.result = f"Service '{name}' is already stopped"
        else:
            result_obj.result = f"Service '{name}' stopped"
        result_obj.output = ServiceStopOutput(
            errors=[] if stopped else [result_obj.result],
            name=name,
            status=stop_result,
            stopped=stopped,
            pid_file=pid_file,
        ).model_dump(mode="python")
        result_obj.success = stopped

    return StageResult(
        announce=f"Stopping service '{name}'...",
        progress_callback=do_work,
    )
