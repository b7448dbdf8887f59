"""Service restart command - full stop/start cycle."""

from collections.abc import Iterator

from ...constants import STATUS_NOT_RUNNING, STATUS_RUNNING
from .._output_schemas.service import ServiceRestartOutput
from ..StageResult import StageResult
from ._log_event import _log_event
from .get_service import get_service
from .wait_for_status import wait_for_status


def cmd_restart(name: str) -> StageResult:
    """Stop then start service ``name``, confirming each step.

    Unlike reload, this terminates the daemon wrapper and the helper.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        pid_file = ""
        try:
            yield (0.1, "Loading configuration...")
            service = get_service(name)
            pid_file = service.pid_file
            options = service.timeout_options()

            yield (0.3, "Stopping daemon...")
            service.stop()
            _status, stopped = wait_for_status(service, lambda s: s == STATUS_NOT_RUNNING, options.stop)
            if not stopped:
                raise RuntimeError(f"Service '{name}' still reports running after stop")

            yield (0.6, "Starting daemon...")
            service.start()
            status, running = wait_for_status(service, lambda s: s == STATUS_RUNNING, options.start)
            if not running:
                raise RuntimeError(f"Service '{name}' did not report running after start")
            _log_event("INFO", f"Restarted {name}")
        except Exception as e:
            yield (1.0, "Complete")
            _log_event("ERROR", f"Failed to restart {name}: {e}")
            result_obj.result = f"Error restarting service '{name}': {e}"
            result_obj.output = ServiceRestartOutput(
                errors=[str(e)],
                name=name,
                status="",
                restarted=False,
                pid_file=pid_file,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service '{name}' restarted ({status})"
        result_obj.output = ServiceRestartOutput(
            name=name,
            status=status,
            restarted=True,
            pid_file=pid_file,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Restarting service '{name}'...",
        progress_callback=do_work,
    )
