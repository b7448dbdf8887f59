"""Service start command - launches the helper under the daemon wrapper."""

from collections.abc import Iterator

from ...constants import STATUS_RUNNING
from .._output_schemas.service import ServiceStartOutput
from ..StageResult import StageResult
from ._log_event import _log_event
from .get_service import get_service
from .wait_for_status import wait_for_status


def cmd_start(name: str) -> StageResult:
    """Start service ``name`` and wait until it reports running.

    Starting a service that is already running is a no-op success.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        pid_file = ""
        argv: list[str] = []
        try:
            yield (0.1, "Loading configuration...")
            service = get_service(name)
            pid_file = service.pid_file

            yield (0.3, "Checking current status...")
            status = service.status()
            if status == STATUS_RUNNING:
                yield (1.0, "Complete")
                result_obj.result = f"Service '{name}' is already running ({status})"
                result_obj.output = ServiceStartOutput(
                    name=name,
                    status=status,
                    running=True,
                    already_running=True,
                    pid_file=pid_file,
                    argv=[],
                ).model_dump(mode="python")
                result_obj.success = True
                return

            yield (0.5, "Starting daemon...")
            argv = service.bin()
            service.start()
            _log_event("INFO", f"Started {name}: {' '.join(argv)}")

            yield (0.7, "Waiting for service to report running...")
            status, running = wait_for_status(
                service, lambda s: s == STATUS_RUNNING, service.timeout_options().start
            )
        except Exception as e:
            yield (1.0, "Complete")
            _log_event("ERROR", f"Failed to start {name}: {e}")
            result_obj.result = f"Error starting service '{name}': {e}"
            result_obj.output = ServiceStartOutput(
                errors=[str(e)],
                name=name,
                status="",
                running=False,
                already_running=False,
                pid_file=pid_file,
                argv=argv,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        errors = [] if running else [f"Service '{name}' did not report running after start"]
        result_obj.result = f"Service '{name}' started ({status})" if running else f"Error: {errors[0]}"
        result_obj.output = ServiceStartOutput(
            errors=errors,
            name=name,
            status=status,
            running=running,
            already_running=False,
            pid_file=pid_file,
            argv=argv,
        ).model_dump(mode="python")
        result_obj.success = running

    return StageResult(
        announce=f"Starting service '{name}'...",
        progress_callback=do_work,
    )
