"""Service reload command - asks the helper to restart the target in place."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceReloadOutput
from ..StageResult import StageResult
from ._log_event import _log_event
from .get_service import get_service


def cmd_reload(name: str) -> StageResult:
    """Reload service ``name`` through the helper's restart protocol.

    The daemon wrapper keeps running. Success means the helper accepted the
    request, not that the new target process is up.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        argv: list[str] = []
        try:
            yield (0.2, "Loading configuration...")
            service = get_service(name)
            argv = service.reload_command()

            yield (0.5, "Requesting restart from helper...")
            status = service.reload()
            _log_event("INFO", f"Reloaded {name}: {' '.join(argv)}")
        except Exception as e:
            yield (1.0, "Complete")
            _log_event("ERROR", f"Failed to reload {name}: {e}")
            result_obj.result = f"Error reloading service '{name}': {e}"
            result_obj.output = ServiceReloadOutput(
                errors=[str(e)],
                name=name,
                status="",
                reloaded=False,
                argv=argv,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service '{name}' {status}"
        result_obj.output = ServiceReloadOutput(
            name=name,
            status=status,
            reloaded=True,
            argv=argv,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Reloading service '{name}'...",
        progress_callback=do_work,
    )
