"""Execute one cmd_* function and render its four stages."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

from sstarter.api.StageResult import StageResult


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
) -> None:
    """Call ``func`` and show announce, progress, result and output, then exit.

    Exits 0 when the command reports success, 1 otherwise. A command that
    finishes without filling in ``result`` and ``output`` is a programming
    error and raises ValueError.
    """
    stage = func(*args, **kwargs)
    display.status(stage.announce)

    for fraction, message in stage.progress_callback(stage):
        display.info(f"[dim]{datetime.now():%H:%M:%S}[/dim] Progress: {message} ({fraction:.1%})")

    if not stage.result or not stage.output:
        raise ValueError(f"{getattr(func, '__name__', func)} finished without setting result and output")

    (display.success if stage.success else display.error)(stage.result)
    display.json_output(stage.output, format=display_format)

    sys.exit(0 if stage.success else 1)
