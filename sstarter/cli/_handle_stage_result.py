"""Bridge between Typer commands and StageResult-returning API functions."""

import functools
from collections.abc import Callable

import click

from sstarter.api.StageResult import StageResult

from ._run_single_execution import _run_single_execution

DISPLAY_FORMATS = ("yaml", "json")


def _display_format() -> str:
    """``--display`` value stored by the root callback; yaml when no context carries one."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, dict) and ctx.obj.get("display_format") in DISPLAY_FORMATS:
            return ctx.obj["display_format"]
        ctx = ctx.parent
    return "yaml"


def _handle_stage_result(func: Callable[..., StageResult]) -> Callable[..., None]:
    """Wrap ``func`` so calling the wrapper renders its StageResult and exits.

    Messages (announce, progress, result) go to stderr; the output dict goes
    to stdout as YAML or JSON.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> None:
        from sstarter.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _display_format())

    return wrapper
