"""Staged result returned by every ``cmd_*`` function."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """Outcome of one service or config command.

    The CLI shows ``announce`` first, then each ``(fraction, message)`` pair
    yielded by ``progress_callback``. The callback fills in ``result``,
    ``output`` and ``success`` before it finishes.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drain the progress generator without displaying anything."""
        for _step in self.progress_callback(self):
            pass
        return self
