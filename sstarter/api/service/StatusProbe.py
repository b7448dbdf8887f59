"""Liveness resolution with an optional custom health check."""

from collections.abc import Callable

from ...constants import STATUS_NOT_RUNNING, STATUS_RUNNING

StatusProbe = Callable[[], str]
"""Zero-argument health check returning a status string."""


def probe_status(alive: bool, probe: StatusProbe | None) -> str:
    """Turn process liveness into a status string.

    A dead process is always ``not running``; the probe is never called then.
    For a live process the probe's answer is returned as is, and exceptions
    raised by the probe propagate to the caller.
    """
    if not alive:
        return STATUS_NOT_RUNNING
    if probe is None:
        return STATUS_RUNNING
    return probe()
