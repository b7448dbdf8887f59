"""Poll a service until its status satisfies a predicate."""

import time
from collections.abc import Callable

from ._AbstractService import _AbstractService
from .TimeoutOptions import TrialPolicy


def wait_for_status(
    service: _AbstractService,
    predicate: Callable[[str], bool],
    policy: TrialPolicy,
    sleep: Callable[[float], None] | None = None,
) -> tuple[str, bool]:
    """Call ``service.status()`` up to ``policy.trials`` times.

    Args:
        service: Service to poll
        predicate: Returns True once the status is the one being waited for
        policy: Number of trials and seconds between them
        sleep: Sleep function, time.sleep when None

    Returns:
        Tuple of (last status, whether the predicate held)
    """
    sleep = sleep or time.sleep
    status = service.status()
    for _trial in range(policy.trials - 1):
        if predicate(status):
            return status, True
        sleep(policy.step)
        status = service.status()
    return status, predicate(status)
