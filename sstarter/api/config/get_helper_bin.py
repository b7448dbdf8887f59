"""Resolve the graceful-restart helper command line."""

import os

from ...constants import DEFAULT_HELPER_BIN, HELPER_BIN_ENV


def get_helper_bin() -> str:
    """Return the helper command line from the environment, else the default program name."""
    return os.environ.get(HELPER_BIN_ENV) or DEFAULT_HELPER_BIN
