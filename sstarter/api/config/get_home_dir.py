"""Locate the sstarter home directory."""

import os
from pathlib import Path

from ...constants import SSTARTER_HOME_ENV, SSTARTER_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Return the home directory, or ``parts`` joined under it.

    SSTARTER_HOME wins when set (expanded and resolved). Otherwise the
    directory is ``.sstarter`` under $HOME, falling back to the user's home
    from the password database when $HOME is unset.

    >>> get_home_dir("config.json")  # doctest: +SKIP
    PosixPath('/home/user/.sstarter/config.json')
    """
    override = os.environ.get(SSTARTER_HOME_ENV)
    if override:
        home = Path(override).expanduser().resolve()
    else:
        user_home = os.environ.get("HOME")
        home = (Path(user_home) if user_home else Path.home()) / SSTARTER_HOME_EXT
    return home.joinpath(*parts)
