"""Host defaults for the user and group a service runs as."""

import grp
import os
import pwd


def default_user() -> str:
    """Name of the effective user of the current process."""
    return pwd.getpwuid(os.geteuid()).pw_name


def default_group() -> str:
    """Name of the effective group of the current process."""
    return grp.getgrgid(os.getegid()).gr_name
