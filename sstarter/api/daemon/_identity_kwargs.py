"""Popen keyword arguments for switching user and groups."""

import grp
import os
import pwd
from typing import Any

from .DaemonSpec import DaemonSpec


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def _identity_kwargs(spec: DaemonSpec) -> dict[str, Any]:
    """Build ``user``/``group``/``extra_groups`` for Popen.

    Only identities that differ from the current process are passed, so an
    unprivileged caller can run services configured with its own user and groups.
    """
    kwargs: dict[str, Any] = {}
    if spec.user and spec.user != pwd.getpwuid(os.geteuid()).pw_name:
        kwargs["user"] = spec.user
    if spec.groups:
        primary, *extra = spec.groups
        if primary != _group_name(os.getegid()):
            kwargs["group"] = primary
        current = {_group_name(gid) for gid in os.getgroups()}
        if set(extra) - current:
            kwargs["extra_groups"] = extra
    return kwargs
