"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for faking the daemon layer.
"""

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    minimal_config_dict,
    minimal_starter_config,
    run_cmd,
)
from sstarter.api.daemon._AbstractDaemon import _AbstractDaemon
from sstarter.api.daemon.DaemonSpec import DaemonSpec
from sstarter.api.service.ServerStarterService import ServerStarterService

__all__ = [
    "FakeDaemon",
    "minimal_config_dict",
    "minimal_starter_config",
    "patch_daemon",
    "run_cmd",
]


class FakeDaemon(_AbstractDaemon):
    """In-memory daemon that records calls instead of spawning processes.

    ``alive_after_start`` controls whether check_daemon sees the daemon once
    started; ``stays_alive`` keeps it alive after stop_daemon.
    """

    def __init__(self, running: bool = False, alive_after_start: bool = True, stays_alive: bool = False):
        self.running = running
        self.alive_after_start = alive_after_start
        self.stays_alive = stays_alive
        self.started: list[DaemonSpec] = []
        self.stopped: list[tuple[str, float]] = []
        self.checked: list[str] = []

    def start_daemon(self, spec: DaemonSpec) -> int:
        self.started.append(spec)
        self.running = self.alive_after_start
        return 4242

    def stop_daemon(self, pid_file: str, timeout: float) -> str:
        self.stopped.append((pid_file, timeout))
        if not self.running:
            return "not running"
        self.running = self.stays_alive
        return "stopped"

    def check_daemon(self, pid_file: str) -> int | None:
        self.checked.append(pid_file)
        return 4242 if self.running else None


@pytest.fixture
def fake_daemon() -> FakeDaemon:
    return FakeDaemon()


def patch_daemon(monkeypatch, fake: FakeDaemon) -> FakeDaemon:
    """Make every ServerStarterService built without an explicit daemon use ``fake``."""
    original_init = ServerStarterService.__init__

    def init(self, config, full_name, helper_bin=None, daemon=None):
        original_init(self, config, full_name, helper_bin=helper_bin, daemon=daemon or fake)

    monkeypatch.setattr(ServerStarterService, "__init__", init)
    return fake


@pytest.fixture
def patched_daemon(monkeypatch, fake_daemon: FakeDaemon) -> FakeDaemon:
    """Fixture that routes service controllers to a FakeDaemon."""
    return patch_daemon(monkeypatch, fake_daemon)
