"""Unit tests for sstarter.api.service.cmd_stop module."""

import pytest

from sstarter.api.service import cmd_stop
from tests.unit.conftest import FakeDaemon, patch_daemon, run_cmd

pytestmark = pytest.mark.service


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch):
    monkeypatch.setattr("sstarter.api.service.wait_for_status.time.sleep", lambda _s: None)


def test_cmd_stop_running(sstarter_home, monkeypatch):
    daemon = patch_daemon(monkeypatch, FakeDaemon(running=True))
    result = run_cmd(cmd_stop.cmd_stop, "web")
    assert result.success is True
    assert result.output["status"] == "stopped"
    assert result.output["stopped"] is True
    assert daemon.stopped == [(result.output["pid_file"], 7)]


def test_cmd_stop_not_running(sstarter_home, patched_daemon):
    result = run_cmd(cmd_stop.cmd_stop, "web")
    assert result.success is True
    assert result.output["status"] == "not running"
    assert "already stopped" in result.result


def test_cmd_stop_still_running(sstarter_home, monkeypatch):
    patch_daemon(monkeypatch, FakeDaemon(running=True, stays_alive=True))
    result = run_cmd(cmd_stop.cmd_stop, "web")
    assert result.success is False
    assert result.output["stopped"] is False
    assert result.output["errors"]
