"""Unit tests for sstarter.api.service.cmd_restart module."""

import json

import pytest

from sstarter.api.service import cmd_restart
from tests.unit.conftest import FakeDaemon, patch_daemon, run_cmd

pytestmark = pytest.mark.service


def reports_broken() -> str:
    return "broken"


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch):
    monkeypatch.setattr("sstarter.api.service.wait_for_status.time.sleep", lambda _s: None)


def test_cmd_restart_running_service(sstarter_home, monkeypatch):
    daemon = patch_daemon(monkeypatch, FakeDaemon(running=True))
    result = run_cmd(cmd_restart.cmd_restart, "web")
    assert result.success is True
    assert result.output["restarted"] is True
    assert result.output["status"] == "running"
    assert len(daemon.stopped) == 1
    assert len(daemon.started) == 1


def test_cmd_restart_stopped_service(sstarter_home, patched_daemon):
    result = run_cmd(cmd_restart.cmd_restart, "web")
    assert result.success is True
    assert len(patched_daemon.started) == 1


def test_cmd_restart_stop_fails(sstarter_home, monkeypatch):
    daemon = patch_daemon(monkeypatch, FakeDaemon(running=True, stays_alive=True))
    result = run_cmd(cmd_restart.cmd_restart, "web")
    assert result.success is False
    assert "still reports running" in result.output["errors"][0]
    assert daemon.started == []


def test_cmd_restart_custom_status_after_start(sstarter_home, minimal_config_dict, monkeypatch):
    minimal_config_dict["services"]["web"]["status_probe"] = f"{__name__}:reports_broken"
    (sstarter_home / "config.json").write_text(json.dumps(minimal_config_dict))
    daemon = patch_daemon(monkeypatch, FakeDaemon(running=True))

    result = run_cmd(cmd_restart.cmd_restart, "web")
    assert result.success is False
    assert result.output["restarted"] is False
    assert "did not report running" in result.output["errors"][0]
    assert len(daemon.started) == 1
