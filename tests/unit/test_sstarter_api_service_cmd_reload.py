"""Unit tests for sstarter.api.service.cmd_reload module."""

import subprocess

import pytest

from sstarter.api.service import cmd_reload
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.service


def test_cmd_reload_success(sstarter_home, patched_daemon, monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda argv, check=False: calls.append(argv))

    result = run_cmd(cmd_reload.cmd_reload, "web")

    pid_file = str(tmp_path / "run" / "web.pid")
    expected = ["start_server", "--restart", "--pid-file", f"{pid_file}.ss", "--status-file", f"{pid_file}.status.ss"]
    assert result.success is True
    assert result.output["status"] == "reloaded"
    assert result.output["argv"] == expected
    assert calls == [expected]
    assert patched_daemon.started == []


def test_cmd_reload_helper_failure(sstarter_home, patched_daemon, monkeypatch):
    def fail(argv, check=False):
        raise subprocess.CalledProcessError(2, argv)

    monkeypatch.setattr(subprocess, "run", fail)
    result = run_cmd(cmd_reload.cmd_reload, "web")
    assert result.success is False
    assert result.output["reloaded"] is False
    assert result.output["argv"][1] == "--restart"
