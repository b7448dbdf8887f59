"""Unit tests for PID file helpers in sstarter.api.daemon."""

import os
import subprocess
import time

import pytest

from sstarter.api.daemon._pid_running import _pid_running
from sstarter.api.daemon.read_pid_file import read_pid_file
from sstarter.api.daemon.write_pid_file import write_pid_file

pytestmark = pytest.mark.daemon


def test_write_then_read_pid_file(tmp_path):
    pid_file = tmp_path / "run" / "svc.pid"
    write_pid_file(pid_file, 1234)
    assert pid_file.read_text() == "1234\n"
    assert read_pid_file(pid_file) == 1234
    assert list(pid_file.parent.iterdir()) == [pid_file]


def test_write_pid_file_replaces(tmp_path):
    pid_file = tmp_path / "svc.pid"
    write_pid_file(pid_file, 1)
    write_pid_file(pid_file, 2)
    assert read_pid_file(pid_file) == 2


def test_read_pid_file_missing(tmp_path):
    assert read_pid_file(tmp_path / "missing.pid") is None


@pytest.mark.parametrize("content", ["", "abc", "0", "-5", "\n"])
def test_read_pid_file_invalid(tmp_path, content):
    pid_file = tmp_path / "svc.pid"
    pid_file.write_text(content)
    assert read_pid_file(pid_file) is None


def test_pid_running_self():
    assert _pid_running(os.getpid()) is True


@pytest.mark.parametrize("pid", [0, -1])
def test_pid_running_non_positive(pid):
    assert _pid_running(pid) is False


def test_pid_running_exited_child():
    proc = subprocess.Popen(["/bin/true"])
    proc.wait()
    assert _pid_running(proc.pid) is False


def test_pid_running_reaps_zombie_child():
    proc = subprocess.Popen(["/bin/true"])
    # Never waited on, so it lingers as a zombie until _pid_running reaps it
    deadline = time.monotonic() + 5
    while _pid_running(proc.pid) and time.monotonic() < deadline:
        time.sleep(0.01)
    assert _pid_running(proc.pid) is False
    with pytest.raises(ChildProcessError):
        os.waitpid(proc.pid, os.WNOHANG)


def test_pid_running_live_child():
    proc = subprocess.Popen(["/bin/sleep", "30"])
    try:
        assert _pid_running(proc.pid) is True
    finally:
        proc.kill()
        proc.wait()
