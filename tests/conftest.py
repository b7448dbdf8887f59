"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from sstarter.api.config.StarterConfig import StarterConfig


def pytest_configure(config):
    for marker in ("unit", "service", "daemon", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(pid_dir: Path | None = None) -> dict:
    """Minimal valid sstarter configuration dict for testing.

    One service, ``web``, running ``/bin/sleep 30``. When ``pid_dir`` is given
    its PID file is placed there instead of under /tmp.
    """
    web: dict = {
        "app_name": "web",
        "command": ["/bin/sleep", "30"],
        "helper_args": {"port": 8080},
    }
    if pid_dir is not None:
        web["pid_file"] = str(pid_dir / "web.pid")
    return {
        "helper": {"bin": "start_server"},
        "log": {"level": "INFO"},
        "services": {"web": web},
    }


def minimal_starter_config(pid_dir: Path | None = None) -> StarterConfig:
    """Build a StarterConfig from the minimal config dict."""
    return StarterConfig(**minimal_config_dict(pid_dir))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _log_to_tmp(tmp_path_factory):
    """Send the sstarter logger to a throwaway directory instead of the real home."""
    from sstarter.utils.logger import configure_logging

    configure_logging(tmp_path_factory.mktemp("sstarter-logs"))


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    """Pytest fixture returning the minimal config dict with PID files under tmp_path."""
    return minimal_config_dict(tmp_path / "run")


@pytest.fixture
def sstarter_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up SSTARTER_HOME with a minimal config file.

    Returns:
        Path to the sstarter home directory
    """
    home = tmp_path / ".sstarter"
    home.mkdir()
    monkeypatch.setenv("SSTARTER_HOME", str(home))
    monkeypatch.delenv("SSTARTER_HELPER_BIN", raising=False)
    (home / "config.json").write_text(json.dumps(minimal_config_dict))
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    return cmd_func(*args, **kwargs).run()
