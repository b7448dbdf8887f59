"""Unit tests for sstarter.api.service.build_command module."""

import pytest

from sstarter.api.service.build_command import build_command, option_flag
from sstarter.api.service.resolve_paths import resolve_paths
from sstarter.api.service.ServiceConfig import ServiceConfig

pytestmark = pytest.mark.service


def _argv(cfg: ServiceConfig, helper: str = "start_server", full_name: str = "svc") -> list[str]:
    return build_command(cfg, resolve_paths(cfg, full_name), helper.split())


def _options(argv: list[str]) -> list[tuple[str, str]]:
    """Pair up the option tokens between the helper and the terminator."""
    head = argv[1 : argv.index("--")]
    return list(zip(head[::2], head[1::2]))


def test_option_flag():
    assert option_flag("p") == "-p"
    assert option_flag("port") == "--port"
    assert option_flag("signal-on-term") == "--signal-on-term"


def test_build_command_documented_example():
    cfg = ServiceConfig(
        command=["myapp", "--port", "8080"],
        helper_args={"port": 5003, "signal-on-term": "QUIT"},
    )
    argv = _argv(cfg)

    assert argv[0] == "start_server"
    assert argv[-5:] == ["QUIT", "--", "myapp", "--port", "8080"]
    assert set(_options(argv)) == {
        ("--pid-file", "/tmp/svc.pid.ss"),
        ("--status-file", "/tmp/svc.pid.status.ss"),
        ("--port", "5003"),
        ("--signal-on-term", "QUIT"),
    }


def test_build_command_option_order():
    cfg = ServiceConfig(command=["myapp"], helper_args={"port": 5003, "interval": 2})
    assert _argv(cfg) == [
        "start_server",
        "--pid-file",
        "/tmp/svc.pid.ss",
        "--status-file",
        "/tmp/svc.pid.status.ss",
        "--port",
        "5003",
        "--interval",
        "2",
        "--",
        "myapp",
    ]


def test_build_command_single_terminator_before_command():
    cfg = ServiceConfig(command=["myapp", "--", "-x"], helper_args={"port": 1})
    argv = _argv(cfg)
    first = argv.index("--")
    assert argv[first + 1 :] == ["myapp", "--", "-x"]
    assert "--" not in argv[:first]


def test_build_command_one_letter_key_single_dash():
    cfg = ServiceConfig(command=["myapp"], helper_args={"p": 5003})
    assert ("-p", "5003") in _options(_argv(cfg))


def test_build_command_none_value_omitted():
    cfg = ServiceConfig(command=["myapp"], helper_args={"port": 5003, "dir": None})
    argv = _argv(cfg)
    assert "--dir" not in argv
    assert ("--port", "5003") in _options(argv)


def test_build_command_helper_paths_not_duplicated():
    cfg = ServiceConfig(command=["myapp"], helper_args={"pid-file": "/run/h.pid", "port": 1})
    argv = _argv(cfg)
    assert argv.count("--pid-file") == 1
    assert ("--pid-file", "/run/h.pid") in _options(argv)


def test_build_command_multi_token_helper():
    cfg = ServiceConfig(command=["myapp"])
    argv = _argv(cfg, helper="perl /opt/bin/start_server")
    assert argv[:2] == ["perl", "/opt/bin/start_server"]
    assert argv[2] == "--pid-file"


def test_build_command_values_stringified():
    cfg = ServiceConfig(command=["myapp"], helper_args={"interval": 0.5})
    argv = _argv(cfg)
    assert all(isinstance(token, str) for token in argv)
    assert ("--interval", "0.5") in _options(argv)


def test_build_command_uses_app_name_paths():
    cfg = ServiceConfig(command=["myapp"], app_name="app")
    assert ("--pid-file", "/tmp/app.pid.ss") in _options(_argv(cfg))
