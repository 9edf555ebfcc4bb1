import logging
from typing import Any, Dict, List

import pytest

from storefront_services import cli
from storefront_services.app.core.config import settings


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    recorded: List[Dict[str, Any]] = []

    async def fake_serve(service, host=None, port=None, log_level=None):
        recorded.append({"fn": "serve", "keys": [service.key], "host": host, "port": port, "log_level": log_level})

    async def fake_serve_many(services, host=None, log_level=None):
        recorded.append({"fn": "serve_many", "keys": [s.key for s in services], "host": host, "log_level": log_level})

    monkeypatch.setattr(cli, "serve", fake_serve)
    monkeypatch.setattr(cli, "serve_many", fake_serve_many)
    return recorded


def test_single_service(calls: List[Dict[str, Any]]) -> None:
    cli.main(["auth", "--port", "4000", "--host", "127.0.0.1"])

    assert calls == [
        {"fn": "serve", "keys": ["auth"], "host": "127.0.0.1", "port": 4000, "log_level": settings.log_level}
    ]


def test_several_services_share_one_interpreter(calls: List[Dict[str, Any]]) -> None:
    cli.main(["auth", "product", "order", "auth"])

    assert calls == [
        {"fn": "serve_many", "keys": ["auth", "product", "order"], "host": None, "log_level": settings.log_level}
    ]


def test_unknown_service_exits_with_usage_error(calls: List[Dict[str, Any]]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["payment"])

    assert excinfo.value.code == 2
    assert calls == []


def test_port_requires_single_service(calls: List[Dict[str, Any]]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["auth", "order", "--port", "4000"])

    assert excinfo.value.code == 2
    assert calls == []


@pytest.mark.parametrize("port", ["70000", "-1", "http"])
def test_out_of_range_port_exits_with_usage_error(calls: List[Dict[str, Any]], port: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["auth", f"--port={port}"])

    assert excinfo.value.code == 2
    assert calls == []


def test_ephemeral_port_is_accepted(calls: List[Dict[str, Any]]) -> None:
    cli.main(["order", "--port", "0"])

    assert calls[0]["port"] == 0


@pytest.mark.parametrize("value", ["verbose", "loud"])
def test_unknown_log_level_exits_with_usage_error(calls: List[Dict[str, Any]], value: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["auth", "--log-level", value])

    assert excinfo.value.code == 2
    assert calls == []


@pytest.mark.parametrize(("value", "expected"), [("WARN", "warning"), ("Debug", "debug"), ("trace", "trace")])
def test_log_level_is_normalised(calls: List[Dict[str, Any]], value: str, expected: str) -> None:
    cli.main(["product", "--log-level", value])

    assert calls[0]["log_level"] == expected


def test_log_level_is_applied_to_root_logger(calls: List[Dict[str, Any]]) -> None:
    cli.main(["auth", "--log-level", "error"])

    assert logging.getLogger().level == logging.ERROR


def test_bind_failure_exit_status_is_kept(monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing_serve(service, host=None, port=None, log_level=None):
        raise SystemExit(1)

    monkeypatch.setattr(cli, "serve", failing_serve)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["order"])

    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_quietly(monkeypatch: pytest.MonkeyPatch) -> None:
    async def interrupted_serve(service, host=None, port=None, log_level=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "serve", interrupted_serve)

    cli.main(["product"])
