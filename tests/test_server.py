import logging

import pytest

from craftserver import server
from craftserver.logging_setup import LOG_LEVEL_ENV, configure_logging, resolve_log_level
from craftserver.schemas import example_craft


def test_resolve_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    assert resolve_log_level() == logging.WARNING


def test_resolve_log_level_defaults(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert resolve_log_level() == logging.INFO
    assert resolve_log_level("nonsense") == logging.INFO
    assert resolve_log_level("DEBUG") == logging.DEBUG


def test_configure_logging_returns_app_logger():
    assert configure_logging().name == "craftserver"


def test_self_test_logs_both_forms(caplog):
    logger = logging.getLogger("craftserver.test")
    with caplog.at_level("INFO", logger="craftserver.test"):
        craft = server.self_test(logger)
    assert craft == example_craft()
    assert 'serialized = {"fuel":12' in caplog.text
    assert "deserialized = Craft(" in caplog.text


def test_run_serves_on_loopback(monkeypatch):
    seen = {}

    def fake_run(app, host, port, **kwargs):
        seen.update(app=app, host=host, port=port)

    monkeypatch.setattr(server.uvicorn, "run", fake_run)
    server.run()
    assert seen["host"] == "127.0.0.1"
    assert seen["port"] == 3000
    assert seen["app"].state.logger.name == "craftserver"


def test_run_exits_on_bind_failure(monkeypatch, caplog):
    def fake_run(app, host, port, **kwargs):
        raise OSError("address already in use")

    monkeypatch.setattr(server.uvicorn, "run", fake_run)
    with caplog.at_level("ERROR", logger="craftserver"):
        with pytest.raises(SystemExit) as excinfo:
            server.run()
    assert excinfo.value.code == 1
    assert "address already in use" in caplog.text
