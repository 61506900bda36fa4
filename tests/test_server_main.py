"""Tests for the server entry point: fatal configuration and process signals."""
import logging
import signal

import pytest

import tools.mcp_server as mcp_server
from adapters.cosmos_store import CosmosStore


@pytest.fixture
def root_level():
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


@pytest.fixture
def no_dotenv(monkeypatch):
    monkeypatch.setattr(mcp_server, "load_dotenv", lambda *args, **kwargs: False)


def test_missing_settings_exit_before_any_store_is_built(monkeypatch, no_dotenv, capsys):
    monkeypatch.delenv("COSMOSDB_URI", raising=False)
    monkeypatch.delenv("COSMOS_DATABASE_ID", raising=False)

    built = []
    monkeypatch.setattr(CosmosStore, "from_settings", classmethod(lambda cls, settings: built.append(settings)))

    with pytest.raises(SystemExit) as excinfo:
        mcp_server.main()

    assert excinfo.value.code == 1
    assert built == []
    err = capsys.readouterr().err
    assert "COSMOSDB_URI" in err
    assert "COSMOS_DATABASE_ID" in err


def test_sigterm_handler_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        mcp_server._exit_on_sigterm(signal.SIGTERM, None)
    assert excinfo.value.code == 0


def test_unknown_log_level_falls_back_to_info(root_level):
    mcp_server._apply_log_level("verbose")
    assert root_level.level == logging.INFO


def test_log_level_name_is_case_insensitive(root_level):
    mcp_server._apply_log_level("debug")
    assert root_level.level == logging.DEBUG


def test_invalid_log_level_does_not_stop_startup(monkeypatch, no_dotenv, root_level):
    monkeypatch.setenv("COSMOSDB_URI", "https://example.documents.azure.com:443/")
    monkeypatch.setenv("COSMOS_DATABASE_ID", "db")
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    class Started(Exception):
        pass

    def fake_from_settings(cls, settings):
        raise Started(settings)

    monkeypatch.setattr(CosmosStore, "from_settings", classmethod(fake_from_settings))
    monkeypatch.setattr(signal, "signal", lambda *args: None)

    with pytest.raises(Started):
        mcp_server.main()
    assert root_level.level == logging.INFO
