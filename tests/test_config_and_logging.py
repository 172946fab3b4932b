"""Environment-driven configuration, logging setup and error envelopes."""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from pydantic import ValidationError

from filament_mcp.config import LogConfig, get_docs_config, get_log_config, get_remote_config
from filament_mcp.contracts import ToolEnvelope, build_docs_data
from filament_mcp.errors import FetchFailedError, InvalidArgumentError
from filament_mcp.formatting import build_docs_error
from filament_mcp.logs import LOGGER_NAME, configure_logging


def test_remote_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("FILAMENT_MCP_DOCS_URL", raising=False)
    monkeypatch.delenv("FILAMENT_MCP_TIMEOUT_S", raising=False)
    cfg = get_remote_config()

    assert cfg.base_url == "https://filamentphp.com/docs/3.x"
    assert cfg.timeout_s == 15.0
    assert cfg.field_url("select") == "https://filamentphp.com/docs/3.x/forms/fields/select"
    assert "FilamentMcpServer" in cfg.user_agent


def test_remote_config_env_overrides_and_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("FILAMENT_MCP_DOCS_URL", "https://mirror.test/docs/")
    monkeypatch.setenv("FILAMENT_MCP_TIMEOUT_S", "not-a-number")
    cfg = get_remote_config()

    assert cfg.base_url == "https://mirror.test/docs"
    assert cfg.timeout_s == 15.0

    monkeypatch.setenv("FILAMENT_MCP_TIMEOUT_S", "0.1")
    assert get_remote_config().timeout_s == 1.0


def test_docs_config_paths(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("FILAMENT_MCP_DATA_DIR", str(tmp_path))
    cfg = get_docs_config()

    assert cfg.filament_dir == tmp_path / "filament-docs"
    assert cfg.laravel_dir == tmp_path / "laravel-docs"
    assert cfg.livewire_dir == tmp_path / "livewire-docs"


def test_log_config_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("FILAMENT_MCP_LOG_ENABLED", "off")
    monkeypatch.setenv("FILAMENT_MCP_LOG_FILE", str(tmp_path / "server.log"))
    monkeypatch.setenv("FILAMENT_MCP_LOG_LEVEL", "debug")
    cfg = get_log_config()

    assert cfg.enabled is False
    assert cfg.file_path == tmp_path / "server.log"
    assert cfg.level == "DEBUG"


def test_configure_logging_writes_to_file_and_replaces_handlers(tmp_path) -> None:
    log_file = tmp_path / "logs" / "server.log"
    config = LogConfig(enabled=True, file_path=log_file, max_bytes=4096, level="INFO")

    configure_logging(config)
    logger = configure_logging(config)
    try:
        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RotatingFileHandler)

        logging.getLogger("filament-mcp.tests").info("hello %s", "world")
        for handler in logger.handlers:
            handler.flush()
        assert "[INFO] filament-mcp.tests: hello world" in log_file.read_text(encoding="utf-8")
    finally:
        configure_logging(LogConfig(enabled=False, file_path=log_file, max_bytes=4096, level="INFO"))


def test_build_docs_error_envelope_and_log(caplog) -> None:
    logger = logging.getLogger("tests.formatting")
    exc = FetchFailedError("Unexpected HTTP status 502", status=502, details={"url": "https://x"})

    with caplog.at_level(logging.ERROR, logger="tests.formatting"):
        envelope = build_docs_error(exc, operation="get_filament_form_field", logger=logger, field_name="select")

    assert envelope["ok"] is False
    assert envelope["error"]["code"] == "fetch_failed"
    assert envelope["error"]["message"] == "Unexpected HTTP status 502"
    assert envelope["error"]["details"] == {
        "operation": "get_filament_form_field",
        "field_name": "select",
        "url": "https://x",
        "status": 502,
    }
    assert "get_filament_form_field failed (fetch_failed)" in caplog.text


def test_invalid_argument_is_logged_as_warning(caplog) -> None:
    logger = logging.getLogger("tests.formatting")
    with caplog.at_level(logging.WARNING, logger="tests.formatting"):
        build_docs_error(InvalidArgumentError("bad"), operation="search_laravel_docs", logger=logger)

    assert caplog.records[-1].levelno == logging.WARNING


def test_docs_data_fills_count_and_keeps_explicit_summary() -> None:
    data = build_docs_data(source="laravel", action="search", entries=[{"path": "routing"}])
    assert data == {
        "source": "laravel",
        "action": "search",
        "entries": [{"path": "routing"}],
        "summary": {"count": 1},
    }

    listing = build_docs_data(source="filament", action="list", entries=[], summary={"count": 0, "path": "x"})
    assert listing["summary"] == {"count": 0, "path": "x"}


def test_envelope_rejects_incoherent_states() -> None:
    with pytest.raises(ValidationError):
        ToolEnvelope(ok=False)
    with pytest.raises(ValidationError):
        ToolEnvelope(ok=True, error={"code": "not_found", "message": "gone"})
