"""Unit tests for settings, builder defaults and structured logging."""
from __future__ import annotations

import io
import json

import pytest
from structlog.testing import capture_logs

from sqlwrap import (
    Driver,
    InvalidUpsertPayloadError,
    SQLBuilder,
    get_settings,
    new_builder,
    new_mysql_builder,
    new_pg_builder,
    new_sqlite_builder,
    table,
    where,
)
from sqlwrap.utils.logging import configure_logging, get_logger


def test_default_settings(monkeypatch):
    for name in ("SQLWRAP_DRIVER", "SQLWRAP_LOG_STATEMENTS", "SQLWRAP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.driver == Driver.MYSQL
    assert settings.log_statements is False
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SQLWRAP_DRIVER", "postgres")
    monkeypatch.setenv("SQLWRAP_LOG_STATEMENTS", "true")
    monkeypatch.setenv("SQLWRAP_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.driver == Driver.POSTGRES
    assert settings.log_statements is True
    assert settings.log_level == "DEBUG"


def test_new_builder_uses_configured_driver(monkeypatch):
    monkeypatch.setenv("SQLWRAP_DRIVER", "sqlite3")
    assert new_builder().dialect == "sqlite3"
    assert new_builder(Driver.POSTGRES).dialect == "postgres"


def test_named_builders():
    assert new_mysql_builder().dialect == "mysql"
    assert new_pg_builder().dialect == "postgres"
    assert new_sqlite_builder().dialect == "sqlite3"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_statement_logging_disabled_by_default():
    with capture_logs() as logs:
        SQLBuilder(Driver.MYSQL).wrap(table("t")).to_query()
    assert logs == []


def test_statement_built_event():
    builder = SQLBuilder(Driver.POSTGRES, log_statements=True)
    with capture_logs() as logs:
        builder.wrap(table("t"), where("a = ?", 1)).to_query()
    assert logs == [
        {
            "event": "statement_built",
            "log_level": "debug",
            "statement": "query",
            "dialect": "postgres",
            "sql": "SELECT * FROM t WHERE a = $1",
            "bind_count": 1,
        }
    ]


def test_statement_rejected_event_and_error_propagates():
    builder = SQLBuilder(Driver.MYSQL, log_statements=True)
    with capture_logs() as logs:
        with pytest.raises(InvalidUpsertPayloadError):
            builder.wrap(table("t")).to_insert(42)
    assert len(logs) == 1
    assert logs[0]["event"] == "statement_rejected"
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["statement"] == "insert"


def test_new_builder_follows_log_statements_setting(monkeypatch):
    monkeypatch.setenv("SQLWRAP_LOG_STATEMENTS", "1")
    with capture_logs() as logs:
        new_builder("mysql").wrap(table("t")).to_delete()
    assert [e["event"] for e in logs] == ["statement_built"]


def test_configure_logging_json():
    out = io.StringIO()
    configure_logging("INFO", json=True, stream=out)
    log = get_logger("tests.config")
    log.debug("hidden")
    log.info("shown", table="user")
    lines = [line for line in out.getvalue().splitlines() if line]
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["event"] == "shown"
    assert entry["table"] == "user"
    assert entry["level"] == "info"
    assert "timestamp" in entry


def test_configure_logging_level_from_settings(monkeypatch):
    monkeypatch.setenv("SQLWRAP_LOG_LEVEL", "ERROR")
    out = io.StringIO()
    configure_logging(stream=out)
    get_logger("tests.config").warning("quiet")
    get_logger("tests.config").error("loud")
    assert "quiet" not in out.getvalue()
    assert "loud" in out.getvalue()
