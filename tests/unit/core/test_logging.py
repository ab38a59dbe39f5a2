"""Unit tests for logging configuration."""

import structlog

from blogverse.core.config import Settings
from blogverse.core.logging import (
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    rename_message_field,
)


def test_rename_message_field():
    assert rename_message_field(None, "info", {"event": "hello"}) == {"message": "hello"}


def test_add_correlation_id_keeps_bound_value():
    event = add_correlation_id(None, "info", {"correlation_id": "cid_abc"})

    assert event["correlation_id"] == "cid_abc"


def test_add_correlation_id_generates_one():
    event = add_correlation_id(None, "info", {})

    assert event["correlation_id"].startswith("cid_")


def test_bind_and_clear_correlation_id():
    bind_correlation_id("cid_123")
    assert structlog.contextvars.get_contextvars()["correlation_id"] == "cid_123"

    clear_context()
    assert "correlation_id" not in structlog.contextvars.get_contextvars()


def test_configure_json_logging(capsys):
    configure_logging(Settings(_env_file=None, environment="production", log_format="json"))

    get_logger("blogverse.test").info("Something happened", user_id="user-123")

    output = capsys.readouterr().out
    assert '"message": "Something happened"' in output
    assert '"user_id": "user-123"' in output
    structlog.reset_defaults()
