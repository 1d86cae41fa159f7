"""Tests for logging helpers and correlation IDs."""

import logging

from orgsync.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from orgsync.observability.log_utils import (
    REDACTED,
    log_exception_with_context,
    log_with_context,
    safe_log_value,
    sanitize_context,
)


def test_sanitize_context_redacts_credentials() -> None:
    context = sanitize_context({"api_token": "wb-secret", "password": "p", "user_id": 3})

    assert context == {"api_token": REDACTED, "password": REDACTED, "user_id": "3"}


def test_safe_log_value_summarizes_collections() -> None:
    assert safe_log_value([1, 2, 3]) == "list(3 items)"
    assert safe_log_value({"a": 1}) == "dict(1 keys)"
    assert safe_log_value("x" * 10, max_length=4).startswith("xxxx... (truncated")


def test_log_with_context_never_emits_token(caplog) -> None:
    logger = logging.getLogger("orgsync.test")

    with caplog.at_level(logging.INFO, logger="orgsync.test"):
        log_with_context(logger, logging.INFO, "saved", api_token="wb-secret")

    record = caplog.records[0]
    assert record.api_token == REDACTED


def test_log_exception_with_context_records_error_fields(caplog) -> None:
    logger = logging.getLogger("orgsync.test")

    with caplog.at_level(logging.ERROR, logger="orgsync.test"):
        try:
            raise RuntimeError("disk full")
        except RuntimeError as e:
            log_exception_with_context(logger, "sync failed", e, user_id=7, api_token="wb")

    record = caplog.records[0]
    assert record.error_type == "RuntimeError"
    assert record.error_msg == "disk full"
    assert record.api_token == REDACTED
    assert record.exc_info is not None


def test_correlation_id_lifecycle() -> None:
    value = set_correlation_id()
    assert get_correlation_id() == value

    assert set_correlation_id("abc") == "abc"
    clear_correlation_id()
    assert get_correlation_id() == ""
