"""Tests for enmeshed_connector.logging."""

from __future__ import annotations

import logging

from enmeshed_connector.logging import (
    MASK_PATTERN,
    get_logger,
    log_request,
    log_response,
    mask_headers,
    mask_sensitive_data,
    mask_value,
)


def test_mask_value():
    assert mask_value("abcdefghijkl") == "abcd...ijkl"
    assert mask_value("short") == MASK_PATTERN


def test_mask_headers_hides_api_key():
    masked = mask_headers({"X-API-KEY": "secret", "Accept": "application/json"})
    assert masked == {"X-API-KEY": MASK_PATTERN, "Accept": "application/json"}


def test_mask_sensitive_data_recurses():
    masked = mask_sensitive_data({"content": {"apiKey": "secret", "items": [{"password": "p"}]}})
    assert masked == {"content": {"apiKey": MASK_PATTERN, "items": [{"password": MASK_PATTERN}]}}


def test_log_request_masks_credentials(caplog):
    logger = get_logger("enmeshed_connector.test")
    with caplog.at_level(logging.DEBUG, logger="enmeshed_connector.test"):
        log_request(logger, "GET", "http://connector.test/api/v2/Attributes", {"X-API-KEY": "secret"})

    [record] = caplog.records
    assert record.data["headers"]["X-API-KEY"] == MASK_PATTERN
    assert "secret" not in caplog.text


def test_log_response_warns_on_error_status(caplog):
    logger = get_logger("enmeshed_connector.test")
    with caplog.at_level(logging.DEBUG, logger="enmeshed_connector.test"):
        log_response(logger, "GET", "http://connector.test/x", 200, duration_ms=1.234)
        log_response(logger, "GET", "http://connector.test/x", 404)

    assert [r.levelno for r in caplog.records] == [logging.DEBUG, logging.WARNING]
    assert caplog.records[0].data["duration_ms"] == 1.23
