"""
Logging utilities with credential masking.

Usage:
    from enmeshed_connector.logging import get_logger, log_request, log_response

    logger = get_logger(__name__)
    log_request(logger, "GET", url, headers)
    log_response(logger, "GET", url, 200, duration_ms=12.5)
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

MASK_PATTERN = "***"
MAX_BODY_LOG_LENGTH = 1000

SENSITIVE_HEADERS = frozenset({
    "authorization",
    "x-api-key",
    "cookie",
    "set-cookie",
})

SENSITIVE_FIELDS = frozenset({
    "api_key",
    "apikey",
    "password",
    "secret",
    "token",
})


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)


def mask_value(value: str, show_chars: int = 4) -> str:
    """Mask a sensitive value, showing only the first/last characters.

    Args:
        value: The value to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked string
    """
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN

    return f"{value[:show_chars]}...{value[-show_chars:]}"


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask sensitive HTTP headers."""
    return {
        key: MASK_PATTERN if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def mask_sensitive_data(data: Any) -> Any:
    """Recursively mask sensitive keys in a data structure."""
    if isinstance(data, dict):
        return {
            key: MASK_PATTERN
            if key.lower().replace("-", "_") in SENSITIVE_FIELDS
            else mask_sensitive_data(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item) for item in data)
    return data


def log_request(
    logger: logging.Logger,
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None,
    attempt: int = 0,
) -> None:
    """Log an outgoing HTTP request at DEBUG."""
    if not logger.isEnabledFor(logging.DEBUG):
        return

    log_data: Dict[str, Any] = {
        "direction": "request",
        "method": method,
        "url": url,
        "attempt": attempt,
    }
    if headers:
        log_data["headers"] = mask_headers(headers)
    if body is not None:
        body_str = json.dumps(mask_sensitive_data(body), default=str)
        if len(body_str) > MAX_BODY_LOG_LENGTH:
            body_str = body_str[:MAX_BODY_LOG_LENGTH] + "..."
        log_data["body"] = body_str

    logger.debug(f"HTTP {method} {url}", extra={"data": log_data})


def log_response(
    logger: logging.Logger,
    method: str,
    url: str,
    status_code: int,
    duration_ms: Optional[float] = None,
) -> None:
    """Log an HTTP response at DEBUG, or WARNING for error statuses."""
    log_data: Dict[str, Any] = {
        "direction": "response",
        "method": method,
        "url": url,
        "status_code": status_code,
    }
    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    level = logging.WARNING if status_code >= 400 else logging.DEBUG
    logger.log(level, f"HTTP {method} {url} -> {status_code}", extra={"data": log_data})
