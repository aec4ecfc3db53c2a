"""
Retry policy for transient Connector failures.

Only operations flagged as retryable are retried by the client; the policy
here decides how long to wait between attempts and which failures count as
transient.

Usage:
    from enmeshed_connector.retry import RetryConfig

    client = EnmeshedClient(
        base_url="http://localhost:8080",
        api_key="...",
        retry=RetryConfig(max_retries=5, base_delay=0.5),
    )
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Type

import httpx

RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Attributes:
        max_retries: Maximum number of retry attempts (0 means no retries)
        base_delay: Initial delay between retries in seconds
        max_delay: Maximum delay between retries in seconds
        exponential_base: Base for exponential backoff calculation
        jitter: Maximum jitter factor (0.0-1.0) added to delays
        retryable_status_codes: HTTP status codes treated as transient
        retryable_exceptions: Transport exceptions treated as transient
    """

    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    jitter: float = 0.1
    retryable_status_codes: frozenset[int] = RETRYABLE_STATUS_CODES
    retryable_exceptions: tuple[Type[BaseException], ...] = (
        httpx.TimeoutException,
        httpx.TransportError,
    )

    def calculate_delay(self, attempt: int, retry_after: Optional[float] = None) -> float:
        """Calculate delay for the given attempt number.

        Args:
            attempt: The attempt number (0-based)
            retry_after: Server supplied ``Retry-After`` seconds, if any

        Returns:
            Delay in seconds
        """
        if retry_after is not None:
            return max(0.0, min(retry_after, self.max_delay))

        delay = self.base_delay * (self.exponential_base ** attempt)
        delay = min(delay, self.max_delay)

        if self.jitter > 0:
            jitter_range = delay * self.jitter
            delay = delay + random.uniform(-jitter_range, jitter_range)

        return max(0.0, delay)

    def should_retry_status(self, status_code: int) -> bool:
        return status_code in self.retryable_status_codes

    def should_retry(self, exception: BaseException) -> bool:
        return isinstance(exception, self.retryable_exceptions)
