"""
enmeshed Connector client.

A synchronous client for the enmeshed Connector REST API (v2).

Example usage:
    ```python
    from enmeshed_connector import EnmeshedClient

    with EnmeshedClient(base_url="http://localhost:8080", api_key="...") as client:
        identity = client.account.get_identity_info()
        client.account.sync()
        relationships = client.relationships.search(template_id="RLT_XXX")
    ```
"""
from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import httpx

from ._version import __version__
from .logging import get_logger, log_request, log_response, mask_value
from .models.errors import APIError, ConnectionError, RateLimitError, TimeoutError
from .resources.account import AccountResource
from .resources.attributes import AttributesResource
from .resources.relationship_templates import RelationshipTemplatesResource
from .resources.relationships import RelationshipsResource
from .retry import RetryConfig

if TYPE_CHECKING:
    from .config import ConnectorSettings

logger = get_logger(__name__)


class EnmeshedClient:
    """
    enmeshed Connector API client.

    Provides access to the Connector resources used for onboarding:
    - account: identity info and synchronization
    - attributes: search and create identity attributes
    - relationship_templates: publish invitations and fetch their QR codes
    - relationships: find relationships and accept or reject their changes

    Only operations flagged as retryable (idempotent reads and sync) are
    retried on transient failures; everything else makes a single attempt.

    Args:
        base_url: Connector base URL
        api_key: Connector API key, sent as ``X-API-KEY``
        timeout: Request timeout in seconds (default: 30)
        retry: Retry policy for retryable operations
    """

    DEFAULT_BASE_URL = "http://localhost:8080"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        retry: Optional[RetryConfig] = None,
    ):
        if not api_key:
            raise ValueError("API key is required")

        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = httpx.Timeout(timeout)
        self._retry = retry or RetryConfig()
        self._client: Optional[httpx.Client] = None

        self.account = AccountResource(self)
        self.attributes = AttributesResource(self)
        self.relationship_templates = RelationshipTemplatesResource(self)
        self.relationships = RelationshipsResource(self)

    @classmethod
    def from_settings(cls, settings: "ConnectorSettings") -> "EnmeshedClient":
        """Build a client from connector settings."""
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key.get_secret_value(),
            timeout=settings.timeout,
            retry=RetryConfig(max_retries=settings.max_retries),
        )

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers={
                    "X-API-KEY": self._api_key,
                    "User-Agent": f"enmeshed-connector-python/{__version__}",
                },
                timeout=self._timeout,
            )
        return self._client

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
        retryable: bool = False,
        raw: bool = False,
    ) -> Any:
        """Make an HTTP request, retrying transient failures if ``retryable``.

        Returns the unwrapped ``result`` of a JSON response, or the raw body
        bytes when ``raw`` is set.
        """
        client = self._get_client()
        url = f"{self._base_url}{path}"
        headers = {"Accept": accept}
        attempts = self._retry.max_retries + 1 if retryable else 1

        for attempt in range(attempts):
            is_last = attempt == attempts - 1
            log_request(logger, method, url, {**client.headers, **headers}, json, attempt)
            started = time.monotonic()

            try:
                response = client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=headers,
                )
            except httpx.TimeoutException as e:
                if not is_last and self._retry.should_retry(e):
                    self._wait(attempt, method, url, e)
                    continue
                raise TimeoutError(f"Request timed out: {method} {path}") from e
            except httpx.TransportError as e:
                if not is_last and self._retry.should_retry(e):
                    self._wait(attempt, method, url, e)
                    continue
                raise ConnectionError(f"Could not reach the Connector: {e}") from e

            log_response(logger, method, url, response.status_code, (time.monotonic() - started) * 1000)

            if response.status_code >= 400:
                if not is_last and self._retry.should_retry_status(response.status_code):
                    self._wait(
                        attempt,
                        method,
                        url,
                        f"HTTP {response.status_code}",
                        _retry_after(response),
                    )
                    continue
                raise _error_from_response(response)

            return _parse_response(response, raw)

        raise RuntimeError("Unexpected error in request retry loop")

    def _wait(
        self,
        attempt: int,
        method: str,
        url: str,
        reason: Union[BaseException, str],
        retry_after: Optional[float] = None,
    ) -> None:
        delay = self._retry.calculate_delay(attempt, retry_after)
        logger.warning(
            f"Retry {attempt + 1}/{self._retry.max_retries} for {method} {url} "
            f"after {reason}. Waiting {delay:.2f}s"
        )
        time.sleep(delay)

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __repr__(self) -> str:
        return f"EnmeshedClient(base_url={self._base_url!r}, api_key={mask_value(self._api_key)!r})"

    def __enter__(self) -> "EnmeshedClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _retry_after(response: httpx.Response) -> Optional[float]:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _error_from_response(response: httpx.Response) -> APIError:
    try:
        body = response.json()
    except ValueError:
        body = {"detail": response.text}

    error = APIError.from_response(response.status_code, body)
    if isinstance(error, RateLimitError):
        retry_after = _retry_after(response)
        error.retry_after = int(retry_after) if retry_after is not None else None
    return error


def _parse_response(response: httpx.Response, raw: bool) -> Any:
    if raw:
        return response.content
    if response.status_code == 204 or not response.content:
        return None

    body = response.json()
    if isinstance(body, dict) and "result" in body:
        return body["result"]
    return body
