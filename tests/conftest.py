"""
Pytest configuration and fixtures for enmeshed connector tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from enmeshed_connector import EnmeshedClient, RetryConfig

BASE_URL = "http://connector.test"


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class RecordedRequest:
    method: str
    url: str
    json: Any = None
    headers: dict[str, str] = field(default_factory=dict)


class _LocalHTTPXMock:
    """Queue of canned responses matched by method and URL, in order."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[RecordedRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response)
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _append_query_params(url: str, params: Optional[dict[str, Any]]) -> str:
    if not params:
        return url
    query = urlencode(params, doseq=True)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """`httpx_mock` fixture that also records every request made."""
    mock = _LocalHTTPXMock()

    def _sync_request(self, method, url, params=None, json=None, headers=None, **kwargs):
        full_url = _append_query_params(str(url), params)
        merged_headers = {k.lower(): v for k, v in self.headers.items()}
        merged_headers.update({k.lower(): v for k, v in (headers or {}).items()})
        mock.requests.append(
            RecordedRequest(method=method.upper(), url=full_url, json=json, headers=merged_headers)
        )
        match = mock._pop_match(method, full_url)
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    monkeypatch.setattr(httpx.Client, "request", _sync_request)
    return mock


@pytest.fixture
def sleeps(monkeypatch) -> list[float]:
    """Record retry back-off delays instead of sleeping."""
    delays: list[float] = []
    monkeypatch.setattr("enmeshed_connector.client.time.sleep", delays.append)
    return delays


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "test-api-key"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return BASE_URL


@pytest.fixture
def client(api_key: str, base_url: str) -> EnmeshedClient:
    """Create a test client."""
    # Keep non-retry tests deterministic; retry behavior is tested explicitly.
    client = EnmeshedClient(api_key=api_key, base_url=base_url, retry=RetryConfig(max_retries=0))
    yield client
    client.close()


# Mock response data, in Connector wire format
IDENTITY_INFO = {
    "address": "da88dd1b2b820360d4155162e657f84ea1394076faa1ce2909d8338811cb308d",
    "publicKey": "dbb5d8fd21caf827fdc128d73e783478d6677a9afc50120db56217726125425f",
    "realm": "4354b5ae54bab15544f852d7bc1b76bbd6d71a03b5e7ad876916cda3a602aaf9",
}

CONNECTOR_DISPLAY_NAME = "Test Connector"


def display_name_attribute(value: str = CONNECTOR_DISPLAY_NAME) -> dict[str, Any]:
    return {
        "id": "ATTR_ID",
        "createdAt": "2024-01-20T00:00:00.000Z",
        "content": {
            "@type": "IdentityAttribute",
            "owner": IDENTITY_INFO["address"],
            "value": {"@type": "DisplayName", "value": value},
        },
    }


def read_accept_item(value: dict[str, Any], result: str = "Accepted") -> dict[str, Any]:
    return {
        "@type": "ReadAttributeAcceptResponseItem",
        "result": result,
        "attributeId": f"ATT_{value['@type']}",
        "attribute": {
            "@type": "IdentityAttribute",
            "owner": "ADDR_XXX",
            "value": value,
        },
    }


def relationship(
    change_status: str,
    response_items: list[dict[str, Any]],
    relationship_id: str = "REL_XXX",
    change_id: str = "RCH_XXX",
    template_id: str = "RLT_XXX",
    peer: str = "ADDR_XXX",
) -> dict[str, Any]:
    return {
        "id": relationship_id,
        "template": {"id": template_id},
        "status": "Active" if change_status == "Accepted" else "Pending",
        "peer": peer,
        "peerIdentity": {"address": peer, "publicKey": "PUB_KEY", "realm": "id1"},
        "changes": [
            {
                "id": change_id,
                "type": "Creation",
                "status": change_status,
                "request": {
                    "createdBy": peer,
                    "createdAt": "2024-01-20T00:00:00.000Z",
                    "content": {
                        "@type": "RelationshipCreationChangeRequestContent",
                        "response": {
                            "@type": "Response",
                            "result": "Accepted",
                            "requestId": "REQ_ID",
                            "items": response_items,
                        },
                    },
                },
            }
        ],
    }


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return {
        "identity_info": IDENTITY_INFO,
        "display_name_attribute": display_name_attribute(),
    }
