"""
Base resource class for the enmeshed connector client.

Resources group the Connector endpoints by API area and translate between
wire dictionaries and models.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar

import pydantic

from ..models.errors import MalformedResponseError

if TYPE_CHECKING:
    from ..client import EnmeshedClient

M = TypeVar("M", bound=pydantic.BaseModel)


class SyncBaseResource:
    """Base class for API resources.

    Attributes:
        _client: The client instance
    """

    def __init__(self, client: "EnmeshedClient") -> None:
        self._client = client

    def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
        retryable: bool = True,
        raw: bool = False,
    ) -> Any:
        """Make a GET request. Reads are retryable by default."""
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        return self._client._request(
            "GET",
            path,
            params=params or None,
            accept=accept,
            retryable=retryable,
            raw=raw,
        )

    def _post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        retryable: bool = False,
    ) -> Any:
        """Make a POST request."""
        return self._client._request("POST", path, json=data, retryable=retryable)

    def _put(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        retryable: bool = False,
    ) -> Any:
        """Make a PUT request."""
        return self._client._request("PUT", path, json=data, retryable=retryable)

    @staticmethod
    def _parse(model: Type[M], data: Any) -> M:
        """Validate a response body into ``model``.

        Raises:
            MalformedResponseError: the body does not have the model's shape
        """
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected {model.__name__} payload from the Connector",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def _parse_list(self, model: Type[M], data: Any) -> List[M]:
        """Validate a list response body, treating an empty body as no items."""
        if data is None:
            return []
        if not isinstance(data, list):
            raise MalformedResponseError(
                f"Expected a list of {model.__name__} from the Connector",
                details={"type": type(data).__name__},
            )
        return [self._parse(model, item) for item in data]
