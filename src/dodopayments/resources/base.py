"""
Base resource classes for the Dodo Payments SDK.

This module provides the foundation for all API resource classes,
supporting both synchronous and asynchronous clients.
"""
from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Mapping,
    Optional,
    Type,
    TypeVar,
    Union,
)
from urllib.parse import quote

from .._types import NotGiven, RequestOptions
from ..models.base import DodoModel
from ..pagination import BasePage, PageRequest

if TYPE_CHECKING:
    from ..client import AsyncDodoPayments, DodoPayments

# Type variable for params models
M = TypeVar("M", bound=DodoModel)
P = TypeVar("P", bound=BasePage)

CastTo = Union[Type[DodoModel], Callable[[Any], Any], None]


def quote_path(value: Any) -> str:
    """URL-quote a single path segment, including any ``/`` it contains."""
    return quote(str(value), safe="")


def strip_not_given(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop arguments the caller did not pass; ``None`` is kept."""
    return {key: value for key, value in values.items() if not isinstance(value, NotGiven)}


def build_params(model_cls: Type[M], **values: Any) -> M:
    """Build a params model from keyword arguments.

    Arguments equal to ``NOT_GIVEN`` stay unset, so they are left out of the
    request rather than sent as ``null``.

    Raises:
        InvalidField: An argument does not fit its field
    """
    given = strip_not_given(values)
    params = model_cls.empty()
    return params.with_(**given) if given else params


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncDodoPayments") -> None:
        self._client = client

    async def _get(
        self,
        path: str,
        *,
        query: Optional[Dict[str, Any]] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
        binary: bool = False,
    ) -> Any:
        """Make a GET request.

        Args:
            path: API endpoint path
            query: Query parameters
            cast_to: Response model
            options: Per-call request options
            binary: Return raw bytes instead of decoded JSON
        """
        return await self._client.request(
            "GET", path, query=query, cast_to=cast_to, options=options, binary=binary
        )

    async def _post(
        self,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a POST request."""
        return await self._client.request(
            "POST", path, query=query, body=body, cast_to=cast_to, options=options
        )

    async def _put(
        self,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a PUT request."""
        return await self._client.request(
            "PUT", path, query=query, body=body, cast_to=cast_to, options=options
        )

    async def _patch(
        self,
        path: str,
        *,
        body: Optional[Any] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a PATCH request."""
        return await self._client.request("PATCH", path, body=body, cast_to=cast_to, options=options)

    async def _delete(
        self,
        path: str,
        *,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a DELETE request."""
        return await self._client.request("DELETE", path, cast_to=cast_to, options=options)

    async def _get_page(
        self,
        path: str,
        page_cls: Type[P],
        item_model: Type[DodoModel],
        *,
        query: Optional[Dict[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> P:
        """Fetch the first page of a list endpoint.

        Args:
            path: API endpoint path
            page_cls: Page wrapper type
            item_model: Model each item is decoded into
            query: Query parameters of the first page
            options: Per-call request options, reused for later pages
        """
        request = PageRequest(method="GET", path=path, query=dict(query or {}), options=options)
        return await self._client.request_page(page_cls, item_model, request)


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "DodoPayments") -> None:
        self._client = client

    def _get(
        self,
        path: str,
        *,
        query: Optional[Dict[str, Any]] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
        binary: bool = False,
    ) -> Any:
        """Make a GET request.

        Args:
            path: API endpoint path
            query: Query parameters
            cast_to: Response model
            options: Per-call request options
            binary: Return raw bytes instead of decoded JSON
        """
        return self._client.request(
            "GET", path, query=query, cast_to=cast_to, options=options, binary=binary
        )

    def _post(
        self,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a POST request."""
        return self._client.request("POST", path, query=query, body=body, cast_to=cast_to, options=options)

    def _put(
        self,
        path: str,
        *,
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a PUT request."""
        return self._client.request("PUT", path, query=query, body=body, cast_to=cast_to, options=options)

    def _patch(
        self,
        path: str,
        *,
        body: Optional[Any] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a PATCH request."""
        return self._client.request("PATCH", path, body=body, cast_to=cast_to, options=options)

    def _delete(
        self,
        path: str,
        *,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make a DELETE request."""
        return self._client.request("DELETE", path, cast_to=cast_to, options=options)

    def _get_page(
        self,
        path: str,
        page_cls: Type[P],
        item_model: Type[DodoModel],
        *,
        query: Optional[Dict[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> P:
        """Fetch the first page of a list endpoint.

        Args:
            path: API endpoint path
            page_cls: Page wrapper type
            item_model: Model each item is decoded into
            query: Query parameters of the first page
            options: Per-call request options, reused for later pages
        """
        request = PageRequest(method="GET", path=path, query=dict(query or {}), options=options)
        return self._client.request_page(page_cls, item_model, request)


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
    "build_params",
    "quote_path",
    "strip_not_given",
]
