"""
Webhooks resource for the Dodo Payments SDK.

Manages webhook endpoints and decodes the events delivered to them:

    ```python
    event = client.webhooks.unsafe_unwrap(request.body)
    if isinstance(event, PaymentWebhookEvent) and event.type == "payment.succeeded":
        fulfil(event.data.payment_id)
    ```
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..logging import get_logger
from ..models.base import DodoModel
from ..models.enums import WebhookEventType
from ..models.webhooks import (
    WebhookCreateParams,
    WebhookDetails,
    WebhookHeaders,
    WebhookHeadersUpdateParams,
    WebhookListParams,
    WebhookSecret,
    WebhookUpdateParams,
    parse_webhook_event,
)
from ..pagination import AsyncCursorPagePagination, SyncCursorPagePagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path

if TYPE_CHECKING:
    from ..client import AsyncDodoPayments, DodoPayments

logger = get_logger(__name__)


def _unwrap(payload: Union[str, bytes, Mapping[str, Any]]) -> DodoModel:
    event = parse_webhook_event(payload)
    logger.debug("Decoded webhook event %s", getattr(event, "type", type(event).__name__))
    return event


class AsyncHeadersResource(AsyncBaseResource):
    async def retrieve(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> WebhookHeaders:
        """Get the custom headers sent with deliveries to an endpoint."""
        return await self._get(
            f"webhooks/{quote_path(webhook_id)}/headers", cast_to=WebhookHeaders, options=options
        )

    async def update(
        self, webhook_id: str, *, headers: Dict[str, str], options: Optional[RequestOptions] = None
    ) -> None:
        """Replace the custom headers of an endpoint."""
        params = build_params(WebhookHeadersUpdateParams, headers=headers)
        await self._patch(f"webhooks/{quote_path(webhook_id)}/headers", body=params.to_wire(), options=options)


class AsyncWebhooksResource(AsyncBaseResource):
    """Async resource for webhook endpoints."""

    def __init__(self, client: "AsyncDodoPayments") -> None:
        super().__init__(client)
        self.headers = AsyncHeadersResource(client)

    async def create(
        self,
        *,
        url: str,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        disabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        filter_types: NotGivenOr[List[WebhookEventType]] = NOT_GIVEN,
        headers: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        idempotency_key: NotGivenOr[Optional[str]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        rate_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> WebhookDetails:
        """Register a webhook endpoint.

        Args:
            url: Endpoint URL events are POSTed to
            filter_types: Only deliver these event types; every type when omitted
            headers: Custom headers added to every delivery
            rate_limit: Maximum deliveries per second
            options: Per-call request options
        """
        params = build_params(
            WebhookCreateParams,
            url=url,
            description=description,
            disabled=disabled,
            filter_types=filter_types,
            headers=headers,
            idempotency_key=idempotency_key,
            metadata=metadata,
            rate_limit=rate_limit,
        )
        return await self._post("webhooks", body=params.to_wire(), cast_to=WebhookDetails, options=options)

    async def retrieve(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> WebhookDetails:
        return await self._get(f"webhooks/{quote_path(webhook_id)}", cast_to=WebhookDetails, options=options)

    async def update(
        self,
        webhook_id: str,
        *,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        disabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        filter_types: NotGivenOr[Optional[List[WebhookEventType]]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        rate_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> WebhookDetails:
        params = build_params(
            WebhookUpdateParams,
            description=description,
            disabled=disabled,
            filter_types=filter_types,
            metadata=metadata,
            rate_limit=rate_limit,
            url=url,
        )
        return await self._patch(
            f"webhooks/{quote_path(webhook_id)}", body=params.to_wire(), cast_to=WebhookDetails, options=options
        )

    async def list(
        self,
        *,
        iterator: NotGivenOr[Optional[str]] = NOT_GIVEN,
        limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncCursorPagePagination[WebhookDetails]:
        """List webhook endpoints. Pages are linked by an iterator token."""
        params = build_params(WebhookListParams, iterator=iterator, limit=limit)
        return await self._get_page(
            "webhooks", AsyncCursorPagePagination, WebhookDetails, query=params.to_wire(), options=options
        )

    async def delete(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> None:
        await self._delete(f"webhooks/{quote_path(webhook_id)}", options=options)

    async def retrieve_secret(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> WebhookSecret:
        """Get the signing secret of an endpoint."""
        return await self._get(f"webhooks/{quote_path(webhook_id)}/secret", cast_to=WebhookSecret, options=options)

    def unsafe_unwrap(self, payload: Union[str, bytes, Mapping[str, Any]]) -> DodoModel:
        """Decode a delivered event without checking its signature.

        Raises:
            ShapeMismatch: The payload is not a JSON object
            NoVariantMatched: The payload is not a known event
        """
        return _unwrap(payload)


class HeadersResource(SyncBaseResource):
    def retrieve(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> WebhookHeaders:
        """Get the custom headers sent with deliveries to an endpoint."""
        return self._get(f"webhooks/{quote_path(webhook_id)}/headers", cast_to=WebhookHeaders, options=options)

    def update(self, webhook_id: str, *, headers: Dict[str, str], options: Optional[RequestOptions] = None) -> None:
        """Replace the custom headers of an endpoint."""
        params = build_params(WebhookHeadersUpdateParams, headers=headers)
        self._patch(f"webhooks/{quote_path(webhook_id)}/headers", body=params.to_wire(), options=options)


class WebhooksResource(SyncBaseResource):
    """Sync resource for webhook endpoints."""

    def __init__(self, client: "DodoPayments") -> None:
        super().__init__(client)
        self.headers = HeadersResource(client)

    def create(
        self,
        *,
        url: str,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        disabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        filter_types: NotGivenOr[List[WebhookEventType]] = NOT_GIVEN,
        headers: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        idempotency_key: NotGivenOr[Optional[str]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        rate_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> WebhookDetails:
        """Register a webhook endpoint. See ``AsyncWebhooksResource.create``."""
        params = build_params(
            WebhookCreateParams,
            url=url,
            description=description,
            disabled=disabled,
            filter_types=filter_types,
            headers=headers,
            idempotency_key=idempotency_key,
            metadata=metadata,
            rate_limit=rate_limit,
        )
        return self._post("webhooks", body=params.to_wire(), cast_to=WebhookDetails, options=options)

    def retrieve(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> WebhookDetails:
        return self._get(f"webhooks/{quote_path(webhook_id)}", cast_to=WebhookDetails, options=options)

    def update(
        self,
        webhook_id: str,
        *,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        disabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        filter_types: NotGivenOr[Optional[List[WebhookEventType]]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        rate_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> WebhookDetails:
        params = build_params(
            WebhookUpdateParams,
            description=description,
            disabled=disabled,
            filter_types=filter_types,
            metadata=metadata,
            rate_limit=rate_limit,
            url=url,
        )
        return self._patch(
            f"webhooks/{quote_path(webhook_id)}", body=params.to_wire(), cast_to=WebhookDetails, options=options
        )

    def list(
        self,
        *,
        iterator: NotGivenOr[Optional[str]] = NOT_GIVEN,
        limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncCursorPagePagination[WebhookDetails]:
        """List webhook endpoints. Pages are linked by an iterator token."""
        params = build_params(WebhookListParams, iterator=iterator, limit=limit)
        return self._get_page(
            "webhooks", SyncCursorPagePagination, WebhookDetails, query=params.to_wire(), options=options
        )

    def delete(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> None:
        self._delete(f"webhooks/{quote_path(webhook_id)}", options=options)

    def retrieve_secret(self, webhook_id: str, *, options: Optional[RequestOptions] = None) -> WebhookSecret:
        """Get the signing secret of an endpoint."""
        return self._get(f"webhooks/{quote_path(webhook_id)}/secret", cast_to=WebhookSecret, options=options)

    def unsafe_unwrap(self, payload: Union[str, bytes, Mapping[str, Any]]) -> DodoModel:
        """Decode a delivered event without checking its signature.

        Raises:
            ShapeMismatch: The payload is not a JSON object
            NoVariantMatched: The payload is not a known event
        """
        return _unwrap(payload)


__all__ = ["AsyncHeadersResource", "AsyncWebhooksResource", "HeadersResource", "WebhooksResource"]
