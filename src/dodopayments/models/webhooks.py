"""Webhook endpoint models and the events delivered to them."""
from __future__ import annotations

import json
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import Field

from .base import DodoModel
from .disputes import Dispute
from .enums import WebhookEventType
from .errors import ShapeMismatch
from .licenses import LicenseKey
from .payments import Payment
from .payouts import Payout
from .refunds import Refund
from .subscriptions import Subscription
from .unions import Variant, resolve_variant


class WebhookDetails(DodoModel):
    """A registered webhook endpoint."""

    id: str
    created_at: str
    description: str
    metadata: Dict[str, str]
    updated_at: str
    url: str
    disabled: Optional[bool] = None
    filter_types: Optional[List[str]] = None
    rate_limit: Optional[int] = None


class WebhookCreateParams(DodoModel):
    url: str
    description: Optional[str] = None
    disabled: Optional[bool] = None
    filter_types: List[WebhookEventType] = Field(default=None)
    headers: Optional[Dict[str, str]] = None
    idempotency_key: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    rate_limit: Optional[int] = None


class WebhookUpdateParams(DodoModel):
    description: Optional[str] = None
    disabled: Optional[bool] = None
    filter_types: Optional[List[WebhookEventType]] = None
    metadata: Optional[Dict[str, str]] = None
    rate_limit: Optional[int] = None
    url: Optional[str] = None


class WebhookListParams(DodoModel):
    iterator: Optional[str] = None
    limit: Optional[int] = None


class WebhookSecret(DodoModel):
    """Signing secret of an endpoint."""

    secret: str


class WebhookHeaders(DodoModel):
    """Custom headers sent with every delivery; values of ``sensitive`` keys are redacted."""

    headers: Dict[str, str]
    sensitive: List[str]


class WebhookHeadersUpdateParams(DodoModel):
    headers: Dict[str, str]


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class PaymentEventData(Payment):
    payload_type: Literal["Payment"] = Field(default=None)


class RefundEventData(Refund):
    payload_type: Literal["Refund"] = Field(default=None)


class DisputeEventData(Dispute):
    payload_type: Literal["Dispute"] = Field(default=None)


class SubscriptionEventData(Subscription):
    payload_type: Literal["Subscription"] = Field(default=None)


class LicenseKeyEventData(LicenseKey):
    payload_type: Literal["LicenseKey"] = Field(default=None)


class PayoutEventData(Payout):
    payload_type: Literal["Payout"] = Field(default=None)


class CreditLedgerEntryEventData(DodoModel):
    """A movement on a customer's credit balance. Amounts are decimal strings."""

    id: str
    amount: str
    balance_after: str
    balance_before: str
    business_id: str
    created_at: datetime
    credit_entitlement_id: str
    customer_id: str
    is_credit: bool
    overage_after: str
    overage_before: str
    transaction_type: str
    payload_type: Literal["CreditLedgerEntry"] = Field(default=None)
    description: Optional[str] = None
    grant_id: Optional[str] = None
    reference_id: Optional[str] = None
    reference_type: Optional[str] = None


class CreditBalanceLowEventData(DodoModel):
    available_balance: str
    credit_entitlement_id: str
    credit_entitlement_name: str
    customer_id: str
    subscription_credits_amount: str
    subscription_id: str
    threshold_amount: str
    threshold_percent: int
    payload_type: Literal["CreditBalanceLow"] = Field(default=None)


class PaymentWebhookEvent(DodoModel):
    business_id: str
    data: PaymentEventData
    timestamp: datetime
    type: Literal["payment.succeeded", "payment.failed", "payment.processing", "payment.cancelled"]


class RefundWebhookEvent(DodoModel):
    business_id: str
    data: RefundEventData
    timestamp: datetime
    type: Literal["refund.succeeded", "refund.failed"]


class DisputeWebhookEvent(DodoModel):
    business_id: str
    data: DisputeEventData
    timestamp: datetime
    type: Literal[
        "dispute.opened",
        "dispute.expired",
        "dispute.accepted",
        "dispute.cancelled",
        "dispute.challenged",
        "dispute.won",
        "dispute.lost",
    ]


class SubscriptionWebhookEvent(DodoModel):
    business_id: str
    data: SubscriptionEventData
    timestamp: datetime
    type: Literal[
        "subscription.active",
        "subscription.renewed",
        "subscription.on_hold",
        "subscription.cancelled",
        "subscription.failed",
        "subscription.expired",
        "subscription.plan_changed",
        "subscription.updated",
    ]


class LicenseKeyWebhookEvent(DodoModel):
    business_id: str
    data: LicenseKeyEventData
    timestamp: datetime
    type: Literal["license_key.created"]


class PayoutWebhookEvent(DodoModel):
    business_id: str
    data: PayoutEventData
    timestamp: datetime
    type: Literal[
        "payout.not_initiated",
        "payout.on_hold",
        "payout.in_progress",
        "payout.failed",
        "payout.success",
    ]


class CreditLedgerWebhookEvent(DodoModel):
    business_id: str
    data: CreditLedgerEntryEventData
    timestamp: datetime
    type: Literal[
        "credit.added",
        "credit.deducted",
        "credit.expired",
        "credit.rolled_over",
        "credit.rollover_forfeited",
        "credit.overage_charged",
        "credit.manual_adjustment",
    ]


class CreditBalanceLowWebhookEvent(DodoModel):
    business_id: str
    data: CreditBalanceLowEventData
    timestamp: datetime
    type: Literal["credit.balance_low"]


WEBHOOK_EVENT_MODELS = (
    CreditBalanceLowWebhookEvent,
    CreditLedgerWebhookEvent,
    DisputeWebhookEvent,
    LicenseKeyWebhookEvent,
    PaymentWebhookEvent,
    PayoutWebhookEvent,
    RefundWebhookEvent,
    SubscriptionWebhookEvent,
)

WebhookEvent = Annotated[
    Union[
        CreditBalanceLowWebhookEvent,
        CreditLedgerWebhookEvent,
        DisputeWebhookEvent,
        LicenseKeyWebhookEvent,
        PaymentWebhookEvent,
        PayoutWebhookEvent,
        RefundWebhookEvent,
        SubscriptionWebhookEvent,
    ],
    Variant(discriminator="type"),
]


def parse_webhook_event(payload: Union[str, bytes, Mapping[str, Any]]) -> DodoModel:
    """Decode a webhook request body into its event model.

    The signature is not checked; only call this on payloads that were
    verified by other means.

    Raises:
        ShapeMismatch: The payload is not a JSON object
        NoVariantMatched: No event model accepted the payload
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise ShapeMismatch("WebhookEvent", "", f"invalid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ShapeMismatch("WebhookEvent", "", f"expected an object, got {type(payload).__name__}")
    return resolve_variant(WEBHOOK_EVENT_MODELS, payload, discriminator="type")


__all__ = [
    "WebhookDetails",
    "WebhookCreateParams",
    "WebhookUpdateParams",
    "WebhookListParams",
    "WebhookSecret",
    "WebhookHeaders",
    "WebhookHeadersUpdateParams",
    "PaymentEventData",
    "RefundEventData",
    "DisputeEventData",
    "SubscriptionEventData",
    "LicenseKeyEventData",
    "PayoutEventData",
    "CreditLedgerEntryEventData",
    "CreditBalanceLowEventData",
    "PaymentWebhookEvent",
    "RefundWebhookEvent",
    "DisputeWebhookEvent",
    "SubscriptionWebhookEvent",
    "LicenseKeyWebhookEvent",
    "PayoutWebhookEvent",
    "CreditLedgerWebhookEvent",
    "CreditBalanceLowWebhookEvent",
    "WEBHOOK_EVENT_MODELS",
    "WebhookEvent",
    "parse_webhook_event",
]
