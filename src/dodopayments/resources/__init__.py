"""
Resources for the Dodo Payments SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .addons import AddonsResource, AsyncAddonsResource
from .balances import AsyncBalancesResource, BalancesResource
from .brands import AsyncBrandsResource, BrandsResource
from .checkout_sessions import AsyncCheckoutSessionsResource, CheckoutSessionsResource
from .customers import (
    AsyncCustomersResource,
    AsyncLedgerEntriesResource,
    AsyncWalletsResource,
    CustomersResource,
    LedgerEntriesResource,
    WalletsResource,
)
from .discounts import AsyncDiscountsResource, DiscountsResource
from .disputes import AsyncDisputesResource, DisputesResource
from .invoices import AsyncInvoicesResource, InvoicesResource
from .license_key_instances import AsyncLicenseKeyInstancesResource, LicenseKeyInstancesResource
from .license_keys import AsyncLicenseKeysResource, LicenseKeysResource
from .licenses import AsyncLicensesResource, LicensesResource
from .meters import AsyncMetersResource, MetersResource
from .misc import AsyncMiscResource, MiscResource
from .payments import AsyncPaymentsResource, PaymentsResource
from .payouts import AsyncPayoutsResource, PayoutsResource
from .products import (
    AsyncImagesResource,
    AsyncProductsResource,
    AsyncShortLinksResource,
    ImagesResource,
    ProductsResource,
    ShortLinksResource,
)
from .refunds import AsyncRefundsResource, RefundsResource
from .subscriptions import AsyncSubscriptionsResource, PaymentMethodRequest, SubscriptionsResource
from .usage_events import AsyncUsageEventsResource, UsageEventsResource
from .webhooks import AsyncHeadersResource, AsyncWebhooksResource, HeadersResource, WebhooksResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    # Checkout and payments
    "CheckoutSessionsResource",
    "AsyncCheckoutSessionsResource",
    "PaymentsResource",
    "AsyncPaymentsResource",
    "InvoicesResource",
    "AsyncInvoicesResource",
    "RefundsResource",
    "AsyncRefundsResource",
    "DisputesResource",
    "AsyncDisputesResource",
    "PayoutsResource",
    "AsyncPayoutsResource",
    "BalancesResource",
    "AsyncBalancesResource",
    # Subscriptions and usage billing
    "SubscriptionsResource",
    "AsyncSubscriptionsResource",
    "PaymentMethodRequest",
    "MetersResource",
    "AsyncMetersResource",
    "UsageEventsResource",
    "AsyncUsageEventsResource",
    # Customers
    "CustomersResource",
    "AsyncCustomersResource",
    "WalletsResource",
    "AsyncWalletsResource",
    "LedgerEntriesResource",
    "AsyncLedgerEntriesResource",
    # Catalog
    "ProductsResource",
    "AsyncProductsResource",
    "ImagesResource",
    "AsyncImagesResource",
    "ShortLinksResource",
    "AsyncShortLinksResource",
    "AddonsResource",
    "AsyncAddonsResource",
    "BrandsResource",
    "AsyncBrandsResource",
    "DiscountsResource",
    "AsyncDiscountsResource",
    # Licensing
    "LicensesResource",
    "AsyncLicensesResource",
    "LicenseKeysResource",
    "AsyncLicenseKeysResource",
    "LicenseKeyInstancesResource",
    "AsyncLicenseKeyInstancesResource",
    # Webhooks
    "WebhooksResource",
    "AsyncWebhooksResource",
    "HeadersResource",
    "AsyncHeadersResource",
    # Misc
    "MiscResource",
    "AsyncMiscResource",
]
