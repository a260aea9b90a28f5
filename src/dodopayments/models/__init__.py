"""Dodo Payments SDK models."""
from .base import DodoModel
from .fields import (
    FieldDescriptor,
    FieldKind,
)
from .unions import (
    Variant,
    resolve_variant,
)
from .enums import (
    OpenEnum,
    Currency,
    CountryCode,
    TaxCategory,
    TimeInterval,
    IntentStatus,
    SubscriptionStatus,
    RefundStatus,
    DisputeStage,
    DisputeStatus,
    LicenseKeyStatus,
    DiscountType,
    PayoutStatus,
    ProrationBillingMode,
    PaymentMethodTypes,
    WebhookEventType,
    BalanceEventType,
    MeterAggregationType,
    FilterOperator,
    FilterConjunction,
)
from .errors import (
    ErrorCode,
    DodoPaymentsError,
    ModelError,
    MissingRequiredField,
    ShapeMismatch,
    InvalidField,
    NoVariantMatched,
    ResponseValidationError,
    TransportError,
    APIConnectionError,
    APITimeoutError,
    APIStatusError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    ConflictError,
    UnprocessableEntityError,
    RateLimitError,
    InternalServerError,
    join_path,
)
from .shared import (
    BillingAddress,
    AttachExistingCustomer,
    NewCustomer,
    CustomerRequest,
    CustomerLimitedDetails,
    OneTimeProductCartItem,
    AttachAddon,
    AddonCartResponseItem,
    OnDemandSubscription,
)
from .checkout_sessions import (
    CheckoutProductCartItem,
    CheckoutBillingAddress,
    CustomField,
    Customization,
    FeatureFlags,
    SubscriptionData,
    CheckoutSessionCreateParams,
    CheckoutSessionPreviewParams,
    CheckoutSessionResponse,
    CheckoutSessionStatus,
    PreviewBreakup,
    PreviewCartMeter,
    PreviewCartAddon,
    PreviewCartItem,
    CheckoutSessionPreviewResponse,
)
from .payments import (
    PaymentCreateParams,
    PaymentCreateResponse,
    PaymentProductCartItem,
    CustomFieldResponse,
    Payment,
    PaymentListItem,
    PaymentListParams,
    PaymentLineItem,
    PaymentLineItems,
)
from .refunds import (
    RefundListItem,
    Refund,
    RefundItem,
    RefundCreateParams,
    RefundListParams,
)
from .disputes import (
    Dispute,
    GetDispute,
    DisputeListParams,
)
from .subscriptions import (
    SubscriptionMeter,
    SubscriptionListItem,
    Subscription,
    SubscriptionCreateParams,
    SubscriptionCreateResponse,
    DisableOnDemand,
    SubscriptionUpdateParams,
    SubscriptionListParams,
    SubscriptionChangePlanParams,
    CustomerBalanceConfig,
    SubscriptionChargeParams,
    SubscriptionChargeResponse,
    SubscriptionLineItem,
    AddonLineItem,
    MeterLineItem,
    LineItem,
    ImmediateChargeSummary,
    ImmediateCharge,
    SubscriptionPreviewChangePlanResponse,
    SubscriptionUsageHistoryParams,
    UsageHistoryMeter,
    SubscriptionUsageHistoryItem,
    NewPaymentMethod,
    ExistingPaymentMethod,
    SubscriptionUpdatePaymentMethodParams,
    SubscriptionUpdatePaymentMethodResponse,
)
from .licenses import (
    LicenseKey,
    LicenseKeyUpdateParams,
    LicenseKeyListParams,
    LicenseKeyInstance,
    LicenseKeyInstanceUpdateParams,
    LicenseKeyInstanceListParams,
    LicenseActivateParams,
    LicensedProduct,
    LicenseActivateResponse,
    LicenseDeactivateParams,
    LicenseValidateParams,
    LicenseValidateResponse,
)
from .customers import (
    Customer,
    CustomerCreateParams,
    CustomerUpdateParams,
    CustomerListParams,
    CustomerPortalSession,
    SavedCard,
    ConnectorPaymentMethod,
    SavedPaymentMethod,
    CustomerPaymentMethods,
    CustomerWallet,
    WalletListResponse,
    CustomerWalletTransaction,
    LedgerEntryCreateParams,
    LedgerEntryListParams,
)
from .products import (
    OneTimePrice,
    RecurringPrice,
    AddMeterToPrice,
    UsageBasedPrice,
    Price,
    LicenseKeyDuration,
    DigitalProductFile,
    DigitalProductDelivery,
    Product,
    ProductListItem,
    DigitalProductDeliveryParams,
    DigitalProductDeliveryUpdate,
    ProductCreateParams,
    ProductUpdateParams,
    ProductListParams,
    ProductUpdateFilesParams,
    ProductUpdateFilesResponse,
    ImageUpdateResponse,
    ShortLinkCreateParams,
    ShortLinkCreateResponse,
    ShortLinkListItem,
    ShortLinkListParams,
)
from .discounts import (
    Discount,
    DiscountCreateParams,
    DiscountUpdateParams,
    DiscountListParams,
)
from .addons import (
    Addon,
    AddonCreateParams,
    AddonUpdateParams,
    AddonListParams,
    AddonUpdateImagesResponse,
)
from .brands import (
    VerificationStatus,
    Brand,
    BrandCreateParams,
    BrandUpdateParams,
    BrandListResponse,
    BrandUpdateImagesResponse,
)
from .payouts import (
    Payout,
    PayoutListParams,
)
from .webhooks import (
    WebhookDetails,
    WebhookCreateParams,
    WebhookUpdateParams,
    WebhookListParams,
    WebhookSecret,
    WebhookHeaders,
    WebhookHeadersUpdateParams,
    PaymentEventData,
    RefundEventData,
    DisputeEventData,
    SubscriptionEventData,
    LicenseKeyEventData,
    PayoutEventData,
    CreditLedgerEntryEventData,
    CreditBalanceLowEventData,
    PaymentWebhookEvent,
    RefundWebhookEvent,
    DisputeWebhookEvent,
    SubscriptionWebhookEvent,
    LicenseKeyWebhookEvent,
    PayoutWebhookEvent,
    CreditLedgerWebhookEvent,
    CreditBalanceLowWebhookEvent,
    WEBHOOK_EVENT_MODELS,
    WebhookEvent,
    parse_webhook_event,
)
from .usage_events import (
    EventMetadata,
    UsageEvent,
    EventInput,
    UsageEventIngestParams,
    UsageEventIngestResponse,
    UsageEventListParams,
)
from .meters import (
    MeterAggregation,
    DirectFilterCondition,
    MeterFilter,
    Meter,
    MeterCreateParams,
    MeterListParams,
)
from .balances import (
    BalanceLedgerEntry,
    BalanceLedgerParams,
)

__all__ = [
    "DodoModel",
    "FieldDescriptor",
    "FieldKind",
    "Variant",
    "resolve_variant",
    "OpenEnum",
    "Currency",
    "CountryCode",
    "TaxCategory",
    "TimeInterval",
    "IntentStatus",
    "SubscriptionStatus",
    "RefundStatus",
    "DisputeStage",
    "DisputeStatus",
    "LicenseKeyStatus",
    "DiscountType",
    "PayoutStatus",
    "ProrationBillingMode",
    "PaymentMethodTypes",
    "WebhookEventType",
    "BalanceEventType",
    "MeterAggregationType",
    "FilterOperator",
    "FilterConjunction",
    "ErrorCode",
    "DodoPaymentsError",
    "ModelError",
    "MissingRequiredField",
    "ShapeMismatch",
    "InvalidField",
    "NoVariantMatched",
    "ResponseValidationError",
    "TransportError",
    "APIConnectionError",
    "APITimeoutError",
    "APIStatusError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "InternalServerError",
    "join_path",
    "BillingAddress",
    "AttachExistingCustomer",
    "NewCustomer",
    "CustomerRequest",
    "CustomerLimitedDetails",
    "OneTimeProductCartItem",
    "AttachAddon",
    "AddonCartResponseItem",
    "OnDemandSubscription",
    "CheckoutProductCartItem",
    "CheckoutBillingAddress",
    "CustomField",
    "Customization",
    "FeatureFlags",
    "SubscriptionData",
    "CheckoutSessionCreateParams",
    "CheckoutSessionPreviewParams",
    "CheckoutSessionResponse",
    "CheckoutSessionStatus",
    "PreviewBreakup",
    "PreviewCartMeter",
    "PreviewCartAddon",
    "PreviewCartItem",
    "CheckoutSessionPreviewResponse",
    "PaymentCreateParams",
    "PaymentCreateResponse",
    "PaymentProductCartItem",
    "CustomFieldResponse",
    "Payment",
    "PaymentListItem",
    "PaymentListParams",
    "PaymentLineItem",
    "PaymentLineItems",
    "RefundListItem",
    "Refund",
    "RefundItem",
    "RefundCreateParams",
    "RefundListParams",
    "Dispute",
    "GetDispute",
    "DisputeListParams",
    "SubscriptionMeter",
    "SubscriptionListItem",
    "Subscription",
    "SubscriptionCreateParams",
    "SubscriptionCreateResponse",
    "DisableOnDemand",
    "SubscriptionUpdateParams",
    "SubscriptionListParams",
    "SubscriptionChangePlanParams",
    "CustomerBalanceConfig",
    "SubscriptionChargeParams",
    "SubscriptionChargeResponse",
    "SubscriptionLineItem",
    "AddonLineItem",
    "MeterLineItem",
    "LineItem",
    "ImmediateChargeSummary",
    "ImmediateCharge",
    "SubscriptionPreviewChangePlanResponse",
    "SubscriptionUsageHistoryParams",
    "UsageHistoryMeter",
    "SubscriptionUsageHistoryItem",
    "NewPaymentMethod",
    "ExistingPaymentMethod",
    "SubscriptionUpdatePaymentMethodParams",
    "SubscriptionUpdatePaymentMethodResponse",
    "LicenseKey",
    "LicenseKeyUpdateParams",
    "LicenseKeyListParams",
    "LicenseKeyInstance",
    "LicenseKeyInstanceUpdateParams",
    "LicenseKeyInstanceListParams",
    "LicenseActivateParams",
    "LicensedProduct",
    "LicenseActivateResponse",
    "LicenseDeactivateParams",
    "LicenseValidateParams",
    "LicenseValidateResponse",
    "Customer",
    "CustomerCreateParams",
    "CustomerUpdateParams",
    "CustomerListParams",
    "CustomerPortalSession",
    "SavedCard",
    "ConnectorPaymentMethod",
    "SavedPaymentMethod",
    "CustomerPaymentMethods",
    "CustomerWallet",
    "WalletListResponse",
    "CustomerWalletTransaction",
    "LedgerEntryCreateParams",
    "LedgerEntryListParams",
    "OneTimePrice",
    "RecurringPrice",
    "AddMeterToPrice",
    "UsageBasedPrice",
    "Price",
    "LicenseKeyDuration",
    "DigitalProductFile",
    "DigitalProductDelivery",
    "Product",
    "ProductListItem",
    "DigitalProductDeliveryParams",
    "DigitalProductDeliveryUpdate",
    "ProductCreateParams",
    "ProductUpdateParams",
    "ProductListParams",
    "ProductUpdateFilesParams",
    "ProductUpdateFilesResponse",
    "ImageUpdateResponse",
    "ShortLinkCreateParams",
    "ShortLinkCreateResponse",
    "ShortLinkListItem",
    "ShortLinkListParams",
    "Discount",
    "DiscountCreateParams",
    "DiscountUpdateParams",
    "DiscountListParams",
    "Addon",
    "AddonCreateParams",
    "AddonUpdateParams",
    "AddonListParams",
    "AddonUpdateImagesResponse",
    "VerificationStatus",
    "Brand",
    "BrandCreateParams",
    "BrandUpdateParams",
    "BrandListResponse",
    "BrandUpdateImagesResponse",
    "Payout",
    "PayoutListParams",
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
    "EventMetadata",
    "UsageEvent",
    "EventInput",
    "UsageEventIngestParams",
    "UsageEventIngestResponse",
    "UsageEventListParams",
    "MeterAggregation",
    "DirectFilterCondition",
    "MeterFilter",
    "Meter",
    "MeterCreateParams",
    "MeterListParams",
    "BalanceLedgerEntry",
    "BalanceLedgerParams",
]
