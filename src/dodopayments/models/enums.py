"""Enumerations shared across Dodo Payments models.

All enums are open-world: a string the SDK does not know yet is accepted and
kept as-is instead of failing the whole response.

    >>> IntentStatus("succeeded") is IntentStatus.SUCCEEDED
    True
    >>> status = IntentStatus("settled_later")
    >>> status.value, status.is_known
    ('settled_later', False)
"""
from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, Optional


class OpenEnum(str, Enum):
    """String enum that keeps unknown values instead of rejecting them."""

    @classmethod
    def _missing_(cls, value: Any) -> Optional["OpenEnum"]:
        if not isinstance(value, str):
            return None
        pseudo = cls._value2member_map_.get(value)
        if pseudo is None:
            pseudo = str.__new__(cls, value)
            pseudo._name_ = value
            pseudo._value_ = value
            # Cached so repeated decodes of the same unknown value share one object.
            cls._value2member_map_[value] = pseudo
        return pseudo

    @classmethod
    def known_values(cls) -> FrozenSet[str]:
        return frozenset(member.value for member in cls)

    @property
    def is_known(self) -> bool:
        """Whether the value is one of the declared members."""
        return any(self is member for member in type(self))

    def __str__(self) -> str:
        return self.value


class Currency(OpenEnum):
    AED = "AED"
    ALL = "ALL"
    AMD = "AMD"
    ANG = "ANG"
    AOA = "AOA"
    ARS = "ARS"
    AUD = "AUD"
    AWG = "AWG"
    AZN = "AZN"
    BAM = "BAM"
    BBD = "BBD"
    BDT = "BDT"
    BGN = "BGN"
    BHD = "BHD"
    BIF = "BIF"
    BMD = "BMD"
    BND = "BND"
    BOB = "BOB"
    BRL = "BRL"
    BSD = "BSD"
    BWP = "BWP"
    BYN = "BYN"
    BZD = "BZD"
    CAD = "CAD"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CRC = "CRC"
    CUP = "CUP"
    CVE = "CVE"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ETB = "ETB"
    EUR = "EUR"
    FJD = "FJD"
    FKP = "FKP"
    GBP = "GBP"
    GEL = "GEL"
    GHS = "GHS"
    GIP = "GIP"
    GMD = "GMD"
    GNF = "GNF"
    GTQ = "GTQ"
    GYD = "GYD"
    HKD = "HKD"
    HNL = "HNL"
    HRK = "HRK"
    HTG = "HTG"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    IQD = "IQD"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KGS = "KGS"
    KHR = "KHR"
    KMF = "KMF"
    KRW = "KRW"
    KWD = "KWD"
    KYD = "KYD"
    KZT = "KZT"
    LAK = "LAK"
    LBP = "LBP"
    LKR = "LKR"
    LRD = "LRD"
    LSL = "LSL"
    LYD = "LYD"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MNT = "MNT"
    MOP = "MOP"
    MRU = "MRU"
    MUR = "MUR"
    MVR = "MVR"
    MWK = "MWK"
    MXN = "MXN"
    MYR = "MYR"
    MZN = "MZN"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PAB = "PAB"
    PEN = "PEN"
    PGK = "PGK"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RON = "RON"
    RSD = "RSD"
    RUB = "RUB"
    RWF = "RWF"
    SAR = "SAR"
    SBD = "SBD"
    SCR = "SCR"
    SEK = "SEK"
    SGD = "SGD"
    SHP = "SHP"
    SLE = "SLE"
    SLL = "SLL"
    SOS = "SOS"
    SRD = "SRD"
    SSP = "SSP"
    STN = "STN"
    SVC = "SVC"
    SZL = "SZL"
    THB = "THB"
    TND = "TND"
    TOP = "TOP"
    TRY = "TRY"
    TTD = "TTD"
    TWD = "TWD"
    TZS = "TZS"
    UAH = "UAH"
    UGX = "UGX"
    USD = "USD"
    UYU = "UYU"
    UZS = "UZS"
    VES = "VES"
    VND = "VND"
    VUV = "VUV"
    WST = "WST"
    XAF = "XAF"
    XCD = "XCD"
    XOF = "XOF"
    XPF = "XPF"
    YER = "YER"
    ZAR = "ZAR"
    ZMW = "ZMW"


class CountryCode(OpenEnum):
    """ISO 3166-1 alpha-2 country codes."""

    AF = "AF"
    AX = "AX"
    AL = "AL"
    DZ = "DZ"
    AS = "AS"
    AD = "AD"
    AO = "AO"
    AI = "AI"
    AQ = "AQ"
    AG = "AG"
    AR = "AR"
    AM = "AM"
    AW = "AW"
    AU = "AU"
    AT = "AT"
    AZ = "AZ"
    BS = "BS"
    BH = "BH"
    BD = "BD"
    BB = "BB"
    BY = "BY"
    BE = "BE"
    BZ = "BZ"
    BJ = "BJ"
    BM = "BM"
    BT = "BT"
    BO = "BO"
    BQ = "BQ"
    BA = "BA"
    BW = "BW"
    BV = "BV"
    BR = "BR"
    IO = "IO"
    BN = "BN"
    BG = "BG"
    BF = "BF"
    BI = "BI"
    KH = "KH"
    CM = "CM"
    CA = "CA"
    CV = "CV"
    KY = "KY"
    CF = "CF"
    TD = "TD"
    CL = "CL"
    CN = "CN"
    CX = "CX"
    CC = "CC"
    CO = "CO"
    KM = "KM"
    CG = "CG"
    CD = "CD"
    CK = "CK"
    CR = "CR"
    CI = "CI"
    HR = "HR"
    CU = "CU"
    CW = "CW"
    CY = "CY"
    CZ = "CZ"
    DK = "DK"
    DJ = "DJ"
    DM = "DM"
    DO = "DO"
    EC = "EC"
    EG = "EG"
    SV = "SV"
    GQ = "GQ"
    ER = "ER"
    EE = "EE"
    ET = "ET"
    FK = "FK"
    FO = "FO"
    FJ = "FJ"
    FI = "FI"
    FR = "FR"
    GF = "GF"
    PF = "PF"
    TF = "TF"
    GA = "GA"
    GM = "GM"
    GE = "GE"
    DE = "DE"
    GH = "GH"
    GI = "GI"
    GR = "GR"
    GL = "GL"
    GD = "GD"
    GP = "GP"
    GU = "GU"
    GT = "GT"
    GG = "GG"
    GN = "GN"
    GW = "GW"
    GY = "GY"
    HT = "HT"
    HM = "HM"
    VA = "VA"
    HN = "HN"
    HK = "HK"
    HU = "HU"
    IS = "IS"
    IN = "IN"
    ID = "ID"
    IR = "IR"
    IQ = "IQ"
    IE = "IE"
    IM = "IM"
    IL = "IL"
    IT = "IT"
    JM = "JM"
    JP = "JP"
    JE = "JE"
    JO = "JO"
    KZ = "KZ"
    KE = "KE"
    KI = "KI"
    KP = "KP"
    KR = "KR"
    KW = "KW"
    KG = "KG"
    LA = "LA"
    LV = "LV"
    LB = "LB"
    LS = "LS"
    LR = "LR"
    LY = "LY"
    LI = "LI"
    LT = "LT"
    LU = "LU"
    MO = "MO"
    MK = "MK"
    MG = "MG"
    MW = "MW"
    MY = "MY"
    MV = "MV"
    ML = "ML"
    MT = "MT"
    MH = "MH"
    MQ = "MQ"
    MR = "MR"
    MU = "MU"
    YT = "YT"
    MX = "MX"
    FM = "FM"
    MD = "MD"
    MC = "MC"
    MN = "MN"
    ME = "ME"
    MS = "MS"
    MA = "MA"
    MZ = "MZ"
    MM = "MM"
    NA = "NA"
    NR = "NR"
    NP = "NP"
    NL = "NL"
    NC = "NC"
    NZ = "NZ"
    NI = "NI"
    NE = "NE"
    NG = "NG"
    NU = "NU"
    NF = "NF"
    MP = "MP"
    NO = "NO"
    OM = "OM"
    PK = "PK"
    PW = "PW"
    PS = "PS"
    PA = "PA"
    PG = "PG"
    PY = "PY"
    PE = "PE"
    PH = "PH"
    PN = "PN"
    PL = "PL"
    PT = "PT"
    PR = "PR"
    QA = "QA"
    RE = "RE"
    RO = "RO"
    RU = "RU"
    RW = "RW"
    BL = "BL"
    SH = "SH"
    KN = "KN"
    LC = "LC"
    MF = "MF"
    PM = "PM"
    VC = "VC"
    WS = "WS"
    SM = "SM"
    ST = "ST"
    SA = "SA"
    SN = "SN"
    RS = "RS"
    SC = "SC"
    SL = "SL"
    SG = "SG"
    SX = "SX"
    SK = "SK"
    SI = "SI"
    SB = "SB"
    SO = "SO"
    ZA = "ZA"
    GS = "GS"
    SS = "SS"
    ES = "ES"
    LK = "LK"
    SD = "SD"
    SR = "SR"
    SJ = "SJ"
    SZ = "SZ"
    SE = "SE"
    CH = "CH"
    SY = "SY"
    TW = "TW"
    TJ = "TJ"
    TZ = "TZ"
    TH = "TH"
    TL = "TL"
    TG = "TG"
    TK = "TK"
    TO = "TO"
    TT = "TT"
    TN = "TN"
    TR = "TR"
    TM = "TM"
    TC = "TC"
    TV = "TV"
    UG = "UG"
    UA = "UA"
    AE = "AE"
    GB = "GB"
    UM = "UM"
    US = "US"
    UY = "UY"
    UZ = "UZ"
    VU = "VU"
    VE = "VE"
    VN = "VN"
    VG = "VG"
    VI = "VI"
    WF = "WF"
    EH = "EH"
    YE = "YE"
    ZM = "ZM"
    ZW = "ZW"


class TaxCategory(OpenEnum):
    DIGITAL_PRODUCTS = "digital_products"
    SAAS = "saas"
    E_BOOK = "e_book"
    EDTECH = "edtech"


class TimeInterval(OpenEnum):
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"


class IntentStatus(OpenEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    PROCESSING = "processing"
    REQUIRES_CUSTOMER_ACTION = "requires_customer_action"
    REQUIRES_MERCHANT_ACTION = "requires_merchant_action"
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_CAPTURE = "requires_capture"
    PARTIALLY_CAPTURED = "partially_captured"
    PARTIALLY_CAPTURED_AND_CAPTURABLE = "partially_captured_and_capturable"


class SubscriptionStatus(OpenEnum):
    PENDING = "pending"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"
    FAILED = "failed"
    EXPIRED = "expired"


class RefundStatus(OpenEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PENDING = "pending"
    REVIEW = "review"


class DisputeStage(OpenEnum):
    PRE_DISPUTE = "pre_dispute"
    DISPUTE = "dispute"
    PRE_ARBITRATION = "pre_arbitration"


class DisputeStatus(OpenEnum):
    DISPUTE_OPENED = "dispute_opened"
    DISPUTE_EXPIRED = "dispute_expired"
    DISPUTE_ACCEPTED = "dispute_accepted"
    DISPUTE_CANCELLED = "dispute_cancelled"
    DISPUTE_CHALLENGED = "dispute_challenged"
    DISPUTE_WON = "dispute_won"
    DISPUTE_LOST = "dispute_lost"


class LicenseKeyStatus(OpenEnum):
    ACTIVE = "active"
    EXPIRED = "expired"
    DISABLED = "disabled"


class DiscountType(OpenEnum):
    PERCENTAGE = "percentage"


class PayoutStatus(OpenEnum):
    NOT_INITIATED = "not_initiated"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    FAILED = "failed"
    SUCCESS = "success"


class ProrationBillingMode(OpenEnum):
    PRORATED_IMMEDIATELY = "prorated_immediately"
    FULL_IMMEDIATELY = "full_immediately"
    DIFFERENCE_IMMEDIATELY = "difference_immediately"


class PaymentMethodTypes(OpenEnum):
    ACH = "ach"
    AFFIRM = "affirm"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALFAMART = "alfamart"
    ALI_PAY = "ali_pay"
    ALI_PAY_HK = "ali_pay_hk"
    ALMA = "alma"
    AMAZON_PAY = "amazon_pay"
    APPLE_PAY = "apple_pay"
    ATOME = "atome"
    BACS = "bacs"
    BANCONTACT_CARD = "bancontact_card"
    BECS = "becs"
    BENEFIT = "benefit"
    BIZUM = "bizum"
    BLIK = "blik"
    BOLETO = "boleto"
    BCA_BANK_TRANSFER = "bca_bank_transfer"
    BNI_VA = "bni_va"
    BRI_VA = "bri_va"
    CARD_REDIRECT = "card_redirect"
    CIMB_VA = "cimb_va"
    CLASSIC = "classic"
    CREDIT = "credit"
    CRYPTO_CURRENCY = "crypto_currency"
    CASHAPP = "cashapp"
    DANA = "dana"
    DANAMON_VA = "danamon_va"
    DEBIT = "debit"
    DUIT_NOW = "duit_now"
    EFECTY = "efecty"
    EFT = "eft"
    EPS = "eps"
    FPS = "fps"
    EVOUCHER = "evoucher"
    GIROPAY = "giropay"
    GIVEX = "givex"
    GOOGLE_PAY = "google_pay"
    GO_PAY = "go_pay"
    GCASH = "gcash"
    IDEAL = "ideal"
    INTERAC = "interac"
    INDOMARET = "indomaret"
    KLARNA = "klarna"
    KAKAO_PAY = "kakao_pay"
    LOCAL_BANK_REDIRECT = "local_bank_redirect"
    MANDIRI_VA = "mandiri_va"
    KNET = "knet"
    MB_WAY = "mb_way"
    MOBILE_PAY = "mobile_pay"
    MOMO = "momo"
    MOMO_ATM = "momo_atm"
    MULTIBANCO = "multibanco"
    ONLINE_BANKING_THAILAND = "online_banking_thailand"
    ONLINE_BANKING_CZECH_REPUBLIC = "online_banking_czech_republic"
    ONLINE_BANKING_FINLAND = "online_banking_finland"
    ONLINE_BANKING_FPX = "online_banking_fpx"
    ONLINE_BANKING_POLAND = "online_banking_poland"
    ONLINE_BANKING_SLOVAKIA = "online_banking_slovakia"
    OXXO = "oxxo"
    PAGO_EFECTIVO = "pago_efectivo"
    PERMATA_BANK_TRANSFER = "permata_bank_transfer"
    OPEN_BANKING_UK = "open_banking_uk"
    PAY_BRIGHT = "pay_bright"
    PAYPAL = "paypal"
    PAZE = "paze"
    PIX = "pix"
    PAY_SAFE_CARD = "pay_safe_card"
    PRZELEWY24 = "przelewy24"
    PROMPT_PAY = "prompt_pay"
    PSE = "pse"
    RED_COMPRA = "red_compra"
    RED_PAGOS = "red_pagos"
    SAMSUNG_PAY = "samsung_pay"
    SEPA = "sepa"
    SEPA_BANK_TRANSFER = "sepa_bank_transfer"
    SOFORT = "sofort"
    SWISH = "swish"
    TOUCH_N_GO = "touch_n_go"
    TRUSTLY = "trustly"
    TWINT = "twint"
    UPI_COLLECT = "upi_collect"
    UPI_INTENT = "upi_intent"
    VIPPS = "vipps"
    VIET_QR = "viet_qr"
    VENMO = "venmo"
    WALLEY = "walley"
    WE_CHAT_PAY = "we_chat_pay"
    SEVEN_ELEVEN = "seven_eleven"
    LAWSON = "lawson"
    MINI_STOP = "mini_stop"
    FAMILY_MART = "family_mart"
    SEICOMART = "seicomart"
    PAY_EASY = "pay_easy"
    LOCAL_BANK_TRANSFER = "local_bank_transfer"
    MIFINITY = "mifinity"
    OPEN_BANKING_PIS = "open_banking_pis"
    DIRECT_CARRIER_BILLING = "direct_carrier_billing"
    INSTANT_BANK_TRANSFER = "instant_bank_transfer"
    BILLIE = "billie"
    ZIP = "zip"
    REVOLUT_PAY = "revolut_pay"
    NAVER_PAY = "naver_pay"
    PAYCO = "payco"


class WebhookEventType(OpenEnum):
    PAYMENT_SUCCEEDED = "payment.succeeded"
    PAYMENT_FAILED = "payment.failed"
    PAYMENT_PROCESSING = "payment.processing"
    PAYMENT_CANCELLED = "payment.cancelled"
    REFUND_SUCCEEDED = "refund.succeeded"
    REFUND_FAILED = "refund.failed"
    DISPUTE_OPENED = "dispute.opened"
    DISPUTE_EXPIRED = "dispute.expired"
    DISPUTE_ACCEPTED = "dispute.accepted"
    DISPUTE_CANCELLED = "dispute.cancelled"
    DISPUTE_CHALLENGED = "dispute.challenged"
    DISPUTE_WON = "dispute.won"
    DISPUTE_LOST = "dispute.lost"
    SUBSCRIPTION_ACTIVE = "subscription.active"
    SUBSCRIPTION_RENEWED = "subscription.renewed"
    SUBSCRIPTION_ON_HOLD = "subscription.on_hold"
    SUBSCRIPTION_CANCELLED = "subscription.cancelled"
    SUBSCRIPTION_FAILED = "subscription.failed"
    SUBSCRIPTION_EXPIRED = "subscription.expired"
    SUBSCRIPTION_PLAN_CHANGED = "subscription.plan_changed"
    SUBSCRIPTION_UPDATED = "subscription.updated"
    LICENSE_KEY_CREATED = "license_key.created"
    PAYOUT_NOT_INITIATED = "payout.not_initiated"
    PAYOUT_ON_HOLD = "payout.on_hold"
    PAYOUT_IN_PROGRESS = "payout.in_progress"
    PAYOUT_FAILED = "payout.failed"
    PAYOUT_SUCCESS = "payout.success"
    CREDIT_ADDED = "credit.added"
    CREDIT_DEDUCTED = "credit.deducted"
    CREDIT_EXPIRED = "credit.expired"
    CREDIT_ROLLED_OVER = "credit.rolled_over"
    CREDIT_ROLLOVER_FORFEITED = "credit.rollover_forfeited"
    CREDIT_OVERAGE_CHARGED = "credit.overage_charged"
    CREDIT_MANUAL_ADJUSTMENT = "credit.manual_adjustment"
    CREDIT_BALANCE_LOW = "credit.balance_low"


class BalanceEventType(OpenEnum):
    PAYMENT = "payment"
    REFUND = "refund"
    REFUND_REVERSAL = "refund_reversal"
    DISPUTE = "dispute"
    DISPUTE_REVERSAL = "dispute_reversal"
    TAX = "tax"
    TAX_REVERSAL = "tax_reversal"
    PAYMENT_FEES = "payment_fees"
    REFUND_FEES = "refund_fees"
    REFUND_FEES_REVERSAL = "refund_fees_reversal"
    DISPUTE_FEES = "dispute_fees"
    PAYOUT = "payout"
    PAYOUT_FEES = "payout_fees"
    PAYOUT_REVERSAL = "payout_reversal"
    PAYOUT_FEES_REVERSAL = "payout_fees_reversal"
    DODO_CREDITS = "dodo_credits"
    ADJUSTMENT = "adjustment"
    CURRENCY_CONVERSION = "currency_conversion"


class MeterAggregationType(OpenEnum):
    COUNT = "count"
    SUM = "sum"
    MAX = "max"
    LAST = "last"


class FilterOperator(OpenEnum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUALS = "greater_than_or_equals"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUALS = "less_than_or_equals"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does_not_contain"


class FilterConjunction(OpenEnum):
    AND = "and"
    OR = "or"


__all__ = [
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
]
