"""
Dodo Payments Python SDK

Typed sync and async clients for the Dodo Payments REST API.
"""

from ._types import NOT_GIVEN, NotGiven, NotGivenOr, RequestOptions
from ._version import __version__
from .client import AsyncDodoPayments, DodoPayments
from .config import ENVIRONMENTS, ClientSettings
from .models.errors import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DodoPaymentsError,
    ErrorCode,
    InternalServerError,
    InvalidField,
    MissingRequiredField,
    ModelError,
    NoVariantMatched,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ResponseValidationError,
    ShapeMismatch,
    TransportError,
    UnprocessableEntityError,
)
from .pagination import (
    AsyncCursorPagePagination,
    AsyncDefaultPageNumberPagination,
    SyncCursorPagePagination,
    SyncDefaultPageNumberPagination,
)

__all__ = [
    # Clients
    "DodoPayments",
    "AsyncDodoPayments",
    "ClientSettings",
    "ENVIRONMENTS",
    "__version__",
    # Request helpers
    "NOT_GIVEN",
    "NotGiven",
    "NotGivenOr",
    "RequestOptions",
    # Pagination
    "SyncDefaultPageNumberPagination",
    "AsyncDefaultPageNumberPagination",
    "SyncCursorPagePagination",
    "AsyncCursorPagePagination",
    # Errors
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
]
