"""Error models for the Dodo Payments SDK.

Three families of errors reach callers:

- model errors (``MissingRequiredField``, ``ShapeMismatch``, ``InvalidField``,
  ``NoVariantMatched``): a request model could not be built or a payload does
  not fit its declared shape
- ``APIStatusError`` and friends: the server answered with a non-2xx status
- ``ResponseValidationError``: the server answered 2xx but the body could not
  be decoded into the declared response model
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ErrorCode(str, Enum):
    """Stable error codes carried by every SDK error."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    SHAPE_MISMATCH = "SHAPE_MISMATCH"
    INVALID_FIELD = "INVALID_FIELD"
    NO_VARIANT_MATCHED = "NO_VARIANT_MATCHED"
    RESPONSE_VALIDATION_ERROR = "RESPONSE_VALIDATION_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    API_ERROR = "API_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class DodoPaymentsError(Exception):
    """Base exception for the Dodo Payments SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCode.UNKNOWN_ERROR.value
        self.details = details or {}
        self.request_id = request_id

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
            }
        }


# ==================== Model errors ====================


def join_path(prefix: str, path: str) -> str:
    """Join two field paths, keeping list indices attached (``items[0].name``)."""
    if not prefix:
        return path
    if not path:
        return prefix
    if path.startswith("["):
        return f"{prefix}{path}"
    return f"{prefix}.{path}"


class ModelError(DodoPaymentsError):
    """Base for errors raised while building, mutating or decoding a model.

    Attributes:
        model: Name of the model type being processed
        path: Field path inside that model (``product_cart[0].product_id``)
        reason: Human readable cause
    """

    default_code = ErrorCode.UNKNOWN_ERROR

    def __init__(self, model: str, path: str = "", reason: str = ""):
        self.model = model
        self.path = path
        self.reason = reason
        super().__init__(
            self._format(),
            code=self.default_code.value,
            details={"model": model, "path": path, "reason": reason},
        )

    def _format(self) -> str:
        location = f"{self.model}.{self.path}" if self.path else self.model
        return f"{location}: {self.reason}" if self.reason else location

    def prefixed(self, prefix: str) -> "ModelError":
        """Return the same error with its path nested under ``prefix``."""
        return type(self)(self.model, join_path(prefix, self.path), self.reason)


class MissingRequiredField(ModelError):
    """A required field is absent from a payload or was never set before sending."""

    default_code = ErrorCode.MISSING_REQUIRED_FIELD

    def __init__(self, model: str, path: str = "", reason: str = "required field is missing"):
        super().__init__(model, path, reason)

    @property
    def field(self) -> str:
        return self.path


class ShapeMismatch(ModelError):
    """A value is present but cannot be coerced to the field's declared type."""

    default_code = ErrorCode.SHAPE_MISMATCH


class InvalidField(ModelError):
    """``set``/``with_`` was called with an unknown field or an ill-shaped value."""

    default_code = ErrorCode.INVALID_FIELD


class NoVariantMatched(ModelError):
    """None of a union's candidate shapes accepted the value.

    Attributes:
        candidates: Mapping of candidate type name to the reason it was rejected,
            in the order the candidates were tried
    """

    default_code = ErrorCode.NO_VARIANT_MATCHED

    def __init__(self, candidates: Mapping[str, str], path: str = ""):
        self.candidates = dict(candidates)
        tried = "; ".join(f"{name} ({why})" for name, why in self.candidates.items())
        super().__init__(" | ".join(self.candidates), path, f"no variant matched, tried: {tried}")
        self.details["candidates"] = self.candidates

    def prefixed(self, prefix: str) -> "NoVariantMatched":
        return NoVariantMatched(self.candidates, join_path(prefix, self.path))


class ResponseValidationError(DodoPaymentsError):
    """A successful response body did not match the declared response model.

    Attributes:
        error: The model error raised while decoding the body
        status_code: HTTP status of the response
    """

    def __init__(self, error: ModelError, status_code: int, request_id: Optional[str] = None):
        super().__init__(
            f"Could not parse response: {error.message}",
            code=ErrorCode.RESPONSE_VALIDATION_ERROR.value,
            details=error.details,
            request_id=request_id,
        )
        self.error = error
        self.status_code = status_code


# ==================== Transport errors ====================


class TransportError(DodoPaymentsError):
    """Base for failures surfaced by the HTTP client."""


class APIConnectionError(TransportError):
    """The request never produced a response (DNS, refused connection, TLS...)."""

    def __init__(self, message: str = "Connection error.", code: Optional[str] = None):
        super().__init__(message, code=code or ErrorCode.CONNECTION_ERROR.value)


class APITimeoutError(APIConnectionError):
    """The request timed out."""

    def __init__(self, message: str = "Request timed out."):
        super().__init__(message, code=ErrorCode.TIMEOUT_ERROR.value)


class APIStatusError(TransportError):
    """Error from an API response with a non-2xx status."""

    default_code = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
        body: Any = None,
    ):
        super().__init__(message, code or self.default_code.value, details, request_id)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "APIStatusError":
        """Create the matching APIStatusError subclass from an HTTP response."""
        headers = headers or {}
        request_id = headers.get("x-request-id")
        message = f"Error code: {status_code}"
        code: Optional[str] = None
        details: Dict[str, Any] = {}

        error_data: Any = body
        if isinstance(body, Mapping):
            error_data = body.get("error", body)
        if isinstance(error_data, str):
            message = error_data
        elif isinstance(error_data, Mapping):
            message = error_data.get("message") or error_data.get("detail") or message
            code = error_data.get("code")
            if isinstance(error_data.get("details"), Mapping):
                details = dict(error_data["details"])
            request_id = error_data.get("request_id") or request_id

        error_cls = _STATUS_ERRORS.get(status_code)
        if error_cls is None:
            error_cls = InternalServerError if status_code >= 500 else APIStatusError

        if error_cls is RateLimitError:
            return RateLimitError(
                str(message),
                retry_after=_parse_retry_after(headers.get("retry-after")),
                code=code,
                details=details,
                request_id=request_id,
                body=body,
            )
        return error_cls(
            str(message),
            status_code=status_code,
            code=code,
            details=details,
            request_id=request_id,
            body=body,
        )


class BadRequestError(APIStatusError):
    default_code = ErrorCode.BAD_REQUEST


class AuthenticationError(APIStatusError):
    """Authentication error."""

    default_code = ErrorCode.AUTHENTICATION_ERROR

    def __init__(self, message: str = "Invalid or missing API key", status_code: int = 401, **kwargs: Any):
        super().__init__(message, status_code, **kwargs)


class PermissionDeniedError(APIStatusError):
    default_code = ErrorCode.PERMISSION_DENIED


class NotFoundError(APIStatusError):
    """Resource not found error."""

    default_code = ErrorCode.NOT_FOUND


class ConflictError(APIStatusError):
    default_code = ErrorCode.CONFLICT


class UnprocessableEntityError(APIStatusError):
    default_code = ErrorCode.UNPROCESSABLE_ENTITY


class RateLimitError(APIStatusError):
    """Rate limit exceeded error."""

    default_code = ErrorCode.RATE_LIMIT_EXCEEDED

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        status_code: int = 429,
        **kwargs: Any,
    ):
        super().__init__(message, status_code, **kwargs)
        self.retry_after = retry_after


class InternalServerError(APIStatusError):
    default_code = ErrorCode.INTERNAL_SERVER_ERROR


_STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(float(value))
    except ValueError:
        return None


__all__ = [
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
]
