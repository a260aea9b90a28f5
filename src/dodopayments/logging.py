"""
Logging utilities for the Dodo Payments SDK with sensitive data masking.

The SDK logs through the standard ``logging`` module under the
``dodopayments`` logger name and never configures handlers on its own unless
asked to, either by calling ``setup_logging`` or by setting the
``DODO_PAYMENTS_LOG`` environment variable to ``debug`` or ``info``.

Usage:
    from dodopayments.logging import get_logger, log_request, log_response

    logger = get_logger(__name__)

    log_request(logger, "POST", "/payments", headers, body)
    log_response(logger, 200, response_body, duration_ms)
"""
from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

LOGGER_NAME = "dodopayments"
MASK_PATTERN = "***MASKED***"
MAX_LOG_MESSAGE_LENGTH = 10_000
MAX_BODY_LOG_LENGTH = 2_000

SENSITIVE_FIELDS = frozenset(
    {
        "api_key",
        "bearer_token",
        "secret",
        "client_secret",
        "license_key",
        "password",
        "authorization",
        "webhook_key",
    }
)

_SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "set-cookie",
        "webhook-signature",
    }
)

_INLINE_PATTERNS = [
    # Bearer tokens
    (re.compile(r"(Bearer\s+)[a-zA-Z0-9._-]+", re.IGNORECASE), r"\1***"),
    # Basic auth
    (re.compile(r"(Basic\s+)[a-zA-Z0-9+/=]+", re.IGNORECASE), r"\1***"),
    # Webhook secrets
    (re.compile(r"\b(whsec_)[a-zA-Z0-9+/=]+"), r"\1***"),
    # URLs with credentials
    (re.compile(r"(https?://)[^:/\s]+:[^@/\s]+@", re.IGNORECASE), r"\1***:***@"),
]


# =============================================================================
# Sensitive Data Masking
# =============================================================================

def mask_value(value: str, show_chars: int = 4) -> str:
    """Mask a sensitive value, optionally showing first/last characters.

    Args:
        value: The value to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked string
    """
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN

    return f"{value[:show_chars]}...{value[-show_chars:]}"


def is_sensitive_key(key: str) -> bool:
    """Check if a key name indicates sensitive data."""
    key_lower = key.lower().replace("-", "_")
    return key_lower in SENSITIVE_FIELDS or any(
        sensitive in key_lower for sensitive in ("secret", "password", "token", "credential")
    )


def mask_sensitive_data(
    data: Any,
    additional_fields: Optional[Sequence[str]] = None,
    _depth: int = 0,
    _max_depth: int = 10,
) -> Any:
    """Recursively mask sensitive data in a data structure.

    Args:
        data: The data structure to mask (dict, list, or scalar)
        additional_fields: Additional field names to mask
        _depth: Current recursion depth (internal)
        _max_depth: Maximum recursion depth

    Returns:
        Copy of data with sensitive values masked
    """
    if _depth > _max_depth:
        return data

    if isinstance(data, dict):
        result = {}
        for key, value in data.items():
            if is_sensitive_key(str(key)) or (additional_fields and key in additional_fields):
                result[key] = MASK_PATTERN
            else:
                result[key] = mask_sensitive_data(value, additional_fields, _depth + 1, _max_depth)
        return result

    if isinstance(data, (list, tuple)):
        return type(data)(
            mask_sensitive_data(item, additional_fields, _depth + 1, _max_depth) for item in data
        )

    if isinstance(data, str):
        return _mask_inline_patterns(data)

    return data


def _mask_inline_patterns(text: str) -> str:
    """Mask bearer tokens, webhook secrets and URL credentials inside free text."""
    if len(text) > MAX_LOG_MESSAGE_LENGTH:
        text = text[:MAX_LOG_MESSAGE_LENGTH] + "...[truncated]"

    for pattern, replacement in _INLINE_PATTERNS:
        text = pattern.sub(replacement, text)

    return text


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask sensitive HTTP headers.

    Args:
        headers: HTTP headers dictionary

    Returns:
        Headers with sensitive values masked
    """
    return {
        key: _mask_header_value(value) if key.lower() in _SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _mask_header_value(value: str) -> str:
    # Keep the auth scheme ("Bearer", "Basic") readable.
    scheme, sep, credentials = value.partition(" ")
    if sep and credentials:
        return f"{scheme} {mask_value(credentials)}"
    return mask_value(value)


def _truncated_json(body: Any) -> str:
    body_str = json.dumps(mask_sensitive_data(body), default=str)
    if len(body_str) > MAX_BODY_LOG_LENGTH:
        body_str = body_str[:MAX_BODY_LOG_LENGTH] + "..."
    return body_str


# =============================================================================
# Loggers
# =============================================================================

def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger below the SDK's ``dodopayments`` namespace."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_request(
    logger: logging.Logger,
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None,
) -> None:
    """Log an outgoing HTTP request at DEBUG level.

    Args:
        logger: Logger to use
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Optional request headers (sensitive values masked)
        body: Optional request body (sensitive values masked)
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    log_data: Dict[str, Any] = {
        "direction": "request",
        "method": method,
        "url": _mask_inline_patterns(url),
    }
    if headers:
        log_data["headers"] = mask_headers(headers)
    if body is not None:
        log_data["body"] = _truncated_json(body)

    logger.debug("HTTP %s %s", method, log_data["url"], extra={"data": log_data})


def log_response(
    logger: logging.Logger,
    status_code: int,
    body: Optional[Any] = None,
    duration_ms: Optional[float] = None,
    request_id: Optional[str] = None,
) -> None:
    """Log an HTTP response; error statuses are logged at WARNING level.

    Args:
        logger: Logger to use
        status_code: HTTP status code
        body: Optional response body (sensitive values masked)
        duration_ms: Request duration in milliseconds
        request_id: Request id reported by the server
    """
    level = logging.DEBUG if status_code < 400 else logging.WARNING
    if not logger.isEnabledFor(level):
        return

    log_data: Dict[str, Any] = {
        "direction": "response",
        "status_code": status_code,
    }
    if request_id:
        log_data["request_id"] = request_id
    if duration_ms is not None:
        log_data["duration_ms"] = duration_ms
    if body is not None:
        log_data["body"] = _truncated_json(body)

    message = f"HTTP {status_code}"
    if duration_ms is not None:
        message += f" ({duration_ms:.0f}ms)"

    logger.log(level, message, extra={"data": log_data})


# =============================================================================
# Configuration
# =============================================================================

class JsonFormatter(logging.Formatter):
    """JSON log formatter, including the masked ``data`` attached to HTTP records."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        data = getattr(record, "data", None)
        if data:
            log_data["data"] = data

        return json.dumps(log_data, default=str)


_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(level: Optional[str] = None, json_format: bool = False) -> Optional[logging.Logger]:
    """Attach a stream handler to the SDK logger.

    Args:
        level: ``debug``, ``info``, ``warning`` or ``error``; anything else
            leaves logging unconfigured
        json_format: Emit one JSON object per record

    Returns:
        The configured ``dodopayments`` logger, or None when nothing was done
    """
    if not level or level.lower() not in _LEVELS:
        return None

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_LEVELS[level.lower()])

    if not any(getattr(h, "_dodopayments", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler._dodopayments = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    for handler in logger.handlers:
        if getattr(handler, "_dodopayments", False):
            handler.setFormatter(
                JsonFormatter()
                if json_format
                else logging.Formatter("[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s")
            )
    return logger


__all__ = [
    "mask_sensitive_data",
    "mask_value",
    "mask_headers",
    "is_sensitive_key",
    "get_logger",
    "log_request",
    "log_response",
    "setup_logging",
    "JsonFormatter",
]
