"""
Tests for the SDK error taxonomy.
"""
import pytest

from dodopayments import (
    APIStatusError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DodoPaymentsError,
    InternalServerError,
    MissingRequiredField,
    NoVariantMatched,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ResponseValidationError,
    ShapeMismatch,
    UnprocessableEntityError,
)
from dodopayments.models.errors import ErrorCode, join_path


class TestStatusErrors:
    """Tests for APIStatusError.from_response."""

    @pytest.mark.parametrize(
        "status_code,error_cls",
        [
            (400, BadRequestError),
            (401, AuthenticationError),
            (403, PermissionDeniedError),
            (404, NotFoundError),
            (409, ConflictError),
            (422, UnprocessableEntityError),
            (429, RateLimitError),
            (500, InternalServerError),
            (503, InternalServerError),
            (418, APIStatusError),
        ],
    )
    def test_status_mapping(self, status_code, error_cls):
        """Should pick the error class matching the status code."""
        error = APIStatusError.from_response(status_code, {"message": "nope"})

        assert type(error) is error_cls
        assert error.status_code == status_code
        assert error.message == "nope"

    def test_nested_error_body(self):
        """Should read message, code and request id from an error object."""
        body = {"error": {"message": "Product not found", "code": "NOT_FOUND", "request_id": "req_1"}}

        error = APIStatusError.from_response(404, body)

        assert error.message == "Product not found"
        assert error.code == "NOT_FOUND"
        assert error.request_id == "req_1"
        assert error.body == body

    def test_plain_text_body(self):
        """Should use a text body as the message."""
        error = APIStatusError.from_response(502, "Bad gateway")

        assert error.message == "Bad gateway"

    def test_request_id_header(self):
        """Should fall back to the x-request-id header."""
        error = APIStatusError.from_response(400, {"message": "bad"}, {"x-request-id": "req_2"})

        assert error.request_id == "req_2"

    def test_retry_after(self):
        """Should parse Retry-After on rate limit errors."""
        error = APIStatusError.from_response(429, {"message": "slow down"}, {"retry-after": "5"})

        assert isinstance(error, RateLimitError)
        assert error.retry_after == 5

    def test_default_message(self):
        """Should fall back to the status code when the body has no message."""
        error = APIStatusError.from_response(500, None)

        assert error.message == "Error code: 500"
        assert error.code == ErrorCode.INTERNAL_SERVER_ERROR.value


class TestModelErrors:
    """Tests for model error formatting."""

    def test_message_includes_location(self):
        """Should prefix the message with model and path."""
        error = ShapeMismatch("Payment", "billing.country", "not a string")

        assert error.message == "Payment.billing.country: not a string"
        assert str(error) == "[SHAPE_MISMATCH] Payment.billing.country: not a string"

    def test_prefixed(self):
        """Should nest a path under a prefix."""
        error = MissingRequiredField("Meter", "name").prefixed("items[3]")

        assert isinstance(error, MissingRequiredField)
        assert error.path == "items[3].name"

    def test_no_variant_matched_details(self):
        """Should expose the rejected candidates."""
        error = NoVariantMatched({"A": "missing x", "B": "missing y"}, "customer")

        assert error.candidates == {"A": "missing x", "B": "missing y"}
        assert error.details["candidates"] == error.candidates
        assert "A (missing x)" in error.message

    def test_response_validation_error_wraps_cause(self):
        """Should keep the underlying model error."""
        cause = MissingRequiredField("Customer", "email")
        error = ResponseValidationError(cause, status_code=200, request_id="req_3")

        assert error.error is cause
        assert error.code == ErrorCode.RESPONSE_VALIDATION_ERROR.value
        assert "Customer.email" in error.message

    def test_common_base(self):
        """Should derive every SDK error from DodoPaymentsError."""
        assert issubclass(ShapeMismatch, DodoPaymentsError)
        assert issubclass(NotFoundError, DodoPaymentsError)
        assert issubclass(ResponseValidationError, DodoPaymentsError)

    def test_to_dict(self):
        """Should render as a dictionary."""
        error = ShapeMismatch("Payment", "total_amount", "expected int")

        assert error.to_dict()["error"]["code"] == "SHAPE_MISMATCH"
        assert error.to_dict()["error"]["details"]["path"] == "total_amount"

    @pytest.mark.parametrize(
        "prefix,path,expected",
        [("", "a", "a"), ("a", "", "a"), ("a", "b", "a.b"), ("items", "[0]", "items[0]")],
    )
    def test_join_path(self, prefix, path, expected):
        """Should join field paths."""
        assert join_path(prefix, path) == expected
