"""Shared request types: the ``NOT_GIVEN`` sentinel and per-call options."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, TypeVar, Union

_T = TypeVar("_T")


class NotGiven:
    """Marks an argument the caller left out.

    ``None`` cannot play this role because it is sent as JSON ``null``::

        client.subscriptions.update("sub_1", tax_id=None)  # clears tax_id
        client.subscriptions.update("sub_1")               # leaves it alone
    """

    _instance: Optional["NotGiven"] = None

    def __new__(cls) -> "NotGiven":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "NOT_GIVEN"


NOT_GIVEN = NotGiven()

NotGivenOr = Union[_T, NotGiven]


@dataclass(frozen=True)
class RequestOptions:
    """Per-call request options.

    Attributes:
        idempotency_key: Sent as the ``Idempotency-Key`` header
        timeout: Overrides the client timeout (seconds) for this call
        extra_headers: Merged over the default headers
        extra_query: Merged over the method's query parameters
    """

    idempotency_key: Optional[str] = None
    timeout: Optional[float] = None
    extra_headers: Dict[str, str] = field(default_factory=dict)
    extra_query: Dict[str, Any] = field(default_factory=dict)


__all__ = ["NotGiven", "NOT_GIVEN", "NotGivenOr", "RequestOptions"]
