"""
Pagination utilities for the Dodo Payments SDK.

List endpoints return one of two page shapes:

- page-number pages (``{"items": [...]}``), requested with ``page_number`` and
  ``page_size`` query parameters; page numbers start at 0
- cursor pages (``{"data": [...], "iterator": "...", "done": false}``), where
  the next page is requested with ``iterator=<token>``

Each page knows the request that produced it, so asking for the next page only
depends on the page's own metadata and the original query.

Example:
    ```python
    page = client.payments.list(status="succeeded", page_size=50)

    for payment in page.items:  # this page only
        print(payment.payment_id)

    for payment in page:  # every item, fetching further pages as needed
        print(payment.payment_id)

    for page in page.iter_pages():
        print(len(page), "payments")
    ```
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    ClassVar,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Type,
    TypeVar,
)

from .models.base import DodoModel
from .models.errors import ModelError, ShapeMismatch

# Type variable for paginated items
T = TypeVar("T", bound=DodoModel)


@dataclass(frozen=True)
class PageRequest:
    """The request that produced a page.

    Attributes:
        method: HTTP method
        path: Endpoint path with identifiers already interpolated
        query: Query parameters as sent (wire names)
        options: Per-call request options, passed through untouched
    """

    method: str
    path: str
    query: Dict[str, Any] = field(default_factory=dict)
    options: Any = None

    def with_query(self, **changes: Any) -> "PageRequest":
        return replace(self, query={**self.query, **changes})


class BasePage(Generic[T]):
    """A single page of results.

    Attributes:
        items: Typed items on this page, in server order
        request: The request that produced this page
        raw_response: The decoded response body
    """

    items_key: ClassVar[str] = "items"

    def __init__(
        self,
        items: List[T],
        request: PageRequest,
        raw_response: Dict[str, Any],
        fetch: Callable[[PageRequest], Any],
    ) -> None:
        self.items = items
        self.request = request
        self.raw_response = raw_response
        self._fetch = fetch

    @classmethod
    def parse(
        cls,
        raw: Any,
        item_model: Type[T],
        request: PageRequest,
        fetch: Callable[[PageRequest], Any],
    ):
        """Build a page from a response body.

        Raises:
            ShapeMismatch: The body is not an object or its item list is malformed
            MissingRequiredField: An item lacks a required field
        """
        if not isinstance(raw, dict):
            raise ShapeMismatch(cls.__name__, "", f"expected an object, got {type(raw).__name__}")
        raw_items = raw.get(cls.items_key) or []
        if not isinstance(raw_items, list):
            raise ShapeMismatch(cls.__name__, cls.items_key, "expected a list")
        items: List[T] = []
        for index, raw_item in enumerate(raw_items):
            try:
                items.append(item_model.from_wire(raw_item))
            except ModelError as exc:
                raise exc.prefixed(f"{cls.items_key}[{index}]") from exc
        return cls(items=items, request=request, raw_response=raw, fetch=fetch)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={len(self.items)}, query={self.request.query!r})"

    @property
    def is_empty(self) -> bool:
        """Check if the page is empty."""
        return len(self.items) == 0

    def has_next_page(self) -> bool:
        raise NotImplementedError

    def next_page_params(self) -> Optional[Dict[str, Any]]:
        """Query parameters that select the next page, or None on the last page."""
        raise NotImplementedError

    def next_page_request(self) -> Optional[PageRequest]:
        params = self.next_page_params()
        if params is None:
            return None
        return self.request.with_query(**params)


class _PageNumberPage(BasePage[T]):
    items_key: ClassVar[str] = "items"
    DEFAULT_PAGE_SIZE: ClassVar[int] = 10

    @property
    def page_number(self) -> int:
        return int(self.request.query.get("page_number") or 0)

    @property
    def page_size(self) -> int:
        return int(self.request.query.get("page_size") or self.DEFAULT_PAGE_SIZE)

    def has_next_page(self) -> bool:
        # The server has no "has more" flag; a short page is the last one.
        return len(self.items) > 0 and len(self.items) >= self.page_size

    def next_page_params(self) -> Optional[Dict[str, Any]]:
        if not self.has_next_page():
            return None
        return {"page_number": self.page_number + 1}


class _CursorPage(BasePage[T]):
    items_key: ClassVar[str] = "data"

    @property
    def iterator(self) -> Optional[str]:
        return self.raw_response.get("iterator")

    @property
    def done(self) -> bool:
        return bool(self.raw_response.get("done"))

    def has_next_page(self) -> bool:
        return bool(self.iterator) and not self.done

    def next_page_params(self) -> Optional[Dict[str, Any]]:
        if not self.has_next_page():
            return None
        return {"iterator": self.iterator}


class SyncPage(BasePage[T]):
    """Page whose follow-up pages are fetched with the sync client."""

    def get_next_page(self) -> "SyncPage[T]":
        """Fetch the next page.

        Raises:
            RuntimeError: This is the last page
        """
        request = self.next_page_request()
        if request is None:
            raise RuntimeError("No more pages; check has_next_page() first")
        return self._fetch(request)

    def iter_pages(self) -> Iterator["SyncPage[T]"]:
        """Iterator over this page and every following page."""
        page: SyncPage[T] = self
        while True:
            yield page
            if not page.has_next_page():
                return
            page = page.get_next_page()

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        """Iterator over all items across all pages."""
        for page in self.iter_pages():
            yield from page.items


class AsyncPage(BasePage[T]):
    """Page whose follow-up pages are fetched with the async client."""

    async def get_next_page(self) -> "AsyncPage[T]":
        """Fetch the next page.

        Raises:
            RuntimeError: This is the last page
        """
        request = self.next_page_request()
        if request is None:
            raise RuntimeError("No more pages; check has_next_page() first")
        fetched: Awaitable[AsyncPage[T]] = self._fetch(request)
        return await fetched

    async def iter_pages(self) -> AsyncIterator["AsyncPage[T]"]:
        """Async iterator over this page and every following page."""
        page: AsyncPage[T] = self
        while True:
            yield page
            if not page.has_next_page():
                return
            page = await page.get_next_page()

    async def __aiter__(self) -> AsyncIterator[T]:
        """Async iterator over all items across all pages."""
        async for page in self.iter_pages():
            for item in page.items:
                yield item


class SyncDefaultPageNumberPagination(_PageNumberPage[T], SyncPage[T]):
    pass


class AsyncDefaultPageNumberPagination(_PageNumberPage[T], AsyncPage[T]):
    pass


class SyncCursorPagePagination(_CursorPage[T], SyncPage[T]):
    pass


class AsyncCursorPagePagination(_CursorPage[T], AsyncPage[T]):
    pass


__all__ = [
    "PageRequest",
    "BasePage",
    "SyncPage",
    "AsyncPage",
    "SyncDefaultPageNumberPagination",
    "AsyncDefaultPageNumberPagination",
    "SyncCursorPagePagination",
    "AsyncCursorPagePagination",
]
