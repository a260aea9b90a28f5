"""
Tests for dodopayments.pagination.

Tests cover:
- Page-number pages and their stop condition
- Cursor pages
- Sync and async iteration across pages
"""
from __future__ import annotations

import pytest

from dodopayments.models import Meter, WebhookDetails
from dodopayments.models.errors import MissingRequiredField, ShapeMismatch
from dodopayments.pagination import (
    AsyncDefaultPageNumberPagination,
    PageRequest,
    SyncCursorPagePagination,
    SyncDefaultPageNumberPagination,
)


def meter(index: int, template: dict) -> dict:
    return {**template, "id": f"mtr_{index}"}


def no_fetch(request):
    raise AssertionError(f"unexpected fetch of {request}")


class TestPageNumberPage:
    """Tests for page-number pagination."""

    def test_parse_items(self, mock_responses):
        """Should decode every item on the page."""
        request = PageRequest(method="GET", path="meters", query={"page_size": 2})
        page = SyncDefaultPageNumberPagination.parse(
            {"items": [meter(1, mock_responses["meter"]), meter(2, mock_responses["meter"])]},
            Meter,
            request,
            no_fetch,
        )

        assert len(page) == 2
        assert page[1].id == "mtr_2"
        assert page.page_number == 0
        assert page.page_size == 2

    def test_full_page_has_next(self, mock_responses):
        """Should ask for the next page number when the page is full."""
        request = PageRequest(method="GET", path="meters", query={"page_size": 1, "archived": True})
        page = SyncDefaultPageNumberPagination.parse(
            {"items": [meter(1, mock_responses["meter"])]}, Meter, request, no_fetch
        )

        assert page.has_next_page()
        assert page.next_page_request().query == {"page_size": 1, "archived": True, "page_number": 1}

    def test_short_page_is_terminal(self, mock_responses):
        """Should stop when a page holds fewer items than the page size."""
        request = PageRequest(method="GET", path="meters", query={"page_size": 5})
        page = SyncDefaultPageNumberPagination.parse(
            {"items": [meter(1, mock_responses["meter"])]}, Meter, request, no_fetch
        )

        assert not page.has_next_page()
        assert page.next_page_request() is None
        assert list(page) == page.items

    def test_empty_page_is_terminal(self):
        """Should stop on an empty page."""
        page = SyncDefaultPageNumberPagination.parse(
            {"items": []}, Meter, PageRequest(method="GET", path="meters"), no_fetch
        )

        assert page.is_empty
        assert not page.has_next_page()

    def test_get_next_page_on_last_page(self):
        """Should raise when asked for a page after the last one."""
        page = SyncDefaultPageNumberPagination.parse(
            {"items": []}, Meter, PageRequest(method="GET", path="meters"), no_fetch
        )

        with pytest.raises(RuntimeError):
            page.get_next_page()

    def test_iterates_across_pages(self, mock_responses):
        """Should fetch following pages while iterating."""
        pages = {
            0: [meter(1, mock_responses["meter"]), meter(2, mock_responses["meter"])],
            1: [meter(3, mock_responses["meter"])],
        }
        requested = []

        def fetch(request):
            number = request.query["page_number"]
            requested.append(number)
            return SyncDefaultPageNumberPagination.parse({"items": pages[number]}, Meter, request, fetch)

        first = SyncDefaultPageNumberPagination.parse(
            {"items": pages[0]}, Meter, PageRequest(method="GET", path="meters", query={"page_size": 2}), fetch
        )

        assert [m.id for m in first] == ["mtr_1", "mtr_2", "mtr_3"]
        assert requested == [1]

    def test_invalid_item_path(self, mock_responses):
        """Should report the index of an item that fails to decode."""
        broken = dict(mock_responses["meter"])
        del broken["name"]

        with pytest.raises(MissingRequiredField) as exc_info:
            SyncDefaultPageNumberPagination.parse(
                {"items": [mock_responses["meter"], broken]},
                Meter,
                PageRequest(method="GET", path="meters"),
                no_fetch,
            )

        assert exc_info.value.path == "items[1].name"

    def test_items_not_a_list(self):
        """Should reject an items value that is not a list."""
        with pytest.raises(ShapeMismatch):
            SyncDefaultPageNumberPagination.parse(
                {"items": {"id": "mtr_1"}}, Meter, PageRequest(method="GET", path="meters"), no_fetch
            )


class TestCursorPage:
    """Tests for cursor pagination."""

    def test_next_page_uses_iterator(self, mock_responses):
        """Should request the next page with the returned iterator."""
        page = SyncCursorPagePagination.parse(
            {"data": [mock_responses["webhook"]], "iterator": "it_2", "done": False},
            WebhookDetails,
            PageRequest(method="GET", path="webhooks", query={"limit": 1}),
            no_fetch,
        )

        assert page.has_next_page()
        assert page.next_page_request().query == {"limit": 1, "iterator": "it_2"}

    def test_terminates_without_iterator(self, mock_responses):
        """Should stop when no iterator token comes back."""
        page = SyncCursorPagePagination.parse(
            {"data": [mock_responses["webhook"]], "done": False},
            WebhookDetails,
            PageRequest(method="GET", path="webhooks"),
            no_fetch,
        )

        assert not page.has_next_page()
        assert [w.id for w in page] == ["wh_123"]

    def test_terminates_when_done(self, mock_responses):
        """Should stop when the server marks the listing done."""
        page = SyncCursorPagePagination.parse(
            {"data": [mock_responses["webhook"]], "iterator": "it_2", "done": True},
            WebhookDetails,
            PageRequest(method="GET", path="webhooks"),
            no_fetch,
        )

        assert not page.has_next_page()


class TestAsyncPages:
    """Tests for async page iteration."""

    async def test_async_iteration(self, mock_responses):
        """Should iterate items across pages asynchronously."""
        pages = {1: [meter(2, mock_responses["meter"])], 2: []}

        async def fetch(request):
            items = pages[request.query["page_number"]]
            return AsyncDefaultPageNumberPagination.parse({"items": items}, Meter, request, fetch)

        first = AsyncDefaultPageNumberPagination.parse(
            {"items": [meter(1, mock_responses["meter"])]},
            Meter,
            PageRequest(method="GET", path="meters", query={"page_size": 1}),
            fetch,
        )

        ids = [m.id async for m in first]

        assert ids == ["mtr_1", "mtr_2"]
