"""
Tests for usage meters and usage events.
"""
from datetime import datetime, timezone

from dodopayments.models import DirectFilterCondition, Meter, MeterAggregationType, MeterFilter

BASE_URL = "https://test.dodopayments.com"


class TestMeters:
    """Tests for the meters resource."""

    def test_create_with_nested_filter(self, client, httpx_mock, mock_responses):
        """Should encode a filter that contains another filter."""
        meter_filter = {
            "conjunction": "and",
            "clauses": [
                {"key": "region", "operator": "equals", "value": "eu"},
                {
                    "conjunction": "or",
                    "clauses": [
                        {"key": "tier", "operator": "equals", "value": "pro"},
                        {"key": "tier", "operator": "equals", "value": "team"},
                    ],
                },
            ],
        }
        httpx_mock.add_response(
            url=f"{BASE_URL}/meters", method="POST", json={**mock_responses["meter"], "filter": meter_filter}
        )

        meter = client.meters.create(
            aggregation={"type": "sum", "key": "tokens"},
            event_name="api.request",
            measurement_unit="tokens",
            name="Tokens",
            filter=meter_filter,
        )

        assert isinstance(meter, Meter)
        assert isinstance(meter.filter.clauses[0], DirectFilterCondition)
        assert isinstance(meter.filter.clauses[1], MeterFilter)
        assert httpx_mock.last_request().json["filter"] == meter_filter

    def test_retrieve(self, client, httpx_mock, mock_responses):
        """Should decode the aggregation."""
        httpx_mock.add_response(url=f"{BASE_URL}/meters/mtr_123", json=mock_responses["meter"])

        meter = client.meters.retrieve("mtr_123")

        assert meter.aggregation.type is MeterAggregationType.SUM
        assert meter.filter is None

    def test_archive_and_unarchive(self, client, httpx_mock):
        """Should delete to archive and post to unarchive."""
        httpx_mock.add_response(url=f"{BASE_URL}/meters/mtr_123", method="DELETE", status_code=204)
        httpx_mock.add_response(url=f"{BASE_URL}/meters/mtr_123/unarchive", method="POST")

        assert client.meters.archive("mtr_123") is None
        assert client.meters.unarchive("mtr_123") is None
        assert [request.method for request in httpx_mock.requests] == ["DELETE", "POST"]


class TestUsageEvents:
    """Tests for the usage events resource."""

    def test_ingest(self, client, httpx_mock):
        """Should send the batch of events."""
        httpx_mock.add_response(url=f"{BASE_URL}/events/ingest", method="POST", json={"ingested_count": 2})

        response = client.usage_events.ingest(
            events=[
                {
                    "customer_id": "cus_123",
                    "event_id": "evt_1",
                    "event_name": "api.request",
                    "metadata": {"region": "eu", "cached": True},
                },
                {
                    "customer_id": "cus_123",
                    "event_id": "evt_2",
                    "event_name": "api.request",
                    "timestamp": datetime(2025, 1, 20, tzinfo=timezone.utc),
                },
            ]
        )

        assert response.ingested_count == 2
        assert httpx_mock.last_request().json == {
            "events": [
                {
                    "customer_id": "cus_123",
                    "event_id": "evt_1",
                    "event_name": "api.request",
                    "metadata": {"region": "eu", "cached": True},
                },
                {
                    "customer_id": "cus_123",
                    "event_id": "evt_2",
                    "event_name": "api.request",
                    "timestamp": "2025-01-20T00:00:00Z",
                },
            ]
        }

    def test_retrieve(self, client, httpx_mock):
        """Should fetch one event."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/events/evt_1",
            json={
                "business_id": "bus_123",
                "customer_id": "cus_123",
                "event_id": "evt_1",
                "event_name": "api.request",
                "timestamp": "2025-01-20T00:00:00Z",
            },
        )

        event = client.usage_events.retrieve("evt_1")

        assert event.event_name == "api.request"
        assert event.metadata is None

    def test_list_by_meter(self, client, httpx_mock):
        """Should filter events by meter."""
        httpx_mock.add_response(url=f"{BASE_URL}/events?meter_id=mtr_123", json={"items": []})

        page = client.usage_events.list(meter_id="mtr_123")

        assert page.is_empty
        assert list(page) == []
