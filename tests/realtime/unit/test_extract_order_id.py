"""
Unit tests for utils.realtime_events.extract_order_id.

Tests cover:
- Top-level and nested (`data`) key lookup
- Fixed key priority
- Payload shapes: dict, RealtimeEventDTO, plain objects, garbage
"""

from types import SimpleNamespace

import pytest

from order_ui.models.realtime_event import RealtimeEventDTO
from order_ui.utils.realtime_events import extract_order_id


class TestKeyLookup:

    def test_nested_order_id(self):
        assert extract_order_id({"data": {"order_id": 42}}) == "42"

    def test_empty_payload(self):
        assert extract_order_id({}) == ""

    @pytest.mark.parametrize("key", ["order_id", "job_id", "delivery_order_id", "id", "orderId", "jobId"])
    def test_each_top_level_key(self, key):
        assert extract_order_id({key: 7}) == "7"

    @pytest.mark.parametrize("key", ["order_id", "job_id", "delivery_order_id", "id", "orderId", "jobId"])
    def test_each_nested_key(self, key):
        assert extract_order_id({"data": {key: "abc"}}) == "abc"

    def test_value_is_trimmed(self):
        assert extract_order_id({"order_id": "  99 "}) == "99"


class TestPriority:

    def test_order_id_beats_generic_id(self):
        assert extract_order_id({"id": 1, "order_id": 2}) == "2"

    def test_job_id_beats_camel_case(self):
        assert extract_order_id({"orderId": 3, "job_id": 4}) == "4"

    def test_top_level_beats_nested(self):
        """Test any top-level key wins over a higher-priority nested key."""
        assert extract_order_id({"jobId": 5, "data": {"order_id": 6}}) == "5"

    def test_none_values_are_skipped(self):
        assert extract_order_id({"order_id": None, "job_id": 8}) == "8"

    def test_empty_string_is_defined(self):
        """Test an empty string counts as defined and stops the search."""
        assert extract_order_id({"order_id": "", "job_id": 9}) == ""


class TestPayloadShapes:

    def test_realtime_event_dto_extra_field(self):
        event = RealtimeEventDTO(type="ORDER_UPDATED", order_id=11)
        assert extract_order_id(event) == "11"

    def test_realtime_event_dto_nested(self):
        event = RealtimeEventDTO(type="ORDER_UPDATED", data={"delivery_order_id": 12})
        assert extract_order_id(event) == "12"

    def test_plain_object(self):
        event = SimpleNamespace(type="PICKED_UP", data=SimpleNamespace(jobId=13))
        assert extract_order_id(event) == "13"

    def test_integral_float_id(self):
        assert extract_order_id({"order_id": 14.0}) == "14"

    @pytest.mark.parametrize("event", [None, "ORDER_UPDATED", 42, [1, 2], {"data": "not-a-dict"}, {"data": None}])
    def test_garbage_returns_empty(self, event):
        assert extract_order_id(event) == ""
