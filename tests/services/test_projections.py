"""
Tests for hotelops/services/projections.py
Covers: flatten_json_list, guest_statistics, humanize_label, service_usage
"""
from datetime import datetime
from types import SimpleNamespace

import pytest

from hotelops.services.projections import (
    flatten_json_list, guest_statistics, humanize_label, service_usage
)


# ── helpers ──────────────────────────────────────────────────────────

def _stay(id, room_type, check_in, total_price, status="checked-out"):
    return SimpleNamespace(
        id=id,
        room=SimpleNamespace(room_type=room_type),
        check_in_date=check_in,
        total_price=total_price,
        status=status,
    )


# ── flatten_json_list ────────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    (None, []),
    ([], []),
    ("", []),
    (["a", "b"], ["a", "b"]),
    ([1, 2.5, True], ["1", "2.5", "true"]),
    ('["x", {"name": "y"}]', ["x", "y"]),
    ("plain text", ["plain text"]),
    ('"quoted"', ["quoted"]),
    ([["nested", ["deep"]], "top"], ["nested", "deep", "top"]),
    ([{"text": "t"}, {"value": 3}, {"other": 1}], ["t", "3", '{"other": 1}']),
    ([None, "kept"], ["kept"]),
    ({"label": "single"}, ["single"]),
])
def test_flatten_json_list(raw, expected):
    assert flatten_json_list(raw) == expected


def test_flatten_prefers_name_over_other_keys():
    assert flatten_json_list([{"value": "v", "name": "n"}]) == ["n"]


# ── guest_statistics ─────────────────────────────────────────────────

class TestGuestStatistics:

    def test_empty(self):
        stats = guest_statistics([])

        assert stats.total_stays == 0
        assert stats.total_spent == 0
        assert stats.average_spend == 0
        assert stats.last_visit is None
        assert stats.most_common_room == ""

    def test_excludes_cancelled(self):
        stats = guest_statistics([
            _stay(1, "Deluxe", datetime(2024, 1, 1), 300.0),
            _stay(2, "Suite", datetime(2024, 2, 1), 900.0, status="cancelled"),
        ])

        assert stats.total_stays == 1
        assert stats.total_spent == 300.0
        assert stats.last_visit == datetime(2024, 1, 1)

    def test_average_and_last_visit(self):
        stats = guest_statistics([
            _stay(1, "Deluxe", datetime(2024, 3, 1), 100.0),
            _stay(2, "Deluxe", datetime(2024, 1, 1), 200.0),
            _stay(3, "Suite", datetime(2024, 2, 1), 300.0),
        ])

        assert stats.total_stays == 3
        assert stats.total_spent == 600.0
        assert stats.average_spend == 200.0
        assert stats.last_visit == datetime(2024, 3, 1)
        assert stats.most_common_room == "Deluxe"

    def test_tie_resolved_by_earliest_stay(self):
        stats = guest_statistics([
            _stay(1, "Suite", datetime(2024, 5, 1), 100.0),
            _stay(2, "Standard", datetime(2024, 1, 1), 100.0),
        ])

        assert stats.most_common_room == "Standard"


# ── labels / usage ───────────────────────────────────────────────────

@pytest.mark.parametrize("value, label", [
    ("room-service", "Room Service"),
    ("general-assistance", "General Assistance"),
    ("housekeeping", "Housekeeping"),
    ("special_requests", "Special Requests"),
])
def test_humanize_label(value, label):
    assert humanize_label(value) == label


def test_service_usage_groups_by_type():
    requests = [SimpleNamespace(service_type=t) for t in
                ("maintenance", "room-service", "room-service", "transportation")]

    usage = service_usage(requests)

    assert [(u.type, u.count) for u in usage] == [
        ("room-service", 2), ("maintenance", 1), ("transportation", 1)
    ]
    assert usage[0].label == "Room Service"
