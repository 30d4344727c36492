"""Tests for TrafficSnapshot."""

import dataclasses

import pytest

from onoff_sim.core.snapshot import TrafficSnapshot


class TestTrafficSnapshot:
    def test_fields(self) -> None:
        snapshot = TrafficSnapshot(1.5, 2, {0, 1})
        assert snapshot.timestamp == 1.5
        assert snapshot.traffic_rate == 2
        assert snapshot.active_source_ids == {0, 1}
        assert snapshot.active_source_count == 2

    def test_accepts_any_iterable(self) -> None:
        snapshot = TrafficSnapshot(0.0, 3, [0, 5, 10])
        assert snapshot.active_source_ids == frozenset({0, 5, 10})

    def test_empty_active_ids(self) -> None:
        snapshot = TrafficSnapshot(1.0, 0, set())
        assert snapshot.traffic_rate == 0
        assert not snapshot.active_source_ids

    def test_negative_timestamp_rejected(self) -> None:
        with pytest.raises(ValueError, match="Timestamp"):
            TrafficSnapshot(-1.0, 2, set())

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ValueError, match="rate"):
            TrafficSnapshot(1.0, -5, set())

    def test_missing_ids_rejected(self) -> None:
        with pytest.raises(ValueError):
            TrafficSnapshot(1.0, 2, None)

    def test_negative_id_rejected(self) -> None:
        with pytest.raises(ValueError):
            TrafficSnapshot(1.0, 1, {-3})

    def test_input_is_copied(self) -> None:
        ids = {0, 1}
        snapshot = TrafficSnapshot(1.0, 2, ids)
        ids.add(999)
        assert 999 not in snapshot.active_source_ids

    def test_exposed_ids_are_read_only(self) -> None:
        snapshot = TrafficSnapshot(1.0, 2, {0, 1})
        with pytest.raises(AttributeError):
            snapshot.active_source_ids.add(999)

    def test_fields_cannot_be_reassigned(self) -> None:
        snapshot = TrafficSnapshot(1.0, 2, {0, 1})
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.traffic_rate = 5

    def test_equal_data_distinct_objects(self) -> None:
        first = TrafficSnapshot(1.0, 1, {0})
        second = TrafficSnapshot(1.0, 1, {0})
        assert first is not second
        assert first == second
