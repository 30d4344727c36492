"""Tests for SimulationStatistics summaries and CSV export."""

import csv

import pytest

from onoff_sim.core.errors import ExportError, NoDataError
from onoff_sim.core.snapshot import TrafficSnapshot
from onoff_sim.core.statistics import SimulationStatistics


@pytest.fixture
def stats() -> SimulationStatistics:
    statistics = SimulationStatistics()
    statistics.record(TrafficSnapshot(0.0, 0, set()))
    statistics.record(TrafficSnapshot(1.25, 2, {0, 2}))
    statistics.record(TrafficSnapshot(2.5, 3, {0, 1, 2}))
    statistics.record(TrafficSnapshot(10.0, 1, {1}))
    return statistics


class TestEmptyStatistics:
    def test_summary_requires_snapshots(self) -> None:
        with pytest.raises(NoDataError):
            SimulationStatistics().summary()

    def test_time_range_requires_snapshots(self) -> None:
        with pytest.raises(NoDataError):
            SimulationStatistics().time_range()

    def test_export_requires_snapshots(self, tmp_path) -> None:
        path = tmp_path / "out.csv"
        with pytest.raises(NoDataError):
            SimulationStatistics().export_csv(str(path))
        assert not path.exists()

    def test_record_rejects_non_snapshots(self) -> None:
        with pytest.raises(TypeError):
            SimulationStatistics().record(None)


class TestSummary:
    def test_counts_and_order(self, stats: SimulationStatistics) -> None:
        assert len(stats) == 4
        assert [s.timestamp for s in stats.snapshots] == [0.0, 1.25, 2.5, 10.0]

    def test_snapshots_tuple_is_a_copy(self, stats: SimulationStatistics) -> None:
        snapshots = stats.snapshots
        stats.add_snapshot(TrafficSnapshot(11.0, 0, set()))
        assert len(snapshots) == 4
        assert len(stats) == 5

    def test_summary_values(self, stats: SimulationStatistics) -> None:
        summary = stats.summary()
        assert summary.min_rate == 0
        assert summary.max_rate == 3
        assert summary.avg_rate == pytest.approx(1.5)
        assert summary.total_snapshots == 4
        assert (summary.start_time, summary.end_time) == (0.0, 10.0)

    def test_summary_follows_new_snapshots(self, stats: SimulationStatistics) -> None:
        stats.record(TrafficSnapshot(12.0, 9, set(range(9))))
        assert stats.summary().max_rate == 9
        assert stats.time_range() == (0.0, 12.0)

    def test_rates_and_timestamps(self, stats: SimulationStatistics) -> None:
        assert stats.rates().tolist() == [0, 2, 3, 1]
        assert stats.timestamps().tolist() == [0.0, 1.25, 2.5, 10.0]

    def test_format_summary(self, stats: SimulationStatistics) -> None:
        text = stats.format_summary()
        assert text.splitlines() == [
            "=== Simulation Statistics ===",
            "Total Snapshots: 4",
            "Time Range: 0.00 - 10.00 seconds",
            "Min Rate: 0 active sources",
            "Max Rate: 3 active sources",
            "Avg Rate: 1.50 active sources",
        ]


class TestCsvExport:
    def test_exact_file_contents(self, stats: SimulationStatistics, tmp_path) -> None:
        path = tmp_path / "out.csv"
        stats.export_csv(str(path))
        assert path.read_bytes().decode("utf-8") == (
            "timestamp,trafficRate,activeSourceCount\n"
            "0.0000,0,0\n"
            "1.2500,2,2\n"
            "2.5000,3,3\n"
            "10.0000,1,1\n"
        )

    def test_round_trip(self, stats: SimulationStatistics, tmp_path) -> None:
        path = tmp_path / "out.csv"
        stats.export_csv(str(path))
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

        parsed = [
            (float(r["timestamp"]), int(r["trafficRate"]), int(r["activeSourceCount"]))
            for r in rows
        ]
        expected = [
            (s.timestamp, s.traffic_rate, s.active_source_count) for s in stats.snapshots
        ]
        assert len(parsed) == len(expected)
        for (t1, r1, c1), (t2, r2, c2) in zip(parsed, expected):
            assert t1 == pytest.approx(t2, abs=1e-4)
            assert (r1, c1) == (r2, c2)

    def test_creates_parent_directories(self, stats: SimulationStatistics, tmp_path) -> None:
        path = tmp_path / "results" / "nested" / "out.csv"
        stats.export_csv(str(path))
        assert path.exists()

    def test_write_failure_wraps_os_error(self, stats: SimulationStatistics, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(ExportError) as excinfo:
            stats.export_csv(str(blocker / "out.csv"))
        assert isinstance(excinfo.value.__cause__, OSError)
        assert isinstance(excinfo.value, OSError)
        assert len(stats) == 4
