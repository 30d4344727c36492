"""Simulation statistics for ON/OFF traffic simulation.

This module provides the SimulationStatistics accumulator, which stores
traffic snapshots in chronological order, summarises them and exports them
to CSV.
"""

import csv
import os
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from loguru import logger

from onoff_sim.core.errors import ExportError, NoDataError
from onoff_sim.core.snapshot import TrafficSnapshot

CSV_HEADER = ["timestamp", "trafficRate", "activeSourceCount"]


@dataclass(frozen=True)
class SummaryStatistics:
    """Summary of the recorded traffic rates.

    Attributes:
        min_rate: Smallest number of active sources observed.
        max_rate: Largest number of active sources observed.
        avg_rate: Mean number of active sources over all snapshots.
        total_snapshots: Number of snapshots summarised.
        start_time: Timestamp of the first snapshot.
        end_time: Timestamp of the last snapshot.
    """

    min_rate: int
    max_rate: int
    avg_rate: float
    total_snapshots: int
    start_time: float
    end_time: float


class SimulationStatistics:
    """Accumulates traffic snapshots and derives summary statistics.

    Derived values are computed from the snapshot list on every call.
    """

    def __init__(self) -> None:
        self._snapshots: List[TrafficSnapshot] = []

    def record(self, snapshot: TrafficSnapshot) -> None:
        """Append a snapshot.

        Args:
            snapshot: The snapshot to store.

        Raises:
            TypeError: If snapshot is not a TrafficSnapshot.
        """
        if not isinstance(snapshot, TrafficSnapshot):
            raise TypeError(f"Cannot add {snapshot!r}: expected a TrafficSnapshot")
        self._snapshots.append(snapshot)

    add_snapshot = record

    @property
    def snapshots(self) -> Tuple[TrafficSnapshot, ...]:
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def _require_snapshots(self) -> None:
        if not self._snapshots:
            raise NoDataError("No snapshots collected - cannot compute statistics")

    def rates(self) -> np.ndarray:
        """Traffic rate of every snapshot, in recorded order."""
        return np.array([s.traffic_rate for s in self._snapshots], dtype=np.int64)

    def timestamps(self) -> np.ndarray:
        """Timestamp of every snapshot, in recorded order."""
        return np.array([s.timestamp for s in self._snapshots], dtype=float)

    def time_range(self) -> Tuple[float, float]:
        """Return the (start, end) timestamps of the recorded snapshots.

        Raises:
            NoDataError: If no snapshot has been recorded.
        """
        self._require_snapshots()
        return self._snapshots[0].timestamp, self._snapshots[-1].timestamp

    def compute_statistics(self) -> SummaryStatistics:
        """Compute min, max and mean traffic rate plus the covered time range.

        Returns:
            The summary record.

        Raises:
            NoDataError: If no snapshot has been recorded.
        """
        self._require_snapshots()
        rates = self.rates()
        start_time, end_time = self.time_range()
        return SummaryStatistics(
            min_rate=int(rates.min()),
            max_rate=int(rates.max()),
            avg_rate=float(rates.mean()),
            total_snapshots=len(rates),
            start_time=start_time,
            end_time=end_time,
        )

    summary = compute_statistics

    def format_summary(self) -> str:
        """Render the summary as a human-readable block of text."""
        stats = self.compute_statistics()
        return (
            "=== Simulation Statistics ===\n"
            f"Total Snapshots: {stats.total_snapshots}\n"
            f"Time Range: {stats.start_time:.2f} - {stats.end_time:.2f} seconds\n"
            f"Min Rate: {stats.min_rate} active sources\n"
            f"Max Rate: {stats.max_rate} active sources\n"
            f"Avg Rate: {stats.avg_rate:.2f} active sources\n"
        )

    def export_csv(self, filename: str) -> None:
        """Write all snapshots to a CSV file.

        Args:
            filename: Output filename. Missing parent directories are created.

        Raises:
            NoDataError: If no snapshot has been recorded.
            ExportError: If the file cannot be written.
        """
        if not self._snapshots:
            raise NoDataError("No snapshots to export")

        try:
            directory = os.path.dirname(filename)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(filename, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(CSV_HEADER)
                for snapshot in self._snapshots:
                    writer.writerow(
                        [
                            f"{snapshot.timestamp:.4f}",
                            snapshot.traffic_rate,
                            snapshot.active_source_count,
                        ]
                    )
        except OSError as exc:
            raise ExportError(f"Failed to export CSV to {filename}: {exc}") from exc

        logger.debug(f"Exported {len(self._snapshots)} snapshots to {filename}")

    def __repr__(self) -> str:
        return f"SimulationStatistics(snapshots={len(self._snapshots)})"
