"""Traffic snapshot class for ON/OFF traffic simulation.

This module defines the TrafficSnapshot class, an immutable record of the
aggregate traffic state at one instant of simulation time.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable


@dataclass(frozen=True, init=False)
class TrafficSnapshot:
    """Represents the aggregate traffic at one sampling instant.

    Attributes:
        timestamp: Simulation time of the measurement.
        traffic_rate: Number of sources that were ON.
        active_source_ids: IDs of the sources that were ON. Stored as a
            frozenset copy of whatever collection was passed in.
    """

    timestamp: float
    traffic_rate: int
    active_source_ids: FrozenSet[int]

    def __init__(
        self, timestamp: float, traffic_rate: int, active_source_ids: Iterable[int]
    ) -> None:
        if not timestamp >= 0:
            raise ValueError(f"Timestamp cannot be negative: {timestamp}")
        if traffic_rate < 0:
            raise ValueError(f"Traffic rate cannot be negative: {traffic_rate}")
        if active_source_ids is None:
            raise ValueError("Active source IDs cannot be None")
        ids = frozenset(active_source_ids)
        if any(source_id < 0 for source_id in ids):
            raise ValueError("Active source IDs must be non-negative")
        object.__setattr__(self, "timestamp", float(timestamp))
        object.__setattr__(self, "traffic_rate", int(traffic_rate))
        object.__setattr__(self, "active_source_ids", ids)

    @property
    def active_source_count(self) -> int:
        return len(self.active_source_ids)
