"""Event class for ON/OFF traffic simulation.

This module defines the Event class, which marks the instant a traffic source
changes state, and the ordering used to process events chronologically.
"""

from dataclasses import dataclass
from typing import Tuple

from onoff_sim.core.enums import EventType


@dataclass(frozen=True)
class Event:
    """Represents a scheduled state change of one traffic source.

    Events are ordered by timestamp and then by source ID. Two events with the
    same timestamp and source ID sort as equivalent even if their types differ.

    Attributes:
        timestamp: Simulation time at which the event occurs.
        event_type: Whether the source turns ON or OFF.
        source_id: ID of the traffic source the event belongs to.
    """

    timestamp: float
    event_type: EventType
    source_id: int

    def __post_init__(self):
        """Validate fields after initialization."""
        if not self.timestamp >= 0:
            raise ValueError(f"Timestamp must be non-negative, got {self.timestamp}")
        if self.source_id < 0:
            raise ValueError(f"Source ID must be non-negative, got {self.source_id}")
        if self.event_type is None:
            raise ValueError("Event type cannot be None")
        if not isinstance(self.event_type, EventType):
            raise ValueError(f"Unknown event type: {self.event_type!r}")

    @property
    def sort_key(self) -> Tuple[float, int]:
        """Composite ordering key (timestamp, source_id)."""
        return (self.timestamp, self.source_id)

    def __lt__(self, other: "Event") -> bool:
        return self.sort_key < other.sort_key

    def __le__(self, other: "Event") -> bool:
        return self.sort_key <= other.sort_key

    def __gt__(self, other: "Event") -> bool:
        return self.sort_key > other.sort_key

    def __ge__(self, other: "Event") -> bool:
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        return (
            f"Event(timestamp={self.timestamp:.4f}, "
            f"type={self.event_type.name}, sourceId={self.source_id})"
        )


def compare_events(first: Event, second: Event) -> int:
    """Three-way comparison of two events by (timestamp, source_id).

    Args:
        first: Left-hand event.
        second: Right-hand event.

    Returns:
        Negative if first comes before second, positive if after, and 0 when
        both share the same timestamp and source ID.
    """
    a, b = first.sort_key, second.sort_key
    return (a > b) - (a < b)
