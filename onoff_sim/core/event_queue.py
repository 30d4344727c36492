"""Event queue for ON/OFF traffic simulation.

This module defines the EventQueue class, a binary-heap priority queue that
always yields the earliest pending event.
"""

import heapq
import itertools
from typing import Iterator, List, Optional, Tuple

from onoff_sim.core.errors import EmptyQueueError
from onoff_sim.core.event import Event


class EventQueue:
    """Min-priority queue of events keyed by (timestamp, source_id).

    Events with equal keys are returned in insertion order.

    Attributes:
        heap: Heap entries of (timestamp, source_id, sequence, event).
    """

    def __init__(self) -> None:
        self.heap: List[Tuple[float, int, int, Event]] = []
        self._counter: Iterator[int] = itertools.count()

    def insert(self, event: Event) -> None:
        """Add an event to the queue in O(log n).

        Args:
            event: The event to schedule.

        Raises:
            TypeError: If event is not an Event.
        """
        if not isinstance(event, Event):
            raise TypeError(f"Cannot enqueue {event!r}: expected an Event")
        heapq.heappush(
            self.heap, (event.timestamp, event.source_id, next(self._counter), event)
        )

    def remove_earliest(self) -> Event:
        """Remove and return the earliest event in O(log n).

        Returns:
            The event with the smallest (timestamp, source_id) key.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self.heap:
            raise EmptyQueueError("Cannot dequeue from an empty event queue")
        return heapq.heappop(self.heap)[-1]

    def peek_earliest(self) -> Optional[Event]:
        """Return the earliest event without removing it, or None if empty."""
        if not self.heap:
            return None
        return self.heap[0][-1]

    def is_empty(self) -> bool:
        return not self.heap

    def __len__(self) -> int:
        return len(self.heap)

    def __repr__(self) -> str:
        return f"EventQueue(size={len(self.heap)})"
