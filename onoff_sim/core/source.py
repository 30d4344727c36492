"""Traffic source class for ON/OFF traffic simulation.

This module defines the TrafficSource class, a two-state machine that
alternates between ON and OFF dwell periods drawn from Pareto distributions.
"""

from typing import Optional

from onoff_sim.core.enums import EventType, SourceState
from onoff_sim.core.event import Event
from onoff_sim.core.event_queue import EventQueue
from onoff_sim.traffic.generators import ParetoDistribution


class TrafficSource:
    """Represents a single ON/OFF traffic source.

    Attributes:
        id: Unique identifier for the source.
        state: Current state (ON or OFF).
        on_distribution: Sampler for ON dwell durations.
        off_distribution: Sampler for OFF dwell durations.
        transitions: Number of events processed by this source.
    """

    def __init__(
        self,
        source_id: int,
        on_distribution: ParetoDistribution,
        off_distribution: ParetoDistribution,
        start_on: bool = False,
    ) -> None:
        """Initialize a traffic source.

        Args:
            source_id: Unique non-negative identifier for the source.
            on_distribution: Distribution of ON dwell durations.
            off_distribution: Distribution of OFF dwell durations.
            start_on: Whether the source starts in the ON state.

        Raises:
            ValueError: If the ID is negative or a distribution is missing.
        """
        if source_id < 0:
            raise ValueError(f"Source ID must be non-negative, got {source_id}")
        if on_distribution is None or off_distribution is None:
            raise ValueError("ON and OFF distributions are required")
        self.id = source_id
        self.on_distribution = on_distribution
        self.off_distribution = off_distribution
        self.state = SourceState.ON if start_on else SourceState.OFF
        self.transitions = 0

    @property
    def is_on(self) -> bool:
        return self.state is SourceState.ON

    def schedule_initial_event(self, queue: EventQueue, start_time: float) -> Event:
        """Schedule the event that ends the source's current dwell.

        A source starting ON samples an ON duration and schedules its OFF
        transition; a source starting OFF does the opposite.

        Args:
            queue: Queue to schedule the event into.
            start_time: Simulation time at which the dwell begins.

        Returns:
            The scheduled event.
        """
        if self.is_on:
            event = self._next_event(EventType.SOURCE_TURNS_OFF, start_time)
        else:
            event = self._next_event(EventType.SOURCE_TURNS_ON, start_time)
        queue.insert(event)
        return event

    def process_event(
        self, event: Event, queue: EventQueue, current_time: Optional[float] = None
    ) -> Event:
        """Apply a state-change event and schedule the following one.

        Args:
            event: The event to apply. Must belong to this source.
            queue: Queue to schedule the next event into.
            current_time: Simulation time of processing (defaults to the
                event's timestamp).

        Returns:
            The newly scheduled event.

        Raises:
            ValueError: If the event belongs to another source.
        """
        if event.source_id != self.id:
            raise ValueError(
                f"Event for source {event.source_id} dispatched to source {self.id}"
            )
        now = event.timestamp if current_time is None else current_time

        if event.event_type is EventType.SOURCE_TURNS_ON:
            next_event = self._next_event(EventType.SOURCE_TURNS_OFF, now)
            self.state = SourceState.ON
        elif event.event_type is EventType.SOURCE_TURNS_OFF:
            next_event = self._next_event(EventType.SOURCE_TURNS_ON, now)
            self.state = SourceState.OFF
        else:
            raise ValueError(f"Unhandled event type: {event.event_type!r}")

        queue.insert(next_event)
        self.transitions += 1
        return next_event

    def _next_event(self, event_type: EventType, now: float) -> Event:
        """Build the event that ends a dwell starting at ``now``.

        The dwell being ended is ON when the next event turns the source OFF.
        """
        if event_type is EventType.SOURCE_TURNS_OFF:
            duration = self.on_distribution.sample()
        else:
            duration = self.off_distribution.sample()
        return Event(now + duration, event_type, self.id)

    def __repr__(self) -> str:
        """Return string representation of the source.

        Returns:
            String representation of the source.
        """
        return f"TrafficSource({self.id}, {self.state.name})"
