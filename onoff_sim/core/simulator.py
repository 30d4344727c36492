"""Network simulator class for ON/OFF traffic simulation.

This module defines the NetworkSimulator class, which owns the traffic
sources and the event queue and drives the discrete-event main loop.
"""

from typing import Any, Callable, Dict, List, Tuple

import numpy as np
from loguru import logger

from onoff_sim.core.config import SimulationConfig
from onoff_sim.core.enums import InitialState
from onoff_sim.core.errors import SimulationError
from onoff_sim.core.event import Event
from onoff_sim.core.event_queue import EventQueue
from onoff_sim.core.snapshot import TrafficSnapshot
from onoff_sim.core.source import TrafficSource
from onoff_sim.core.statistics import SimulationStatistics
from onoff_sim.traffic.generators import ParetoDistribution
from onoff_sim.utils.rng import coin_flip, spawn_generators


class NetworkSimulator:
    """ON/OFF traffic simulation environment.

    Attributes:
        config: Simulation configuration.
        event_queue: Pending state-change events of all sources.
        statistics: Snapshots recorded during the run.
        current_time: Current logical simulation time.
        next_snapshot_time: Time at which the next periodic snapshot is due.
    """

    def __init__(self, config: SimulationConfig):
        """Initialize the simulator and schedule every source's first event.

        Args:
            config: Validated simulation configuration.

        Raises:
            ValueError: If config is missing.
        """
        if config is None:
            raise ValueError("SimulationConfig cannot be None")

        self.config = config
        self.event_queue = EventQueue()
        self.statistics = SimulationStatistics()
        self.current_time = 0.0
        self.next_snapshot_time = config.output_interval
        self._sources: List[TrafficSource] = []
        self._has_run = False

        self.hooks: Dict[str, List[Callable[..., Any]]] = {
            "event_processed": [],  # a source changed state
            "snapshot_recorded": [],  # a snapshot was stored
            "sim_end": [],  # the simulation ends
        }

        self._initialize_sources()

    def _initialize_sources(self) -> None:
        """Create the sources with their own random streams and seed the queue."""
        n = self.config.num_sources
        # One stream for the starting states, then ON and OFF streams per source
        streams = spawn_generators(self.config.seed, 2 * n + 1)
        state_rng = streams[0]

        for source_id in range(n):
            on_distribution = ParetoDistribution(
                self.config.pareto_shape,
                self.config.pareto_scale,
                streams[1 + 2 * source_id],
            )
            off_distribution = ParetoDistribution(
                self.config.pareto_shape,
                self.config.pareto_scale,
                streams[2 + 2 * source_id],
            )
            source = TrafficSource(
                source_id,
                on_distribution,
                off_distribution,
                start_on=self._starts_on(state_rng),
            )
            self._sources.append(source)
            source.schedule_initial_event(self.event_queue, self.current_time)

        logger.debug(
            f"Initialized {n} sources ({self.aggregate_rate()} ON, "
            f"initial state {self.config.initial_state.value}, seed {self.config.seed})"
        )

    def _starts_on(self, rng: np.random.Generator) -> bool:
        initial_state = self.config.initial_state
        if initial_state is InitialState.ON:
            return True
        if initial_state is InitialState.OFF:
            return False
        return coin_flip(rng)

    @property
    def sources(self) -> Tuple[TrafficSource, ...]:
        return tuple(self._sources)

    @property
    def num_sources(self) -> int:
        return len(self._sources)

    @property
    def event_queue_size(self) -> int:
        return len(self.event_queue)

    def get_source(self, source_id: int) -> TrafficSource:
        """Return the source with the given ID.

        Raises:
            KeyError: If no source has that ID.
        """
        if not 0 <= source_id < len(self._sources):
            raise KeyError(f"No traffic source with ID {source_id}")
        return self._sources[source_id]

    def aggregate_rate(self) -> int:
        """Count the sources that are currently ON."""
        return sum(1 for source in self._sources if source.is_on)

    def active_source_ids(self) -> List[int]:
        """IDs of the sources that are currently ON."""
        return [source.id for source in self._sources if source.is_on]

    def record_snapshot(self) -> TrafficSnapshot:
        """Record the aggregate traffic at the current time.

        The rate is recomputed by scanning all sources.

        Returns:
            The recorded snapshot.
        """
        active = self.active_source_ids()
        snapshot = TrafficSnapshot(self.current_time, len(active), active)
        self.statistics.record(snapshot)
        self.call_hooks("snapshot_recorded", snapshot)
        return snapshot

    def register_hook(self, event_type: str, callback: Callable[..., Any]) -> None:
        """Register a callback function for a specific event type.

        Args:
            event_type: The type of event to register for.
            callback: The function to call when the event occurs.
        """
        if event_type not in self.hooks:
            raise ValueError(f"Unknown hook type: {event_type}")
        self.hooks[event_type].append(callback)

    def call_hooks(self, event_type: str, *args: Any, **kwargs: Any) -> None:
        """Call all registered callbacks for the given event type.

        Args:
            event_type: The type of event that occurred.
            *args, **kwargs: Arguments to pass to the callback functions.
        """
        if event_type in self.hooks:
            for callback in self.hooks[event_type]:
                callback(*args, **kwargs)

    def _log_event(self, event: Event) -> None:
        logger.info(
            f"Time [{self.current_time:.4f}] Source {event.source_id} "
            f"turned {event.event_type.label}"
        )

    def run(self, updates: bool = False) -> SimulationStatistics:
        """Run the simulation up to the configured horizon.

        Args:
            updates: Log progress every tenth of the horizon.

        Returns:
            The populated statistics.

        Raises:
            SimulationError: If the simulator has already been run.
        """
        if self._has_run:
            raise SimulationError("Simulation has already been run")
        self._has_run = True

        horizon = self.config.total_simulation_time
        interval = self.config.output_interval
        progress_step = horizon / 10
        next_progress = progress_step

        logger.debug(f"Starting run: {self.config.describe()}")
        self.record_snapshot()

        while self.current_time < horizon and not self.event_queue.is_empty():
            # Catch up on every snapshot instant that has passed
            while self.current_time >= self.next_snapshot_time:
                self.record_snapshot()
                self.next_snapshot_time += interval

            next_event = self.event_queue.peek_earliest()
            if next_event.timestamp >= horizon:
                break

            event = self.event_queue.remove_earliest()
            self.current_time = event.timestamp
            self._sources[event.source_id].process_event(
                event, self.event_queue, self.current_time
            )

            if self.config.enable_event_logging:
                self._log_event(event)
            self.call_hooks("event_processed", event, self.current_time)

            if updates and self.current_time >= next_progress:
                progress = min(self.current_time / horizon, 1.0) * 100
                logger.info(f"Progress: {progress:.2f}%")
                while next_progress <= self.current_time:
                    next_progress += progress_step

        self.current_time = horizon
        self.record_snapshot()

        logger.debug(
            f"Run finished at t={horizon:.4f} with {len(self.statistics)} snapshots"
        )
        self.call_hooks("sim_end", self.statistics)

        return self.statistics

    def report(self) -> str:
        """Summarise the run and export the CSV file if one is configured.

        Returns:
            The summary text.

        Raises:
            NoDataError: If the simulation has not recorded any snapshot.
            ExportError: If the CSV export fails.
        """
        text = (
            self.statistics.format_summary()
            + f"Snapshots Recorded: {len(self.statistics)}\n"
            + f"Sources: {len(self._sources)}\n"
        )
        logger.info("\n" + text)

        if self.config.output_file_path is not None:
            self.statistics.export_csv(self.config.output_file_path)
            logger.info(f"CSV exported to: {self.config.output_file_path}")

        return text

    def __repr__(self) -> str:
        return (
            f"NetworkSimulator(time={self.current_time:.4f}, "
            f"sources={len(self._sources)}, queue_size={len(self.event_queue)}, "
            f"snapshots={len(self.statistics)})"
        )


def run_simulation(config: SimulationConfig) -> SimulationStatistics:
    """Build a simulator for ``config``, run it and return its statistics.

    Args:
        config: Simulation configuration.

    Returns:
        Statistics of the finished run.
    """
    simulator = NetworkSimulator(config)
    return simulator.run()
