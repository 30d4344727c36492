"""Self-similar traffic simulation from heavy-tailed ON/OFF sources.

The package superposes many independent ON/OFF sources whose dwell times are
Pareto distributed and samples the number of active sources over logical time.
"""

from onoff_sim.core.config import SimulationConfig
from onoff_sim.core.enums import EventType, InitialState, SourceState
from onoff_sim.core.simulator import NetworkSimulator, run_simulation
from onoff_sim.core.statistics import SimulationStatistics

__all__ = [
    "EventType",
    "InitialState",
    "NetworkSimulator",
    "SimulationConfig",
    "SimulationStatistics",
    "SourceState",
    "run_simulation",
]
