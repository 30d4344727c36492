"""Dataclass configuration for ON/OFF traffic simulation."""

import math
import numbers
from dataclasses import dataclass
from typing import List, Optional

from onoff_sim.core.enums import InitialState


def validate_parameters(
    total_simulation_time: float,
    num_sources: int,
    pareto_shape: float,
    pareto_scale: float,
    output_interval: float,
) -> List[str]:
    """Check simulation parameters.

    Args:
        total_simulation_time: Simulation horizon in seconds.
        num_sources: Number of traffic sources.
        pareto_shape: Pareto shape parameter (alpha).
        pareto_scale: Pareto scale parameter (beta).
        output_interval: Time between snapshots in seconds.

    Returns:
        A list of problems, empty when every parameter is valid.
    """
    problems: List[str] = []
    if not (total_simulation_time > 0 and math.isfinite(total_simulation_time)):
        problems.append("Total simulation time must be positive")
    if isinstance(num_sources, bool) or not isinstance(num_sources, numbers.Integral):
        problems.append("Number of sources must be an integer")
    elif num_sources <= 0:
        problems.append("Number of sources must be positive")
    if not (pareto_shape > 0 and math.isfinite(pareto_shape)):
        problems.append("Pareto shape must be positive")
    if not (pareto_scale > 0 and math.isfinite(pareto_scale)):
        problems.append("Pareto scale must be positive")
    if not (output_interval > 0 and math.isfinite(output_interval)):
        problems.append("Output interval must be positive")
    return problems


@dataclass(frozen=True)
class SimulationConfig:
    """Main simulation configuration."""

    # Simulation horizon in seconds of logical time
    total_simulation_time: float
    # Number of independent ON/OFF sources
    num_sources: int
    # Pareto shape (alpha); smaller values give heavier tails
    pareto_shape: float
    # Pareto scale (beta), the minimum dwell time
    pareto_scale: float
    # Interval between traffic snapshots in seconds
    output_interval: float
    # Log every processed event
    enable_event_logging: bool = False
    # CSV export path (None disables export)
    output_file_path: Optional[str] = None
    # How sources pick their starting state
    initial_state: InitialState = InitialState.RANDOM
    # Random seed for reproducibility (None for random)
    seed: Optional[int] = None

    def __post_init__(self):
        problems = validate_parameters(
            self.total_simulation_time,
            self.num_sources,
            self.pareto_shape,
            self.pareto_scale,
            self.output_interval,
        )
        if problems:
            raise ValueError("Invalid simulation parameters: " + "; ".join(problems))
        object.__setattr__(self, "num_sources", int(self.num_sources))
        # Accept "off" / "on" / "random" as well as enum members
        object.__setattr__(self, "initial_state", InitialState(self.initial_state))
        if self.output_file_path is not None and not str(self.output_file_path).strip():
            object.__setattr__(self, "output_file_path", None)

    def describe(self) -> str:
        """One-line description of the configuration."""
        csv = f", csv={self.output_file_path}" if self.output_file_path else ""
        return (
            f"Config: T={self.total_simulation_time:.3f} s, N={self.num_sources}, "
            f"shape={self.pareto_shape:.3f}, scale={self.pareto_scale:.3f}, "
            f"t={self.output_interval:.3f} s, logging={self.enable_event_logging}{csv}"
        )
