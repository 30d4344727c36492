#!/usr/bin/env python3
"""Run a self-similar ON/OFF traffic simulation from the command line."""

import argparse
import sys

from loguru import logger

from onoff_sim.core.config import SimulationConfig
from onoff_sim.core.enums import InitialState
from onoff_sim.core.errors import ExportError
from onoff_sim.core.simulator import NetworkSimulator
from onoff_sim.utils.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the simulation parameters."""
    parser = argparse.ArgumentParser(
        description="Self-similar traffic simulation with Pareto ON/OFF sources"
    )
    parser.add_argument(
        "--time", type=float, default=100.0, help="Total simulation time in seconds"
    )
    parser.add_argument(
        "--sources", type=int, default=10, help="Number of traffic sources"
    )
    parser.add_argument(
        "--shape", type=float, default=1.5, help="Pareto shape parameter (alpha)"
    )
    parser.add_argument(
        "--scale", type=float, default=1.0, help="Pareto scale parameter (beta)"
    )
    parser.add_argument(
        "--interval", type=float, default=1.0, help="Snapshot interval in seconds"
    )
    parser.add_argument(
        "--initial-state",
        choices=[state.value for state in InitialState],
        default=InitialState.RANDOM.value,
        help="Starting state of the sources",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--log-events", action="store_true", help="Log every state change"
    )
    parser.add_argument("--output", default=None, help="CSV output file path")
    parser.add_argument(
        "--progress", action="store_true", help="Log progress while running"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug messages"
    )
    return parser


def main(argv=None) -> int:
    """Main function to run the simulation"""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        config = SimulationConfig(
            total_simulation_time=args.time,
            num_sources=args.sources,
            pareto_shape=args.shape,
            pareto_scale=args.scale,
            output_interval=args.interval,
            enable_event_logging=args.log_events,
            output_file_path=args.output,
            initial_state=args.initial_state,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logger.info(config.describe())

    simulator = NetworkSimulator(config)
    simulator.run(updates=args.progress)

    try:
        simulator.report()
    except ExportError as exc:
        logger.error(str(exc))
        return 1

    logger.info("Simulation complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
