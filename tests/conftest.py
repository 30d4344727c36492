"""Shared fixtures for the simulation tests."""

import sys
from typing import List

import numpy as np
import pytest
from loguru import logger

from onoff_sim.core.config import SimulationConfig
from onoff_sim.core.enums import InitialState
from onoff_sim.traffic.generators import ParetoDistribution


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def make_distribution(rng):
    def _make(shape: float = 1.5, scale: float = 1.0) -> ParetoDistribution:
        return ParetoDistribution(shape, scale, rng)

    return _make


@pytest.fixture
def small_config() -> SimulationConfig:
    return SimulationConfig(
        total_simulation_time=10.0,
        num_sources=3,
        pareto_shape=1.0,
        pareto_scale=1.0,
        output_interval=1.0,
        initial_state=InitialState.OFF,
        seed=7,
    )


@pytest.fixture
def log_messages():
    """Collect the plain text of every loguru message emitted during a test."""
    messages: List[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def restore_logger():
    """Reinstate loguru's default stderr sink after a test reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
