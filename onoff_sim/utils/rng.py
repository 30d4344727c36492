"""Random stream helpers for reproducible simulations.

Every simulator owns its own streams. They are spawned from a single
SeedSequence so that one integer seed reproduces a whole run while no two
samplers ever share a generator.
"""

from typing import List, Optional, Union

import numpy as np

SeedLike = Union[None, int, np.random.SeedSequence]


def make_seed_sequence(seed: SeedLike = None) -> np.random.SeedSequence:
    """
    Build the root SeedSequence for a simulation run.

    Args:
        seed (int | SeedSequence | None): Seed value. None draws fresh entropy
            from the operating system.

    Returns:
        np.random.SeedSequence: The root sequence for the run.
    """
    if isinstance(seed, np.random.SeedSequence):
        return seed
    return np.random.SeedSequence(seed)


def spawn_generators(seed: SeedLike, count: int) -> List[np.random.Generator]:
    """
    Create independent random generators from a single seed.

    Args:
        seed (int | SeedSequence | None): Seed for the root sequence.
        count (int): Number of generators to create.

    Returns:
        list[np.random.Generator]: ``count`` statistically independent streams.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"Cannot spawn a negative number of generators: {count}")
    root = make_seed_sequence(seed)
    return [np.random.default_rng(child) for child in root.spawn(count)]


def coin_flip(rng: np.random.Generator, probability: float = 0.5) -> bool:
    """
    Draw a boolean that is True with the given probability.

    Args:
        rng (np.random.Generator): Stream to draw from.
        probability (float): Probability of returning True.

    Returns:
        bool: The outcome.
    """
    return bool(rng.random() < probability)


def default_generator(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return ``rng`` or a freshly seeded generator when none is given."""
    return rng if rng is not None else np.random.default_rng()
