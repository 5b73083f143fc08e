"""Weighted digit draws.

Each thread owns its own numpy Generator seeded from OS entropy, so concurrent
handlers never share RNG state. Pass ``rng`` explicitly for reproducible draws.
"""

import threading
from typing import Optional

import numpy as np

from lottery_sim.domain.weight_table import DIGIT_COUNT, WeightTable

_local = threading.local()


def thread_rng() -> np.random.Generator:
    """Return the calling thread's generator, creating it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


def sample_digit(table: WeightTable, rng: Optional[np.random.Generator] = None) -> int:
    """Draw one digit with probability weight[i] / sum(weights).

    Args:
        table (WeightTable): Digit weights
        rng (np.random.Generator, optional): Generator to draw from. Defaults to the thread's own.

    Raises:
        DistributionError: The weights sum to zero

    Returns:
        int: A digit between 0 and 9
    """
    probabilities = table.probabilities()
    if rng is None:
        rng = thread_rng()
    return int(rng.choice(DIGIT_COUNT, p=probabilities))


def generate_number(
    table: WeightTable, n_digits: int, rng: Optional[np.random.Generator] = None
) -> str:
    """Draw n_digits independent digits and join them in draw order.

    Leading zeros are kept, so (0, 0, 7) becomes "007".

    Args:
        table (WeightTable): Digit weights shared by every position
        n_digits (int): Length of the number
        rng (np.random.Generator, optional): Generator to draw from. Defaults to the thread's own.

    Raises:
        ValueError: n_digits is less than 1
        DistributionError: The weights sum to zero

    Returns:
        str: The drawn number
    """
    if n_digits < 1:
        raise ValueError(f"n_digits must be at least 1, got {n_digits}")
    probabilities = table.probabilities()
    if rng is None:
        rng = thread_rng()
    digits = rng.choice(DIGIT_COUNT, size=n_digits, p=probabilities)
    return "".join(str(digit) for digit in digits)
