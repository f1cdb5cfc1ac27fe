"""Synthetic prices for instruments without a live feed."""

import random
from typing import Optional

# Maximum move per step, as a fraction of the previous price
MAX_STEP = 0.005


class SyntheticPriceWalk:
    """
    Small random walk from the last known price.

    Each step multiplies by a uniform factor in [1 - 0.5%, 1 + 0.5%) and
    rounds to cents. Seed the generator for reproducible output.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random(seed)

    def next_price(self, previous: float) -> float:
        change = 1 + (self._rng.random() - 0.5) * (2 * MAX_STEP)
        return round(previous * change, 2)
