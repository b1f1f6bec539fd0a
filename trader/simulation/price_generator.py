"""
Synthetic price generator.

Random walk with normally distributed increments. No clamping: the walk is
free to reach zero or go below, which is what ends a collapse-mode game.
"""

import numpy as np


class PriceGenerator:
    """
    Produces the next price from the current one.

    Usage:
        generator = PriceGenerator(mean_step=0.0, stddev=1.0)
        price = generator.next(100.0)
    """

    def __init__(
        self,
        mean_step: float = 0.0,
        stddev: float = 1.0,
        seed: int | None = None,
    ):
        """
        Initialize the generator.

        Args:
            mean_step: Mean of the per-tick increment
            stddev: Standard deviation of the per-tick increment
            seed: Random seed (None = fresh entropy, different every session)
        """
        if stddev < 0:
            raise ValueError("stddev must not be negative")
        self.mean_step = mean_step
        self.stddev = stddev
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next(
        self,
        current: float,
        mean_step: float | None = None,
        stddev: float | None = None,
    ) -> float:
        """
        Draw one increment and apply it to the current price.

        Args:
            current: Current price
            mean_step: Override for the configured mean
            stddev: Override for the configured standard deviation

        Returns:
            New price (may be <= 0)
        """
        mean = self.mean_step if mean_step is None else mean_step
        sigma = self.stddev if stddev is None else stddev
        return current + float(self._rng.normal(mean, sigma))
