"""
Rolling price history.

Keeps the most recent prices for decision making (latest price) and for the
chart. Oldest prices are evicted silently once capacity is reached.
"""

from collections import deque


class PriceHistory:
    """
    Fixed-capacity buffer of recent prices, oldest first.

    Usage:
        history = PriceHistory(capacity=100)
        history.push(100.0)
        history.latest()        # 100.0
        history.as_sequence()   # [(0, 100.0)]
    """

    def __init__(self, capacity: int = 100):
        """
        Initialize an empty history.

        Args:
            capacity: Maximum number of prices retained
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._prices: deque[float] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._prices.maxlen

    def push(self, price: float) -> None:
        """Append a price, dropping the oldest one if the buffer is full."""
        self._prices.append(price)

    def latest(self) -> float | None:
        """Most recent price, or None if nothing was recorded yet."""
        if not self._prices:
            return None
        return self._prices[-1]

    def as_sequence(self) -> list[tuple[int, float]]:
        """
        Get (index, price) pairs for charting.

        Returns:
            List ordered oldest to newest, index 0 = oldest
        """
        return list(enumerate(self._prices))

    def values(self) -> list[float]:
        """Prices oldest to newest."""
        return list(self._prices)

    def __len__(self) -> int:
        return len(self._prices)
