"""
Data models for the trading game.

Plain dataclasses passed between the simulation engine and the dashboard.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TradeSide(Enum):
    """Trade direction."""

    BUY = "buy"
    SELL = "sell"


class WorthTrend(Enum):
    """Net worth relative to the reference worth captured at first purchase."""

    FLAT = "flat"  # No shares held
    AHEAD = "ahead"
    BEHIND = "behind"


@dataclass(frozen=True)
class Quote:
    """
    Prices offered to the player for the current tick.

    Example: mid 100.0 -> buy 101.0, sell 99.0
    """

    mid: float  # Latest simulated price
    buy: float  # What one share costs
    sell: float  # What one share returns

    @property
    def spread(self) -> float:
        return self.buy - self.sell


@dataclass
class Trade:
    """
    An executed buy or sell of a single share (for history).
    """

    side: TradeSide
    price: float  # Quoted price the share changed hands at
    mid_price: float  # Simulated price at the time of the trade
    cash_after: float
    shares_after: int
    time: datetime


@dataclass(frozen=True)
class GameSnapshot:
    """
    Everything the dashboard renders for one frame.

    Taken atomically so a frame never mixes two ticks.
    """

    prices: list[float]  # Rolling window, oldest first
    quote: Quote | None  # None before the first tick
    cash: float
    shares: int
    net_worth: float
    reference_worth: float
    initial_cash: float
    worth_trend: WorthTrend
    roi_per_minute: float | None  # Percent, None while unavailable
    can_buy: bool
    can_sell: bool
    is_over: bool
    elapsed_seconds: float
    ticks: int

    @property
    def latest_price(self) -> float | None:
        return self.quote.mid if self.quote else None

    @property
    def total_profit(self) -> float:
        """Net worth gained or lost since the session started."""
        return self.net_worth - self.initial_cash
