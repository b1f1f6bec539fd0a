"""
Simulation Engine

Ties the price walk, the rolling history, the portfolio and the session clock
together behind a single lock.

Each tick:
1. Seed the history (first tick) or walk the price from the latest value
2. Push the new price (oldest evicted past capacity)
3. If the price is <= 0 and insolvency is enforced: end the game and freeze
   the portfolio

Once the game is over no further tick changes anything.

Run headless with:
    engine = SimulationEngine(GameConfig(seed=42))
    asyncio.run(engine.run(max_ticks=50))
"""

import asyncio
import logging
import threading
from datetime import datetime
from typing import Callable

from trader.core.config import DEFAULT_CONFIG, GameConfig
from trader.core.price_history import PriceHistory
from trader.simulation.game_clock import GameClock
from trader.simulation.models import GameSnapshot, Quote, Trade, WorthTrend
from trader.simulation.portfolio import Portfolio, TradeResult
from trader.simulation.price_generator import PriceGenerator

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Owns all mutable game state and exposes tick, trade and query entry points.

    Mutations (advance/buy/sell) and snapshot reads hold the same lock, so a
    reader never sees a half-applied tick even when driven from threads.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        generator: PriceGenerator | None = None,
        now: Callable[[], datetime] = datetime.now,
        on_trade: Callable[[Trade], None] | None = None,
    ):
        """
        Initialize a new session.

        Args:
            config: Game configuration (default: collapse mode)
            generator: Price source (default: built from config)
            now: Clock source, injectable for tests
            on_trade: Optional callback when a trade executes
        """
        self.config = config or DEFAULT_CONFIG
        self.generator = generator or PriceGenerator(
            mean_step=self.config.mean_step,
            stddev=self.config.stddev,
            seed=self.config.seed,
        )
        self.history = PriceHistory(capacity=self.config.history_capacity)
        self.portfolio = Portfolio(
            cash=self.config.initial_cash,
            buy_fee=self.config.buy_fee,
            sell_fee=self.config.sell_fee,
            on_trade=on_trade,
            now=now,
        )
        self.clock = GameClock(now=now)
        self.ticks = 0

        self._lock = threading.RLock()

        logger.info(
            f"Session started: cash={self.config.initial_cash:.2f} "
            f"seed_price={self.config.seed_price:.2f} stddev={self.config.stddev} "
            f"insolvency={'on' if self.config.enforce_insolvency else 'off'}"
        )

    # ============================================================
    # Mutation entry points
    # ============================================================

    def advance(self) -> float | None:
        """
        Run one tick.

        Returns:
            The price pushed this tick, or None if the game is already over
        """
        with self._lock:
            if self.clock.is_over:
                return None

            latest = self.history.latest()
            if latest is None:
                price = self.config.seed_price
            else:
                price = self.generator.next(latest)

            self.history.push(price)
            self.ticks += 1

            if price <= 0 and self.config.enforce_insolvency:
                self._game_over(price)

            return price

    def _game_over(self, price: float) -> None:
        if not self.clock.end():
            return
        lost_shares = self.portfolio.shares
        self.portfolio.freeze()
        logger.warning(
            f"Stock collapsed at {price:.2f} after {self.ticks} ticks "
            f"({lost_shares} share(s) sold for 0, cash {self.portfolio.cash:.2f})"
        )

    def buy(self) -> TradeResult:
        """Buy one share at the current quoted buy price."""
        with self._lock:
            return self._trade(self.portfolio.buy)

    def sell(self) -> TradeResult:
        """Sell one share at the current quoted sell price."""
        with self._lock:
            return self._trade(self.portfolio.sell)

    def _trade(self, action: Callable[[float], TradeResult]) -> TradeResult:
        if self.clock.is_over:
            result = TradeResult(success=False, message="Game over, trading is closed")
        else:
            latest = self.history.latest()
            if latest is None:
                result = TradeResult(success=False, message="No price yet")
            else:
                result = action(latest)

        if result.success:
            logger.info(result.message)
        else:
            logger.debug(f"Trade rejected: {result.message}")
        return result

    async def run(self, max_ticks: int | None = None) -> None:
        """
        Tick every configured interval until game over (or max_ticks).

        Args:
            max_ticks: Stop after this many ticks (None = run until game over)
        """
        if max_ticks is not None and max_ticks < 0:
            raise ValueError("max_ticks must not be negative")

        interval = self.config.tick_interval_seconds
        ticks_run = 0
        while not self.is_over():
            if max_ticks is not None and ticks_run >= max_ticks:
                break
            self.advance()
            ticks_run += 1
            if self.is_over() or (max_ticks is not None and ticks_run >= max_ticks):
                break
            await asyncio.sleep(interval)

    # ============================================================
    # Read-only queries
    # ============================================================

    def latest_price(self) -> float | None:
        with self._lock:
            return self.history.latest()

    def price_series(self) -> list[tuple[int, float]]:
        """Rolling window as (index, price), oldest = 0."""
        with self._lock:
            return self.history.as_sequence()

    def cash(self) -> float:
        with self._lock:
            return self.portfolio.cash

    def shares(self) -> int:
        with self._lock:
            return self.portfolio.shares

    def reference_worth(self) -> float:
        with self._lock:
            return self.portfolio.reference_worth

    def is_over(self) -> bool:
        with self._lock:
            return self.clock.is_over

    def quote(self) -> Quote | None:
        with self._lock:
            latest = self.history.latest()
            return self.portfolio.quote(latest) if latest is not None else None

    def can_buy(self) -> bool:
        with self._lock:
            latest = self.history.latest()
            if latest is None or self.clock.is_over:
                return False
            return self.portfolio.can_buy(latest)

    def can_sell(self) -> bool:
        with self._lock:
            if self.history.latest() is None or self.clock.is_over:
                return False
            return self.portfolio.can_sell()

    def net_worth(self) -> float:
        """Cash plus shares at the sell price (cash only before the first tick)."""
        with self._lock:
            latest = self.history.latest()
            if latest is None:
                return self.portfolio.cash
            return self.portfolio.net_worth(latest)

    def total_profit(self) -> float:
        return self.net_worth() - self.config.initial_cash

    def worth_trend(self) -> WorthTrend:
        with self._lock:
            latest = self.history.latest()
            if latest is None:
                return WorthTrend.FLAT
            return self.portfolio.worth_trend(latest)

    def roi_per_minute(self) -> float | None:
        """
        Compounded return per minute, in percent.

        Returns:
            None while unavailable (no elapsed time, no price, or a negative
            growth factor that has no real root)
        """
        with self._lock:
            if self.history.latest() is None:
                return None
            minutes = self.clock.elapsed_minutes()
            worth = self.net_worth()
        return compute_roi_per_minute(worth, self.config.initial_cash, minutes)

    def snapshot(self) -> GameSnapshot:
        """Consistent view of the whole game for rendering."""
        with self._lock:
            return GameSnapshot(
                prices=self.history.values(),
                quote=self.quote(),
                cash=self.portfolio.cash,
                shares=self.portfolio.shares,
                net_worth=self.net_worth(),
                reference_worth=self.portfolio.reference_worth,
                initial_cash=self.config.initial_cash,
                worth_trend=self.worth_trend(),
                roi_per_minute=self.roi_per_minute(),
                can_buy=self.can_buy(),
                can_sell=self.can_sell(),
                is_over=self.clock.is_over,
                elapsed_seconds=self.clock.elapsed_seconds(),
                ticks=self.ticks,
            )


def compute_roi_per_minute(
    net_worth: float, initial_cash: float, minutes: float
) -> float | None:
    """
    ROI per minute in percent: (growth ** (1 / minutes) - 1) * 100.

    Returns None when the value is undefined.
    """
    if minutes <= 0 or initial_cash <= 0:
        return None
    growth = net_worth / initial_cash
    if growth < 0:
        return None
    try:
        roi = growth ** (1.0 / minutes)
    except OverflowError:
        return None
    return (roi - 1.0) * 100.0
