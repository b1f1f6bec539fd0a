"""
Portfolio State Machine

Cash plus a share count for the single traded instrument.

States:
- Empty: no shares held
- Holding: one or more shares held
- Frozen: game over, shares wiped, no further trades

Invalid trades never raise: they come back as an unsuccessful TradeResult and
leave the state untouched.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from trader.simulation.models import Quote, Trade, TradeSide, WorthTrend

logger = logging.getLogger(__name__)


@dataclass
class TradeResult:
    """Result of attempting a buy or sell."""
    success: bool
    message: str
    trade: Trade | None = None


class Portfolio:
    """
    Player account trading one share at a time against a fixed spread.

    Usage:
        portfolio = Portfolio(cash=1000)
        portfolio.buy(100.0)     # pays 101.0
        portfolio.sell(100.0)    # receives 99.0
        portfolio.net_worth(100.0)
    """

    def __init__(
        self,
        cash: float = 1000.0,
        buy_fee: float = 0.01,
        sell_fee: float = 0.01,
        on_trade: Callable[[Trade], None] | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the portfolio.

        Args:
            cash: Starting cash
            buy_fee: Markup over the mid price when buying
            sell_fee: Discount from the mid price when selling
            on_trade: Optional callback when a trade executes
            now: Clock source for trade timestamps
        """
        self.cash = cash
        self.shares = 0
        self.reference_worth = cash
        self.buy_fee = buy_fee
        self.sell_fee = sell_fee
        self.on_trade = on_trade
        self._now = now

        # State
        self.frozen = False
        self.trade_history: list[Trade] = []

    def quote(self, mid: float) -> Quote:
        """Buy and sell prices for the given mid price."""
        return Quote(
            mid=mid,
            buy=mid * (1 + self.buy_fee),
            sell=mid * (1 - self.sell_fee),
        )

    def can_buy(self, mid: float) -> bool:
        """Whether one share can be bought at this mid price."""
        return not self.frozen and self.cash >= self.quote(mid).buy

    def can_sell(self) -> bool:
        """Whether at least one share can be sold."""
        return not self.frozen and self.shares >= 1

    def buy(self, mid: float) -> TradeResult:
        """
        Buy one share at the quoted buy price.

        The first share bought from an empty portfolio captures the current
        cash as the reference worth.

        Args:
            mid: Latest simulated price

        Returns:
            TradeResult (success=False leaves the portfolio unchanged)
        """
        if self.frozen:
            return TradeResult(success=False, message="Game over, trading is closed")

        price = self.quote(mid).buy
        if not self.can_buy(mid):
            return TradeResult(
                success=False,
                message=f"Insufficient cash. Need {price:.2f}€, have {self.cash:.2f}€",
            )

        if self.shares == 0:
            self.reference_worth = self.cash
        self.cash -= price
        self.shares += 1

        trade = self._record(TradeSide.BUY, price, mid)
        return TradeResult(
            success=True,
            message=f"Bought 1 @ {price:.2f}€ (cash: {self.cash:.2f}€)",
            trade=trade,
        )

    def sell(self, mid: float) -> TradeResult:
        """
        Sell one share at the quoted sell price.

        Args:
            mid: Latest simulated price

        Returns:
            TradeResult (success=False leaves the portfolio unchanged)
        """
        if self.frozen:
            return TradeResult(success=False, message="Game over, trading is closed")
        if not self.can_sell():
            return TradeResult(success=False, message="No shares to sell")

        price = self.quote(mid).sell
        self.cash += price
        self.shares -= 1

        trade = self._record(TradeSide.SELL, price, mid)
        return TradeResult(
            success=True,
            message=f"Sold 1 @ {price:.2f}€ (cash: {self.cash:.2f}€)",
            trade=trade,
        )

    def _record(self, side: TradeSide, price: float, mid: float) -> Trade:
        trade = Trade(
            side=side,
            price=price,
            mid_price=mid,
            cash_after=self.cash,
            shares_after=self.shares,
            time=self._now(),
        )
        self.trade_history.append(trade)

        if self.on_trade:
            self.on_trade(trade)
        return trade

    def net_worth(self, mid: float) -> float:
        """Cash plus shares valued at the sell price (never the mid price)."""
        return self.cash + self.shares * self.quote(mid).sell

    def worth_trend(self, mid: float) -> WorthTrend:
        """Compare net worth with the reference worth for display coloring."""
        if self.shares == 0:
            return WorthTrend.FLAT
        if self.net_worth(mid) > self.reference_worth:
            return WorthTrend.AHEAD
        return WorthTrend.BEHIND

    def freeze(self) -> None:
        """
        Close the portfolio at game over.

        Held shares are wiped without crediting cash (liquidated at zero).
        """
        if self.frozen:
            return
        if self.shares:
            logger.info(f"Freezing portfolio, {self.shares} share(s) lost")
        self.shares = 0
        self.frozen = True
