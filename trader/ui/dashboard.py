#!/usr/bin/env python3
"""
Terminal Dashboard for the trading game.

Shows:
- Rolling price chart (last 20 seconds at the default tick rate)
- Buy / Sell buttons quoting the 1% spread
- Cash, shares, worth, total profit and ROI per minute

Run with:
    python run_game.py
    python run_game.py --mode endless --seed 7
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Button, Footer

from trader.core.config import DEFAULT_CONFIG, GameConfig
from trader.simulation.engine import SimulationEngine
from trader.simulation.models import Trade, TradeSide
from trader.ui.components import ChartPanel, StatsPanel, TradePanel

logger = logging.getLogger("dashboard")


class SuperTraderApp(App):
    """Single-player stock trading game."""

    TITLE = "SUPER TRADER"
    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("b", "buy", "Buy"),
        Binding("s", "sell", "Sell"),
    ]

    CSS = """
    Screen {
        background: #000000;
    }

    #main {
        height: 100%;
    }
    """

    def __init__(self, config: GameConfig | None = None):
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        self.engine = SimulationEngine(self.config, on_trade=self._on_trade)
        self._ticker: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="main"):
            yield ChartPanel(step_ms=self.config.tick_interval_ms, id="chart")
            yield TradePanel(id="trade")
            yield StatsPanel(id="stats")
        yield Footer()

    def on_mount(self) -> None:
        # First tick seeds the history so the buttons have a price right away
        self.tick()
        self._ticker = self.set_interval(self.config.tick_interval_seconds, self.tick)

    def tick(self) -> None:
        """Advance the market one step and redraw."""
        self.engine.advance()
        self.refresh_panels()

        if self.engine.is_over() and self._ticker is not None:
            self._ticker.stop()
            self._ticker = None
            self.notify("Stock collapsed! Game over.", severity="error", timeout=10)

    def refresh_panels(self) -> None:
        snapshot = self.engine.snapshot()
        try:
            self.query_one("#chart", ChartPanel).update_prices(snapshot.prices)
            self.query_one("#trade", TradePanel).update_display(snapshot)
            self.query_one("#stats", StatsPanel).update_display(snapshot)
        except Exception as e:
            logger.debug(f"Skipped redraw: {e}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "buy":
            self.action_buy()
        elif event.button.id == "sell":
            self.action_sell()

    def action_buy(self) -> None:
        if not self.engine.can_buy():
            return
        self.engine.buy()
        self.refresh_panels()

    def action_sell(self) -> None:
        if not self.engine.can_sell():
            return
        self.engine.sell()
        self.refresh_panels()

    def _on_trade(self, trade: Trade) -> None:
        side = "BUY" if trade.side == TradeSide.BUY else "SELL"
        logger.info(
            f"{side} @ {trade.price:.2f} (mid {trade.mid_price:.2f}) "
            f"-> cash {trade.cash_after:.2f}, shares {trade.shares_after}"
        )


def configure_logging(log_file: str = "super_trader.log", level: int = logging.INFO) -> None:
    """File-only logging so nothing writes over the TUI."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(name)s] %(levelname)s: %(message)s',
        handlers=[
            logging.FileHandler(log_file),
        ]
    )


def main():
    from trader.ui.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
