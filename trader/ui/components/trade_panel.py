"""
Trade panel component.

Buy and sell buttons quoting the current spread. Buttons are disabled when
the action is not allowed. Replaced by a banner once the stock collapses.
"""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from trader.simulation.models import GameSnapshot

COLOR_DOWN = "#ff7777"

GAME_OVER_TITLE = "Stock collapsed"
GAME_OVER_MESSAGE = "Game over, your remaining stocks are sold for 0"


class TradePanel(Horizontal):
    """Buy / Sell controls."""

    DEFAULT_CSS = """
    TradePanel {
        height: auto;
        padding: 0 1;
    }

    TradePanel Button {
        width: 1fr;
        margin: 0 1;
    }

    TradePanel #game-over {
        width: 1fr;
        display: none;
    }
    """

    def compose(self) -> ComposeResult:
        yield Button("Buy", id="buy", variant="success", disabled=True)
        yield Button("Sell", id="sell", variant="error", disabled=True)
        yield Static("", id="game-over")

    def update_display(self, snapshot: GameSnapshot) -> None:
        try:
            buy = self.query_one("#buy", Button)
            sell = self.query_one("#sell", Button)
            banner = self.query_one("#game-over", Static)
        except Exception:
            return

        if snapshot.is_over:
            buy.display = False
            sell.display = False
            banner.display = True
            banner.update(
                f"[bold {COLOR_DOWN}]{GAME_OVER_TITLE}[/bold {COLOR_DOWN}]\n{GAME_OVER_MESSAGE}"
            )
            return

        if snapshot.quote is not None:
            buy.label = f"Buy {snapshot.quote.buy:.0f}€"
            sell.label = f"Sell {snapshot.quote.sell:.0f}€"
        buy.disabled = not snapshot.can_buy
        sell.disabled = not snapshot.can_sell
