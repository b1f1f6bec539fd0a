"""
Stats panel component.

Displays cash, shares, net worth, total profit and ROI per minute.
"""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static

from trader.simulation.models import GameSnapshot, WorthTrend

# Theme colors (Rich markup)
COLOR_UP = "#44ffaa"
COLOR_DOWN = "#ff7777"
COLOR_DIM = "#666666"

LABEL_WIDTH = 18


def worth_color(trend: WorthTrend) -> str:
    """Dim when no shares are held, green ahead of the reference, red behind."""
    if trend == WorthTrend.FLAT:
        return COLOR_DIM
    return COLOR_UP if trend == WorthTrend.AHEAD else COLOR_DOWN


def format_roi(roi: float | None) -> str:
    if roi is None:
        return "n/a"
    return f"{roi:.2f}%"


def format_stats(snapshot: GameSnapshot) -> str:
    """Rich markup for the stats grid."""
    profit = snapshot.total_profit
    profit_color = COLOR_UP if snapshot.net_worth > snapshot.initial_cash else COLOR_DOWN
    w_color = worth_color(snapshot.worth_trend)

    rows = [
        ("Cash", f"{snapshot.cash:.1f}€"),
        ("Shares", f"{snapshot.shares}"),
        ("Worth", f"[{w_color}]{snapshot.net_worth:.1f}€[/{w_color}]"),
        ("Total profit", f"[{profit_color}]{profit:.1f}€[/{profit_color}]"),
        ("ROI (per minute)", format_roi(snapshot.roi_per_minute)),
    ]
    return "\n".join(f"{label:<{LABEL_WIDTH}}{value}" for label, value in rows)


class StatsPanel(Container):
    """Panel displaying the player's account."""

    DEFAULT_CSS = """
    StatsPanel {
        height: auto;
        padding: 0 1;
        background: #0a0a0a;
        border-top: solid #333333;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", id="stats-content")

    def update_display(self, snapshot: GameSnapshot) -> None:
        try:
            content = self.query_one("#stats-content", Static)
            content.update(Text.from_markup(format_stats(snapshot)))
        except Exception:
            pass
