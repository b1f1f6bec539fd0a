"""
UI components for the trading dashboard.

Reusable Textual widgets for displaying the game.
"""

from trader.ui.components.chart_panel import ChartPanel
from trader.ui.components.stats_panel import StatsPanel
from trader.ui.components.trade_panel import TradePanel

__all__ = [
    "ChartPanel",
    "StatsPanel",
    "TradePanel",
]
