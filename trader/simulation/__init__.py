"""
Trading Game Simulation

Random-walk price, rolling history, one-instrument portfolio and the engine
that ticks them together. Everything is in memory, one session per process.
"""

from trader.simulation.engine import SimulationEngine, compute_roi_per_minute
from trader.simulation.game_clock import GameClock
from trader.simulation.models import GameSnapshot, Quote, Trade, TradeSide, WorthTrend
from trader.simulation.portfolio import Portfolio, TradeResult
from trader.simulation.price_generator import PriceGenerator

__all__ = [
    "GameClock",
    "GameSnapshot",
    "Portfolio",
    "PriceGenerator",
    "Quote",
    "SimulationEngine",
    "Trade",
    "TradeResult",
    "TradeSide",
    "WorthTrend",
    "compute_roi_per_minute",
]
