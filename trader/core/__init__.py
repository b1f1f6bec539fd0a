"""
Core building blocks for the trading game.

Modules:
- config: Game configuration, presets and validation
- price_history: Rolling buffer of recent prices
"""

from trader.core.config import (
    COLLAPSE_CONFIG,
    DEFAULT_CONFIG,
    ENDLESS_CONFIG,
    PRESETS,
    GameConfig,
    get_preset,
)
from trader.core.price_history import PriceHistory

__all__ = [
    "COLLAPSE_CONFIG",
    "DEFAULT_CONFIG",
    "ENDLESS_CONFIG",
    "GameConfig",
    "PRESETS",
    "PriceHistory",
    "get_preset",
]
