"""
Game configuration and presets.

Centralizes the simulation constants (starting cash, seed price, tick rate,
random-walk parameters, spread) so every component reads them from one place.
"""

from dataclasses import dataclass, replace


@dataclass
class GameConfig:
    """Configuration for one trading session.

    Fee values are expressed as decimals (e.g., 0.01 = 1%).

    The two shipped presets differ on the insolvency policy:
    - collapse: the game ends the first time the price reaches zero
    - endless: prices keep walking (and may go negative), the game never ends
    """

    # =========================================================
    # Account
    # =========================================================

    # Cash the player starts with, also the baseline for total profit and ROI
    initial_cash: float = 1000.0

    # =========================================================
    # Price Walk
    # =========================================================

    # First price recorded by the seeding tick
    seed_price: float = 100.0

    # Normal increment added to the price on every tick
    mean_step: float = 0.0
    stddev: float = 1.0

    # Random seed (None = fresh OS entropy every session)
    seed: int | None = None

    # =========================================================
    # Clock & History
    # =========================================================

    # Milliseconds between ticks
    tick_interval_ms: int = 200

    # Number of recent prices kept for the chart
    history_capacity: int = 100

    # =========================================================
    # Spread
    # =========================================================

    # Quoted buy price = mid * (1 + buy_fee)
    buy_fee: float = 0.01

    # Quoted sell price = mid * (1 - sell_fee)
    sell_fee: float = 0.01

    # =========================================================
    # Game Rules
    # =========================================================

    # End the session (and wipe held shares) when the price drops to <= 0
    enforce_insolvency: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.initial_cash <= 0:
            raise ValueError("initial_cash must be positive")
        if self.seed_price <= 0:
            raise ValueError("seed_price must be positive")
        if self.stddev < 0:
            raise ValueError("stddev must not be negative")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive")
        if self.history_capacity < 1:
            raise ValueError("history_capacity must be at least 1")
        if not 0 <= self.buy_fee < 1:
            raise ValueError("buy_fee must be between 0 and 1")
        if not 0 <= self.sell_fee < 1:
            raise ValueError("sell_fee must be between 0 and 1")

    @property
    def tick_interval_seconds(self) -> float:
        """Tick interval in seconds (for timers)."""
        return self.tick_interval_ms / 1000.0

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with the given fields replaced (None values are ignored)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


# Game ends when the stock collapses
COLLAPSE_CONFIG = GameConfig()

# Wider walk, no game over
ENDLESS_CONFIG = GameConfig(stddev=3.0, enforce_insolvency=False)

# Default configuration instance
DEFAULT_CONFIG = COLLAPSE_CONFIG

PRESETS: dict[str, GameConfig] = {
    "collapse": COLLAPSE_CONFIG,
    "endless": ENDLESS_CONFIG,
}


def get_preset(name: str) -> GameConfig:
    """Look up a named preset."""
    if name not in PRESETS:
        available = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown game mode '{name}'. Available: {available}")
    return PRESETS[name]
