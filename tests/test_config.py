#!/usr/bin/env python3
"""
Unit tests for game configuration.

Run with:
    python -m pytest tests/test_config.py -v
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

from trader.core.config import (
    COLLAPSE_CONFIG,
    DEFAULT_CONFIG,
    ENDLESS_CONFIG,
    GameConfig,
    get_preset,
)


class TestGameConfig:
    """Tests for GameConfig."""

    def test_defaults(self):
        """Test defaults match the classic game."""
        config = GameConfig()
        assert config.initial_cash == 1000.0
        assert config.seed_price == 100.0
        assert config.tick_interval_ms == 200
        assert config.tick_interval_seconds == 0.2
        assert config.history_capacity == 100
        assert config.buy_fee == 0.01
        assert config.sell_fee == 0.01
        assert config.enforce_insolvency

    @pytest.mark.parametrize(
        "field,value",
        [
            ("initial_cash", 0),
            ("seed_price", -1),
            ("stddev", -0.5),
            ("tick_interval_ms", 0),
            ("history_capacity", 0),
            ("buy_fee", 1.5),
            ("sell_fee", -0.1),
        ],
    )
    def test_validation(self, field, value):
        """Test invalid values raise ValueError."""
        with pytest.raises(ValueError):
            GameConfig(**{field: value})

    def test_with_overrides_skips_none(self):
        """Test None overrides keep the preset value."""
        config = ENDLESS_CONFIG.with_overrides(initial_cash=5000, seed=None, stddev=None)
        assert config.initial_cash == 5000
        assert config.stddev == ENDLESS_CONFIG.stddev
        assert not config.enforce_insolvency
        assert ENDLESS_CONFIG.initial_cash == 1000.0

    def test_with_overrides_validates(self):
        """Test overrides go through validation."""
        with pytest.raises(ValueError):
            DEFAULT_CONFIG.with_overrides(initial_cash=-1)


class TestPresets:
    """Tests for named presets."""

    def test_collapse_is_default(self):
        assert get_preset("collapse") is COLLAPSE_CONFIG
        assert DEFAULT_CONFIG is COLLAPSE_CONFIG

    def test_endless_has_wider_walk(self):
        """Test the endless preset never ends and walks wider."""
        endless = get_preset("endless")
        assert not endless.enforce_insolvency
        assert endless.stddev > COLLAPSE_CONFIG.stddev

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            get_preset("hardcore")
