#!/usr/bin/env python3
"""
Unit tests for the random-walk price generator.

Run with:
    python -m pytest tests/test_price_generator.py -v
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

from trader.simulation.price_generator import PriceGenerator


class TestPriceGenerator:
    """Tests for PriceGenerator."""

    def test_same_seed_same_walk(self):
        """Test a fixed seed reproduces the walk."""
        a = PriceGenerator(seed=42)
        b = PriceGenerator(seed=42)
        price_a = price_b = 100.0
        for _ in range(20):
            price_a = a.next(price_a)
            price_b = b.next(price_b)
        assert price_a == price_b

    def test_unseeded_generators_differ(self):
        """Test each unseeded generator draws fresh entropy."""
        walk_a = [PriceGenerator().next(100.0) for _ in range(5)]
        walk_b = [PriceGenerator().next(100.0) for _ in range(5)]
        assert walk_a != walk_b

    def test_unseeded_sessions_differ(self):
        """Test two default sessions produce different price walks."""
        from trader.core.config import GameConfig
        from trader.simulation.engine import SimulationEngine

        sessions = [SimulationEngine(GameConfig(enforce_insolvency=False)) for _ in range(2)]
        for engine in sessions:
            for _ in range(10):
                engine.advance()
        assert sessions[0].price_series() != sessions[1].price_series()

    def test_zero_stddev_is_deterministic(self):
        """Test stddev 0 adds exactly the mean."""
        generator = PriceGenerator(mean_step=0.5, stddev=0.0)
        assert generator.next(100.0) == pytest.approx(100.5)

    def test_call_overrides(self):
        """Test per-call mean/stddev override the configured ones."""
        generator = PriceGenerator(mean_step=0.0, stddev=5.0)
        assert generator.next(10.0, mean_step=-3.0, stddev=0.0) == pytest.approx(7.0)

    def test_no_clamping(self):
        """Test prices are free to go below zero."""
        generator = PriceGenerator(mean_step=-10.0, stddev=0.0)
        assert generator.next(1.0) == pytest.approx(-9.0)

    def test_increments_centered_on_mean(self):
        """Test sample mean of many steps is near zero."""
        generator = PriceGenerator(stddev=1.0, seed=7)
        steps = [generator.next(0.0) for _ in range(5000)]
        assert abs(sum(steps) / len(steps)) < 0.1

    def test_returns_float(self):
        """Test the result is a plain float, not a numpy scalar."""
        assert type(PriceGenerator(seed=1).next(100.0)) is float

    def test_negative_stddev_rejected(self):
        """Test negative stddev raises."""
        with pytest.raises(ValueError):
            PriceGenerator(stddev=-1.0)
