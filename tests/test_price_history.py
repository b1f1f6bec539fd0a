#!/usr/bin/env python3
"""
Unit tests for the rolling price history.

Run with:
    python -m pytest tests/test_price_history.py -v
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

from trader.core.price_history import PriceHistory


class TestPriceHistory:
    """Tests for PriceHistory."""

    def test_empty_history(self):
        """Test a new history has no latest price."""
        history = PriceHistory(capacity=5)
        assert len(history) == 0
        assert history.latest() is None
        assert history.as_sequence() == []

    def test_push_and_latest(self):
        """Test latest returns the most recent push."""
        history = PriceHistory(capacity=5)
        history.push(100.0)
        history.push(101.5)
        assert history.latest() == 101.5
        assert len(history) == 2

    def test_evicts_oldest(self):
        """Test the oldest prices drop out past capacity."""
        history = PriceHistory(capacity=3)
        for price in [1.0, 2.0, 3.0, 4.0, 5.0]:
            history.push(price)
        assert len(history) == 3
        assert history.values() == [3.0, 4.0, 5.0]

    def test_length_never_exceeds_capacity(self):
        """Test length stays bounded and fills exactly to capacity."""
        history = PriceHistory(capacity=100)
        for i in range(250):
            history.push(float(i))
            assert len(history) <= 100
            if i + 1 >= 100:
                assert len(history) == 100

    def test_sequence_indexed_from_oldest(self):
        """Test as_sequence indexes oldest = 0 after eviction."""
        history = PriceHistory(capacity=2)
        for price in [10.0, 20.0, 30.0]:
            history.push(price)
        assert history.as_sequence() == [(0, 20.0), (1, 30.0)]

    def test_default_capacity(self):
        """Test default capacity is 100."""
        assert PriceHistory().capacity == 100

    def test_invalid_capacity(self):
        """Test capacity below 1 is rejected."""
        with pytest.raises(ValueError):
            PriceHistory(capacity=0)
