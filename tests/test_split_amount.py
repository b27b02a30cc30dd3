"""
Tests for the greedy primary-first split (split_amount).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from wallet_core.core.exceptions import InvalidPaymentRequest
from wallet_core.routing import split_amount

GRID = [Decimal(x) for x in ("0", "0.5", "1", "2.25", "3", "7", "10")]


def test_primary_covers_everything():
    split = split_amount(5, 10, 10)
    assert split.primary_amount == 5
    assert split.secondary_amount == 0
    assert split.shortfall == 0


def test_remainder_from_secondary():
    split = split_amount(Decimal("5"), Decimal("3"), Decimal("10"))
    assert split.primary_amount == Decimal("3")
    assert split.secondary_amount == Decimal("2")
    assert split.total == Decimal("5")


def test_primary_drawn_first_even_if_secondary_could_cover():
    """Greedy: primary is drained first regardless of secondary size."""
    split = split_amount(5, 1, 100)
    assert split.primary_amount == 1
    assert split.secondary_amount == 4


def test_insufficient_combined_reports_shortfall():
    split = split_amount(10, 3, 2)
    assert split.primary_amount == 3
    assert split.secondary_amount == 2
    assert split.shortfall == 5


def test_missing_or_negative_balances_count_as_zero():
    assert split_amount(4, 4, None).secondary_amount == 0
    split = split_amount(4, -2, 5)
    assert split.primary_amount == 0
    assert split.secondary_amount == 4


def test_split_properties_over_grid():
    """Sum equals amount whenever p + s >= amount; never exceeds either balance."""
    for amount in GRID[1:]:
        for p in GRID:
            for s in GRID:
                split = split_amount(amount, p, s)
                assert split.primary_amount <= p
                assert split.secondary_amount <= s
                assert split.primary_amount >= 0
                assert split.secondary_amount >= 0
                if p + s >= amount:
                    assert split.primary_amount + split.secondary_amount == amount
                    assert split.shortfall == 0
                else:
                    assert split.total + split.shortfall == amount


def test_planner_split_amount_delegates(planner):
    split = planner.split_amount("0.3", "0.1", "1")
    assert split.primary_amount == Decimal("0.1")
    assert split.secondary_amount == Decimal("0.2")


def test_non_positive_amount_raises(planner):
    """Zero or negative amounts never produce a (negative) draw."""
    for amount in (0, -5, "-0.1"):
        with pytest.raises(InvalidPaymentRequest, match="greater than 0"):
            split_amount(amount, 10, 10)
    with pytest.raises(InvalidPaymentRequest):
        planner.split_amount(-1, 10, 10)
