"""
Pytest fixtures for Wallet Core tests.

Isolates configuration from the host environment and provides a planner and a
translator with deterministic collaborators.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timezone
from decimal import Decimal

import pytest

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

_ENV_VARS = (
    "WALLET_NETWORK",
    "ROUTER_BASE_FEE",
    "ROUTER_SECONDARY_SURCHARGE",
    "NFT_MAX_SUPPLY_THRESHOLD",
)


class FixedValuer:
    """Inscription valuer returning a constant."""

    def __init__(self, value: str = "250.00"):
        self.value = Decimal(value)
        self.calls = 0

    def value_of(self, record):
        self.calls += 1
        return self.value


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Unset wallet env vars and reset the settings cache around each test."""
    from wallet_core.config import get_settings

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def planner():
    """RoutePlanner with default fees and the real mainnet address validator."""
    from wallet_core.routing import RoutePlanner

    return RoutePlanner()


@pytest.fixture
def fixed_valuer():
    return FixedValuer()


@pytest.fixture
def translator(fixed_valuer):
    """AssetTranslator with demo prices, constant inscription value, fixed clock and ids."""
    from wallet_core.assets import AssetTranslator, StaticPriceTable

    counter = itertools.count(1)
    return AssetTranslator(
        pricing=StaticPriceTable(),
        inscription_valuer=fixed_valuer,
        clock=lambda: FIXED_NOW,
        id_factory=lambda: f"file-test-{next(counter)}",
    )
