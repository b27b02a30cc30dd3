"""
Application settings.

Typed, immutable view over the environment getters in config.env. Cached;
call get_settings.cache_clear() after changing the environment (tests do).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from wallet_core.config.env import (
    get_base_fee,
    get_nft_max_supply_threshold,
    get_secondary_surcharge,
    get_wallet_network,
)


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for routing and asset translation."""

    network: str
    """Address-validation network: mainnet | testnet."""
    base_fee: Decimal
    """Fee charged for a primary (native) funded payment, in BSV."""
    secondary_surcharge: Decimal
    """Multiplier applied to base_fee for custodial funded payments."""
    nft_max_supply_threshold: int
    """Declared max supply at or below this marks a single-unit BSV20 holding as NFT-like."""


@lru_cache
def get_settings() -> Settings:
    """Return the current application settings."""
    return Settings(
        network=get_wallet_network(),
        base_fee=get_base_fee(),
        secondary_surcharge=get_secondary_surcharge(),
        nft_max_supply_threshold=get_nft_max_supply_threshold(),
    )
