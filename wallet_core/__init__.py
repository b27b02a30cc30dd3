"""
Wallet Core: routing and asset translation for the BSV wallet front end.

Two stateless services consumed by the application shell: the route planner
(which balance source funds a payment, what it costs, whether it is still
valid) and the asset translator (BSV20 / Ordinals records to file assets and
portable containers). No UI, no network I/O.
"""

from __future__ import annotations

from functools import lru_cache

__version__ = "0.1.0"


@lru_cache
def get_route_planner():
    """Return the shared RoutePlanner built from current settings."""
    from wallet_core.routing.planner import RoutePlanner

    return RoutePlanner.from_settings()


@lru_cache
def get_asset_translator():
    """Return the shared AssetTranslator built from current settings."""
    from wallet_core.assets.translator import AssetTranslator

    return AssetTranslator.from_settings()
