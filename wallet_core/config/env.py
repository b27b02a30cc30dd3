"""
Environment variable loading and validation for Wallet Core.

- WALLET_NETWORK: mainnet | testnet (default: mainnet)
- ROUTER_BASE_FEE: base network fee in BSV (default: 0.000005)
- ROUTER_SECONDARY_SURCHARGE: custodial fee multiplier (default: 1.1)
- NFT_MAX_SUPPLY_THRESHOLD: max supply treated as low-supply by the NFT heuristic (default: 1000)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from wallet_core.core.exceptions import ConfigurationError

# Project root: config is wallet_core/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

NETWORK_MAINNET = "mainnet"
NETWORK_TESTNET = "testnet"

DEFAULT_BASE_FEE = Decimal("0.000005")
DEFAULT_SECONDARY_SURCHARGE = Decimal("1.1")
DEFAULT_NFT_MAX_SUPPLY_THRESHOLD = 1000


def load_wallet_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def _decimal_env(name: str, default: Decimal) -> Decimal:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"{name} must be a decimal number, got {raw!r}") from e
    if not value.is_finite():
        raise ConfigurationError(f"{name} must be finite, got {raw!r}")
    return value


def get_wallet_network() -> str:
    """
    Return WALLET_NETWORK from env: mainnet | testnet.
    Default: mainnet. "main"/"livenet" and "test" are accepted aliases.
    """
    load_wallet_env()
    raw = (os.getenv("WALLET_NETWORK") or NETWORK_MAINNET).strip().lower()
    if raw in ("mainnet", "main", "livenet"):
        return NETWORK_MAINNET
    if raw in ("testnet", "test"):
        return NETWORK_TESTNET
    raise ConfigurationError(f"WALLET_NETWORK must be mainnet or testnet, got {raw!r}")


def get_base_fee() -> Decimal:
    """Return ROUTER_BASE_FEE (BSV per transaction)."""
    load_wallet_env()
    return _decimal_env("ROUTER_BASE_FEE", DEFAULT_BASE_FEE)


def get_secondary_surcharge() -> Decimal:
    """Return ROUTER_SECONDARY_SURCHARGE (multiplier over the base fee)."""
    load_wallet_env()
    return _decimal_env("ROUTER_SECONDARY_SURCHARGE", DEFAULT_SECONDARY_SURCHARGE)


def get_nft_max_supply_threshold() -> int:
    """Return NFT_MAX_SUPPLY_THRESHOLD; tokens with max supply at or below it count as low-supply."""
    load_wallet_env()
    raw = (os.getenv("NFT_MAX_SUPPLY_THRESHOLD") or "").strip()
    if not raw:
        return DEFAULT_NFT_MAX_SUPPLY_THRESHOLD
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"NFT_MAX_SUPPLY_THRESHOLD must be an integer, got {raw!r}") from e
    if value < 0:
        raise ConfigurationError("NFT_MAX_SUPPLY_THRESHOLD must be >= 0")
    return value
