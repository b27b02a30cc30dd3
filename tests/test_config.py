"""
Tests for environment-driven configuration and the settings-backed factories.
"""

from __future__ import annotations

from decimal import Decimal

import base58
import pytest

import wallet_core
from wallet_core.assets import AssetTranslator, FungibleTokenRecord
from wallet_core.config import get_settings
from wallet_core.core.exceptions import ConfigurationError
from wallet_core.routing import FeeModel, FundingSource, PaymentRequest, RouteDecision, RoutePlanner

GENESIS_ADDRESS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
TESTNET_ADDRESS = base58.b58encode_check(bytes([0x6F]) + bytes(range(20))).decode()


def test_defaults():
    settings = get_settings()
    assert settings.network == "mainnet"
    assert settings.base_fee == Decimal("0.000005")
    assert settings.secondary_surcharge == Decimal("1.1")
    assert settings.nft_max_supply_threshold == 1000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WALLET_NETWORK", "Test")
    monkeypatch.setenv("ROUTER_BASE_FEE", "0.00001")
    monkeypatch.setenv("ROUTER_SECONDARY_SURCHARGE", "1.5")
    monkeypatch.setenv("NFT_MAX_SUPPLY_THRESHOLD", "10")
    settings = get_settings()
    assert settings.network == "testnet"
    assert settings.base_fee == Decimal("0.00001")
    assert settings.secondary_surcharge == Decimal("1.5")
    assert settings.nft_max_supply_threshold == 10


@pytest.mark.parametrize(
    "name,value",
    [
        ("WALLET_NETWORK", "regtest"),
        ("ROUTER_BASE_FEE", "cheap"),
        ("ROUTER_BASE_FEE", "NaN"),
        ("ROUTER_SECONDARY_SURCHARGE", "Infinity"),
        ("NFT_MAX_SUPPLY_THRESHOLD", "1.5"),
        ("NFT_MAX_SUPPLY_THRESHOLD", "-1"),
    ],
)
def test_invalid_env_raises(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError, match=name):
        get_settings()


def test_fee_model_bounds():
    with pytest.raises(ConfigurationError, match="base_fee"):
        FeeModel(base_fee=Decimal("-0.1"))
    with pytest.raises(ConfigurationError, match="secondary_surcharge"):
        FeeModel(secondary_surcharge=Decimal("0.9"))


def test_planner_from_settings_uses_configured_fees(monkeypatch):
    monkeypatch.setenv("ROUTER_BASE_FEE", "0.0001")
    monkeypatch.setenv("ROUTER_SECONDARY_SURCHARGE", "2")
    planner = RoutePlanner.from_settings()
    fees = planner.estimate_fees(RouteDecision(source=FundingSource.SECONDARY, reason="x"))
    assert fees.total == Decimal("0.0002")


def test_planner_from_settings_uses_network(monkeypatch):
    monkeypatch.setenv("WALLET_NETWORK", "testnet")
    planner = RoutePlanner.from_settings()
    ok = planner.plan_route(PaymentRequest(recipient=TESTNET_ADDRESS, amount=1, primary_balance=5))
    assert not ok.is_rejected
    mainnet = planner.plan_route(PaymentRequest(recipient=GENESIS_ADDRESS, amount=1, primary_balance=5))
    assert mainnet.is_rejected


def test_translator_from_settings_uses_threshold(monkeypatch):
    monkeypatch.setenv("NFT_MAX_SUPPLY_THRESHOLD", "10")
    translator = AssetTranslator.from_settings()
    assert translator.from_fungible_token(FungibleTokenRecord(tick="A", confirmed=1, max=10)).type.value == "nft"
    assert translator.from_fungible_token(FungibleTokenRecord(tick="A", confirmed=1, max=11)).type.value == "ft"


def test_shared_instances_are_cached():
    wallet_core.get_route_planner.cache_clear()
    wallet_core.get_asset_translator.cache_clear()
    try:
        assert wallet_core.get_route_planner() is wallet_core.get_route_planner()
        assert wallet_core.get_asset_translator() is wallet_core.get_asset_translator()
    finally:
        wallet_core.get_route_planner.cache_clear()
        wallet_core.get_asset_translator.cache_clear()
