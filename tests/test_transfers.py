"""
Tests for transfer intents (assets.transfers).
"""

from __future__ import annotations

import pytest

from wallet_core.assets import (
    AssetKind,
    FileAsset,
    FungibleTokenRecord,
    InscriptionRecord,
    TokenStandard,
    to_transfer_intent,
)
from wallet_core.core.exceptions import InvalidPaymentRequest, UnsupportedStandardError

RECIPIENT = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"


def test_bsv20_intent_defaults_to_display_amount(translator):
    token = FungibleTokenRecord(tick="GOLD", confirmed=3)
    asset = translator.from_fungible_token(token)
    intent = to_transfer_intent(asset, RECIPIENT)
    assert intent.kind == "bsv20_transfer"
    assert intent.token is token
    assert intent.amount == 3
    assert intent.to_dict() == {"type": "bsv20_transfer", "recipient": RECIPIENT, "token": token, "amount": 3}


def test_bsv20_intent_explicit_amount(translator):
    asset = translator.from_fungible_token(FungibleTokenRecord(tick="GOLD", confirmed=3))
    assert translator.to_transfer_intent(asset, RECIPIENT, amount=2).amount == 2


def test_bsv20_intent_zero_holding_moves_one(translator):
    asset = translator.from_fungible_token(FungibleTokenRecord(tick="GOLD", confirmed=0, pending=4))
    assert to_transfer_intent(asset, RECIPIENT).amount == 1


def test_ordinals_intent(translator):
    record = InscriptionRecord(id="ord-1", content_type="image/png", inscription_id="ab" * 32 + "i0")
    asset = translator.from_inscription(record)
    intent = to_transfer_intent(asset, "  alice@example.com ")
    assert intent.kind == "ordinals_transfer"
    assert intent.recipient == "alice@example.com"
    assert intent.token is record
    assert intent.amount is None
    assert intent.to_dict() == {"type": "ordinals_transfer", "recipient": "alice@example.com", "inscription": record}


def test_unknown_standard_fails_fast():
    asset = FileAsset(id="x", filename="x.nft", type=AssetKind.NFT, icon="🎨", display_amount=1, ticker="X")
    assert asset.standard is TokenStandard.UNKNOWN
    with pytest.raises(UnsupportedStandardError, match="Unsupported standard: unknown") as exc:
        to_transfer_intent(asset, RECIPIENT)
    assert exc.value.standard == "unknown"


def test_invalid_recipient_or_amount(translator):
    asset = translator.from_fungible_token(FungibleTokenRecord(tick="GOLD", confirmed=3))
    with pytest.raises(InvalidPaymentRequest, match="non-empty"):
        to_transfer_intent(asset, "   ")
    with pytest.raises(InvalidPaymentRequest, match="greater than 0"):
        to_transfer_intent(asset, RECIPIENT, amount=0)
