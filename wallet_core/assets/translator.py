"""
Asset translator: BSV20 tokens and Ordinals inscriptions to file assets.

Every holding becomes a FileAsset with a synthetic filename
(<ticker>-shares.ft or <ticker>.nft), an icon, a display amount and an
estimated USD value. Single-unit BSV20 holdings go through a replaceable
NFT classification policy. Prices come from injected providers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable

from wallet_core.assets import containers
from wallet_core.assets.classifier import HeuristicNftPolicy, NftClassificationPolicy
from wallet_core.assets.filenames import asset_filename
from wallet_core.assets.icons import icon_for_asset
from wallet_core.assets.models import (
    AssetKind,
    FileAsset,
    FungibleTokenRecord,
    InscriptionRecord,
    TokenStandard,
    drop_none,
    new_asset_id,
)
from wallet_core.assets.transfers import TransferIntent, to_transfer_intent
from wallet_core.assets.valuation import (
    InscriptionValuer,
    PlaceholderInscriptionValuer,
    PricingProvider,
    StaticPriceTable,
)
from wallet_core.config import get_settings
from wallet_core.wallet_logging import get_logger

logger = get_logger(__name__)

CONTENT_TYPE_BSV20_FT = "application/bsv20-ft"
CONTENT_TYPE_BSV20_NFT = "application/bsv20-nft"
CONTENT_TYPE_ORDINALS = "application/ordinals"
INSCRIPTION_NAME_PREFIX_LEN = 8


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AssetTranslator:
    """Stateless apart from its injected collaborators; safe to share."""

    def __init__(
        self,
        pricing: PricingProvider | None = None,
        inscription_valuer: InscriptionValuer | None = None,
        nft_policy: NftClassificationPolicy | None = None,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        self.pricing = pricing or StaticPriceTable()
        self.inscription_valuer = inscription_valuer or PlaceholderInscriptionValuer()
        self.nft_policy = nft_policy or HeuristicNftPolicy()
        self.clock = clock or _utcnow
        self.id_factory = id_factory or new_asset_id

    @classmethod
    def from_settings(cls, **kwargs: Any) -> "AssetTranslator":
        kwargs.setdefault(
            "nft_policy",
            HeuristicNftPolicy(max_supply_threshold=get_settings().nft_max_supply_threshold),
        )
        return cls(**kwargs)

    def from_fungible_token(self, token: FungibleTokenRecord | dict[str, Any]) -> FileAsset:
        if isinstance(token, dict):
            token = FungibleTokenRecord.from_dict(token)
        ticker = token.ticker
        unit_price = self.pricing.price_of(ticker)
        is_nft = self.nft_policy.is_nft_like(token)
        logger.debug("bsv20_classified", ticker=ticker, is_nft=is_nft, confirmed=token.confirmed)

        if is_nft:
            kind = AssetKind.NFT
            display_amount = 1
            value = unit_price
            metadata = drop_none(
                {
                    "name": token.tick or token.sym,
                    "description": "BSV20 NFT Token",
                    "collection": token.collection,
                }
            )
            content_type = CONTENT_TYPE_BSV20_NFT
        else:
            kind = AssetKind.FT
            display_amount = token.confirmed
            value = unit_price * Decimal(token.confirmed)
            metadata = drop_none(
                {
                    "name": f"{ticker} Shares",
                    "description": "Fungible BSV20 tokens",
                    "decimals": token.dec,
                    "totalSupply": token.max,
                }
            )
            content_type = CONTENT_TYPE_BSV20_FT

        return FileAsset(
            id=token.id or self.id_factory(),
            filename=asset_filename(ticker, kind),
            type=kind,
            icon=icon_for_asset(ticker, kind, TokenStandard.BSV20),
            display_amount=display_amount,
            ticker=ticker,
            value=value,
            metadata=metadata,
            underlying=token,
            standard=TokenStandard.BSV20,
            confirmed=token.confirmed > 0,
            pending=token.pending > 0,
            last_modified=self.clock(),
            content_type=content_type,
        )

    def from_inscription(self, record: InscriptionRecord | dict[str, Any]) -> FileAsset:
        if isinstance(record, dict):
            record = InscriptionRecord.from_dict(record)
        name = inscription_name(record)
        content_type = record.content_type or CONTENT_TYPE_ORDINALS
        metadata = drop_none(
            {
                "name": name,
                "description": "Bitcoin Ordinals Inscription",
                "contentType": record.content_type or None,
                "inscriptionId": record.inscription_id,
            }
        )
        metadata.update(record.metadata or {})

        return FileAsset(
            id=record.id or record.inscription_id or self.id_factory(),
            filename=asset_filename(name, AssetKind.NFT),
            type=AssetKind.NFT,
            icon=icon_for_asset(name, AssetKind.NFT, TokenStandard.ORDINALS, content_type),
            display_amount=1,
            ticker=name,
            value=self.inscription_valuer.value_of(record),
            metadata=metadata,
            underlying=record,
            standard=TokenStandard.ORDINALS,
            confirmed=True,
            pending=False,
            last_modified=self.clock(),
            content_type=content_type,
        )

    def to_container(self, asset: FileAsset) -> containers.FileContainer:
        return containers.to_container(asset)

    def from_container(self, data: str | bytes | dict[str, Any] | containers.FileContainer) -> FileAsset:
        return containers.from_container(data, id_factory=self.id_factory)

    def serialize_container(self, asset: FileAsset) -> str:
        return containers.serialize_container(asset)

    def parse_container(self, text: str | bytes) -> FileAsset:
        return self.from_container(text)

    def to_transfer_intent(self, asset: FileAsset, recipient: str, amount: int | None = None) -> TransferIntent:
        return to_transfer_intent(asset, recipient, amount)


def inscription_name(record: InscriptionRecord) -> str:
    """Metadata name, else Inscription-<first 8 of inscription id>, else Ordinal-<id>."""
    name = (record.metadata or {}).get("name")
    if name:
        return str(name)
    if record.inscription_id:
        return f"Inscription-{record.inscription_id[:INSCRIPTION_NAME_PREFIX_LEN]}"
    return f"Ordinal-{record.id or 'Unknown'}"
