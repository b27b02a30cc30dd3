"""
Data models for asset translation.

Raw token records as delivered by wallet providers (BSV20 fungible tokens,
Ordinals inscriptions) and the normalized FileAsset view built from them.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class AssetKind(str, Enum):
    FT = "ft"
    NFT = "nft"


class TokenStandard(str, Enum):
    """Closed set of token standards a FileAsset can originate from."""

    BSV20 = "bsv20"
    ORDINALS = "ordinals"
    UNKNOWN = "unknown"


def _int_or_none(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class FungibleTokenRecord:
    """
    One BSV20 holding as reported by the wallet provider.

    confirmed / pending are raw unit counts (no decimal scaling applied).
    """

    tick: str | None = None
    sym: str | None = None
    id: str | None = None
    confirmed: int = 0
    pending: int = 0
    dec: int = 0
    max: int | None = None
    collection: str | None = None
    metadata: dict[str, Any] | None = None
    txid: str | None = None
    vout: int | None = None

    @property
    def ticker(self) -> str:
        return self.tick or self.sym or "TOKEN"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FungibleTokenRecord":
        """Accept the provider shape ({"all": {"confirmed", "pending"}}) or flat counts."""
        balances = data.get("all") or {}
        return cls(
            tick=data.get("tick"),
            sym=data.get("sym"),
            id=data.get("id"),
            confirmed=int(balances.get("confirmed", data.get("confirmed")) or 0),
            pending=int(balances.get("pending", data.get("pending")) or 0),
            dec=int(data.get("dec") or 0),
            max=_int_or_none(data.get("max")),
            collection=data.get("collection"),
            metadata=data.get("metadata"),
            txid=data.get("txid"),
            vout=_int_or_none(data.get("vout")),
        )

    def to_dict(self) -> dict[str, Any]:
        return drop_none(
            {
                "tick": self.tick,
                "sym": self.sym,
                "id": self.id,
                "all": {"confirmed": self.confirmed, "pending": self.pending},
                "dec": self.dec,
                "max": self.max,
                "collection": self.collection,
                "metadata": self.metadata,
                "txid": self.txid,
                "vout": self.vout,
            }
        )


@dataclass(frozen=True)
class InscriptionRecord:
    """One Ordinals inscription as reported by the wallet provider."""

    id: str | None = None
    content_type: str = ""
    inscription_id: str | None = None
    metadata: dict[str, Any] | None = None
    content: str | None = None
    satoshi: int | None = None
    address: str | None = None
    txid: str | None = None
    vout: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InscriptionRecord":
        return cls(
            id=data.get("id"),
            content_type=data.get("contentType") or data.get("content_type") or "",
            inscription_id=data.get("inscriptionId") or data.get("inscription_id"),
            metadata=data.get("metadata"),
            content=data.get("content"),
            satoshi=_int_or_none(data.get("satoshi")),
            address=data.get("address"),
            txid=data.get("txid"),
            vout=_int_or_none(data.get("vout")),
        )

    def to_dict(self) -> dict[str, Any]:
        return drop_none(
            {
                "id": self.id,
                "contentType": self.content_type,
                "inscriptionId": self.inscription_id,
                "metadata": self.metadata,
                "content": self.content,
                "satoshi": self.satoshi,
                "address": self.address,
                "txid": self.txid,
                "vout": self.vout,
            }
        )


@dataclass(frozen=True)
class FileAsset:
    """
    Display-ready, file-like view of one on-chain holding.

    filename and icon are derived from ticker/kind (and content type for
    inscriptions). underlying is the source record, held by reference and
    ignored for equality. Recomputed per observation, never cached here.
    """

    id: str
    filename: str
    type: AssetKind
    icon: str
    display_amount: int
    ticker: str
    value: Decimal | None = None
    """Estimated USD value."""
    metadata: dict[str, Any] = field(default_factory=dict)
    underlying: Any = field(default=None, compare=False, repr=False)
    standard: TokenStandard = TokenStandard.UNKNOWN
    confirmed: bool = True
    pending: bool = False
    last_modified: datetime | None = None
    content_type: str | None = None

    def __post_init__(self) -> None:
        if self.type is AssetKind.NFT and self.display_amount != 1:
            raise ValueError(f"nft assets must have display_amount 1, got {self.display_amount}")

    @property
    def txid(self) -> str | None:
        return getattr(self.underlying, "txid", None) or _get(self.underlying, "txid")

    @property
    def vout(self) -> int | None:
        found = getattr(self.underlying, "vout", None)
        return found if found is not None else _get(self.underlying, "vout")

    @property
    def inscription_id(self) -> str | None:
        return getattr(self.underlying, "inscription_id", None) or _get(self.underlying, "inscriptionId")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "filename": self.filename,
            "type": self.type.value,
            "icon": self.icon,
            "displayAmount": self.display_amount,
            "ticker": self.ticker,
            "value": str(self.value) if self.value is not None else None,
            "metadata": self.metadata,
            "standard": self.standard.value,
            "confirmed": self.confirmed,
            "pending": self.pending,
            "lastModified": self.last_modified.isoformat() if self.last_modified else None,
            "contentType": self.content_type,
        }


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def new_asset_id() -> str:
    """Fresh id for assets whose source record carries none: file-<ms>-<9 hex>."""
    return f"file-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"
