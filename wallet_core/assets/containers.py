"""
Portable container documents for file assets.

A container is a versioned JSON document ({"version": "1.0", "type": "ft" |
"nft", ...}) carrying the asset's economic fields, metadata and enough chain
provenance (standard, token data, txid, vout, inscription id) to rebuild it.

Parsing dispatches explicitly on (version, type) through CONTAINER_SCHEMAS;
anything unregistered is rejected rather than guessed. Filename and icon are
never read from a document, they are recomputed from ticker/kind.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wallet_core.assets.filenames import asset_filename
from wallet_core.assets.icons import icon_for_asset
from wallet_core.assets.models import (
    AssetKind,
    FileAsset,
    FungibleTokenRecord,
    InscriptionRecord,
    TokenStandard,
    new_asset_id,
)
from wallet_core.core.exceptions import ContainerFormatError
from wallet_core.wallet_logging import get_logger

logger = get_logger(__name__)

CONTAINER_VERSION = "1.0"
DEFAULT_FT_CONTENT_TYPE = "application/bitcoin-ft"
DEFAULT_NFT_CONTENT_TYPE = "application/bitcoin-nft"


class BlockchainRef(BaseModel):
    """Chain provenance of the asset."""

    model_config = ConfigDict(populate_by_name=True)

    standard: TokenStandard
    token_data: Any = Field(default=None, alias="tokenData")
    txid: str | None = None
    vout: int | None = None
    inscription_id: str | None = Field(default=None, alias="inscriptionId")


class NftContent(BaseModel):
    """Optional embedded inscription content."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    data: str
    encoding: str | None = None


class _ContainerV1(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: Literal["1.0"] = CONTAINER_VERSION
    id: str | None = None
    value: Decimal | None = None
    confirmed: bool = True
    pending: bool = False
    content_type: str | None = Field(default=None, alias="contentType")
    last_modified: datetime | None = Field(default=None, alias="lastModified")
    metadata: dict[str, Any] = Field(default_factory=dict)
    blockchain: BlockchainRef


class FtContainerV1(_ContainerV1):
    type: Literal["ft"] = "ft"
    ticker: str = Field(min_length=1)
    amount: int = Field(ge=0)
    decimals: int = Field(default=0, ge=0)


class NftContainerV1(_ContainerV1):
    type: Literal["nft"] = "nft"
    name: str = Field(min_length=1)
    content: NftContent | None = None


FileContainer = Union[FtContainerV1, NftContainerV1]

CONTAINER_SCHEMAS: dict[tuple[str, str], type[_ContainerV1]] = {
    (CONTAINER_VERSION, AssetKind.FT.value): FtContainerV1,
    (CONTAINER_VERSION, AssetKind.NFT.value): NftContainerV1,
}


def to_container(asset: FileAsset) -> FileContainer:
    """Build the container for asset."""
    blockchain = BlockchainRef(
        standard=asset.standard,
        token_data=_record_to_data(asset.underlying),
        txid=asset.txid,
        vout=asset.vout,
        inscription_id=asset.inscription_id if asset.type is AssetKind.NFT else None,
    )
    common: dict[str, Any] = {
        "id": asset.id,
        "value": asset.value,
        "confirmed": asset.confirmed,
        "pending": asset.pending,
        "content_type": asset.content_type,
        "last_modified": asset.last_modified,
        "metadata": dict(asset.metadata),
        "blockchain": blockchain,
    }
    if asset.type is AssetKind.FT:
        decimals = getattr(asset.underlying, "dec", None)
        if decimals is None:
            decimals = asset.metadata.get("decimals") or 0
        return FtContainerV1(
            ticker=asset.ticker,
            amount=asset.display_amount,
            decimals=decimals,
            **common,
        )
    content = None
    if isinstance(asset.underlying, InscriptionRecord) and asset.underlying.content:
        content = NftContent(type=asset.underlying.content_type, data=asset.underlying.content)
    return NftContainerV1(name=asset.ticker, content=content, **common)


def dump_container(container: FileContainer) -> dict[str, Any]:
    """JSON-safe dict with wire (camelCase) keys."""
    return container.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_container(asset: FileAsset) -> str:
    return json.dumps(dump_container(to_container(asset)), ensure_ascii=False)


def load_container(data: str | bytes | dict[str, Any]) -> FileContainer:
    """Parse and validate a container document; dispatch on (version, type)."""
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ContainerFormatError(f"Container is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ContainerFormatError("Container must be a JSON object")

    version = data.get("version")
    kind = data.get("type")
    if version is None:
        raise ContainerFormatError("Container is missing required field 'version'")
    if kind is None:
        raise ContainerFormatError("Container is missing required field 'type'")
    schema = CONTAINER_SCHEMAS.get((str(version), str(kind)))
    if schema is None:
        logger.warning("container_version_unsupported", version=str(version), type=str(kind))
        raise ContainerFormatError(f"Unsupported container version/type: {version!r}/{kind!r}")
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.warning("container_invalid", version=str(version), type=str(kind), errors=e.error_count())
        raise ContainerFormatError(f"Invalid {kind} container: {e.error_count()} error(s): {e}") from e


def from_container(
    data: str | bytes | dict[str, Any] | FileContainer,
    id_factory: Callable[[], str] | None = None,
) -> FileAsset:
    """Rebuild a FileAsset; filename and icon are recomputed, never trusted."""
    container = data if isinstance(data, _ContainerV1) else load_container(data)
    chain = container.blockchain
    underlying = _data_to_record(chain.standard, chain.token_data)
    asset_id = container.id or (id_factory or new_asset_id)()

    if isinstance(container, FtContainerV1):
        ticker = container.ticker
        kind = AssetKind.FT
        display_amount = container.amount
        content_type = container.content_type or DEFAULT_FT_CONTENT_TYPE
    else:
        ticker = container.name
        kind = AssetKind.NFT
        display_amount = 1
        content_type = container.content_type or DEFAULT_NFT_CONTENT_TYPE

    return FileAsset(
        id=asset_id,
        filename=asset_filename(ticker, kind),
        type=kind,
        icon=icon_for_asset(ticker, kind, chain.standard, content_type),
        display_amount=display_amount,
        ticker=ticker,
        value=container.value,
        metadata=dict(container.metadata),
        underlying=underlying,
        standard=chain.standard,
        confirmed=container.confirmed,
        pending=container.pending,
        last_modified=container.last_modified,
        content_type=content_type,
    )


def parse_container(text: str | bytes) -> FileAsset:
    return from_container(text)


def _record_to_data(record: Any) -> Any:
    if isinstance(record, (FungibleTokenRecord, InscriptionRecord)):
        return record.to_dict()
    return record


def _data_to_record(standard: TokenStandard, data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    if standard is TokenStandard.BSV20:
        return FungibleTokenRecord.from_dict(data)
    if standard is TokenStandard.ORDINALS:
        return InscriptionRecord.from_dict(data)
    return data
