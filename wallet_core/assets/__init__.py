"""
Asset translation: BSV20 / Ordinals records to file assets and portable containers.
"""

from wallet_core.assets.classifier import HeuristicNftPolicy, NftClassificationPolicy
from wallet_core.assets.containers import (
    CONTAINER_VERSION,
    FileContainer,
    FtContainerV1,
    NftContainerV1,
    from_container,
    parse_container,
    serialize_container,
    to_container,
)
from wallet_core.assets.filenames import asset_filename, sanitize_filename
from wallet_core.assets.icons import icon_for_content_type, resolve_icon
from wallet_core.assets.models import (
    AssetKind,
    FileAsset,
    FungibleTokenRecord,
    InscriptionRecord,
    TokenStandard,
)
from wallet_core.assets.transfers import TransferIntent, to_transfer_intent
from wallet_core.assets.translator import AssetTranslator
from wallet_core.assets.valuation import (
    InscriptionValuer,
    PlaceholderInscriptionValuer,
    PricingProvider,
    StaticPriceTable,
)

__all__ = [
    "CONTAINER_VERSION",
    "AssetKind",
    "AssetTranslator",
    "FileAsset",
    "FileContainer",
    "FtContainerV1",
    "FungibleTokenRecord",
    "HeuristicNftPolicy",
    "InscriptionRecord",
    "InscriptionValuer",
    "NftClassificationPolicy",
    "NftContainerV1",
    "PlaceholderInscriptionValuer",
    "PricingProvider",
    "StaticPriceTable",
    "TokenStandard",
    "TransferIntent",
    "asset_filename",
    "from_container",
    "icon_for_content_type",
    "parse_container",
    "resolve_icon",
    "sanitize_filename",
    "serialize_container",
    "to_container",
    "to_transfer_intent",
]
