"""
NFT-vs-fungible classification for BSV20 holdings.

BSV20 has no protocol-level NFT flag, so single-unit holdings are judged by
supporting signals. A fungible token someone happens to hold exactly one unit
of can be misclassified; callers that know better inject their own policy.
"""

from __future__ import annotations

from typing import Protocol

from wallet_core.assets.models import FungibleTokenRecord
from wallet_core.config.env import DEFAULT_NFT_MAX_SUPPLY_THRESHOLD


class NftClassificationPolicy(Protocol):
    def is_nft_like(self, token: FungibleTokenRecord) -> bool: ...


class HeuristicNftPolicy:
    """
    NFT-like iff exactly one confirmed unit AND at least one of:
    a unique id, collection/extra metadata, or max supply <= threshold.
    """

    def __init__(self, max_supply_threshold: int = DEFAULT_NFT_MAX_SUPPLY_THRESHOLD):
        self.max_supply_threshold = max_supply_threshold

    def is_nft_like(self, token: FungibleTokenRecord) -> bool:
        if token.confirmed != 1:
            return False
        has_unique_id = bool(token.id)
        has_metadata = bool(token.collection or token.metadata)
        is_low_supply = token.max is not None and token.max <= self.max_supply_threshold
        return has_unique_id or has_metadata or is_low_supply
