"""Synthetic filenames for file assets."""

from __future__ import annotations

import re

from wallet_core.assets.models import AssetKind

_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9_-]")
_UNDERSCORES_RE = re.compile(r"_+")

# Used when a ticker sanitizes to nothing (e.g. "$$$")
FALLBACK_STEMS = {AssetKind.FT: "token", AssetKind.NFT: "nft"}


def sanitize_filename(name: str) -> str:
    """Replace unsafe characters with "_", collapse runs, trim edges, lower-case. Idempotent."""
    cleaned = _UNSAFE_RE.sub("_", name or "")
    cleaned = _UNDERSCORES_RE.sub("_", cleaned)
    return cleaned.strip("_").lower()


def asset_filename(ticker: str, kind: AssetKind) -> str:
    """<stem>-shares.ft for fungible holdings, <stem>.nft for unique ones."""
    kind = AssetKind(kind)
    stem = sanitize_filename(ticker) or FALLBACK_STEMS[kind]
    if kind is AssetKind.FT:
        return f"{stem}-shares.ft"
    return f"{stem}.nft"
