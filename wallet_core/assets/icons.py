"""
Display icons for file assets.

Resolution order for tickers: exact ticker match, then the extension after
the last "." (so "REPORT.PDF" gets the PDF icon), then the kind fallback.
Inscriptions resolve from their declared content type instead.
"""

from __future__ import annotations

from wallet_core.assets.models import AssetKind, TokenStandard

TICKER_ICONS: dict[str, str] = {
    # Stocks
    "AAPL": "🍎",
    "GOOGL": "🔍",
    "TSLA": "🚗",
    "MSFT": "💻",
    "AMZN": "📦",
    "META": "👥",
    "NVDA": "🖥️",
    "NFLX": "🎬",
    # Crypto
    "BTC": "₿",
    "BSV": "💎",
    "ETH": "⟠",
    # Commodities
    "GOLD": "🥇",
    "SILVER": "🥈",
    "OIL": "🛢️",
    # Categories
    "STOCK": "📈",
    "CRYPTO": "🪙",
    "COMMODITY": "🏭",
    "REAL_ESTATE": "🏠",
    "BOND": "📋",
    "DERIVATIVE": "📊",
    # File types as assets
    "JPEG": "🖼️",
    "PNG": "🖼️",
    "GIF": "🖼️",
    "MP4": "🎬",
    "MP3": "🎵",
    "PDF": "📄",
    "DOC": "📝",
    "ZIP": "📦",
    "JSON": "⚙️",
    "HTML": "🌐",
    "CSS": "🎨",
    "JS": "⚡",
    "PY": "🐍",
    "GO": "🐹",
    "RUST": "🦀",
    # Generic
    "NFT": "🎨",
    "TOKEN": "🪙",
    "SHARE": "📈",
    "COIN": "🪙",
}

KIND_ICONS: dict[AssetKind, str] = {
    AssetKind.FT: "🪙",
    AssetKind.NFT: "🎨",
}

# (match, icon); prefixes are checked with startswith, the rest with substring
CONTENT_TYPE_PREFIX_ICONS = (
    ("image/", "🖼️"),
    ("video/", "🎬"),
    ("audio/", "🎵"),
)
CONTENT_TYPE_SUBSTRING_ICONS = (
    ("pdf", "📄"),
    ("json", "⚙️"),
    ("html", "🌐"),
)
DEFAULT_ART_ICON = "🎨"


def resolve_icon(ticker: str, kind: AssetKind) -> str:
    upper = (ticker or "").upper()
    if upper in TICKER_ICONS:
        return TICKER_ICONS[upper]
    if "." in upper:
        ext = upper.rsplit(".", 1)[1]
        if ext in TICKER_ICONS:
            return TICKER_ICONS[ext]
    return KIND_ICONS.get(AssetKind(kind), "🪙")


def icon_for_content_type(content_type: str | None) -> str:
    ct = (content_type or "").strip().lower()
    for prefix, icon in CONTENT_TYPE_PREFIX_ICONS:
        if ct.startswith(prefix):
            return icon
    for needle, icon in CONTENT_TYPE_SUBSTRING_ICONS:
        if needle in ct:
            return icon
    return DEFAULT_ART_ICON


def icon_for_asset(
    ticker: str,
    kind: AssetKind,
    standard: TokenStandard,
    content_type: str | None = None,
) -> str:
    """Icon for any asset: inscriptions by content type, everything else by ticker."""
    if standard is TokenStandard.ORDINALS:
        return icon_for_content_type(content_type)
    return resolve_icon(ticker, kind)
