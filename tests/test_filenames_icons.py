"""
Tests for filename sanitizing and icon resolution.
"""

from __future__ import annotations

from wallet_core.assets import AssetKind, asset_filename, icon_for_content_type, resolve_icon, sanitize_filename

SAMPLES = [
    "",
    "GOLD",
    "Hello World!",
    "__A__B__",
    "a--b__c",
    "$$$",
    "ñandú 🚀 rocket",
    "-_edge_-",
    "report.final.PDF",
    "MiXeD_Case-99",
    "___",
    "x" * 200,
]


def test_sanitize_examples():
    assert sanitize_filename("Hello World!") == "hello_world"
    assert sanitize_filename("__A__B__") == "a_b"
    assert sanitize_filename("a--b__c") == "a--b_c"
    assert sanitize_filename("$$$") == ""
    assert sanitize_filename("report.final.PDF") == "report_final_pdf"


def test_sanitize_is_idempotent():
    for sample in SAMPLES:
        once = sanitize_filename(sample)
        assert sanitize_filename(once) == once, sample


def test_asset_filename_patterns():
    assert asset_filename("GOLD", AssetKind.FT) == "gold-shares.ft"
    assert asset_filename("RARE", AssetKind.NFT) == "rare.nft"
    assert asset_filename("$$$", AssetKind.FT) == "token-shares.ft"
    assert asset_filename("$$$", AssetKind.NFT) == "nft.nft"
    assert asset_filename("Cool Cat", "nft") == "cool_cat.nft"


def test_resolve_icon_exact_ticker():
    assert resolve_icon("BTC", AssetKind.FT) == "₿"
    assert resolve_icon("aapl", AssetKind.FT) == "🍎"
    assert resolve_icon("GOLD", AssetKind.NFT) == "🥇"


def test_resolve_icon_extension():
    """Ticker containing a dot falls back to the extension table."""
    assert resolve_icon("photo.png", AssetKind.NFT) == "🖼️"
    assert resolve_icon("archive.tar.zip", AssetKind.FT) == "📦"
    assert resolve_icon("script.py", AssetKind.FT) == "🐍"


def test_resolve_icon_exact_beats_extension():
    """A ticker that is itself a table key never consults the extension path."""
    assert resolve_icon("GO", AssetKind.FT) == "🐹"
    assert resolve_icon("notes.GO", AssetKind.FT) == "🐹"
    assert resolve_icon("PDF", AssetKind.NFT) == "📄"


def test_resolve_icon_kind_fallback():
    assert resolve_icon("UNLISTED", AssetKind.FT) == "🪙"
    assert resolve_icon("UNLISTED", AssetKind.NFT) == "🎨"
    assert resolve_icon("file.unknownext", AssetKind.NFT) == "🎨"


def test_icon_for_content_type():
    assert icon_for_content_type("image/svg+xml") == "🖼️"
    assert icon_for_content_type("IMAGE/PNG") == "🖼️"
    assert icon_for_content_type("application/pdf") == "📄"
    assert icon_for_content_type(None) == "🎨"
