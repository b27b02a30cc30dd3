"""
Configuration management for Wallet Core.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for fee, network and classification settings.
"""

from wallet_core.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
