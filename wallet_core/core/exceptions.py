"""
Application-level exceptions.

Input validation failures and format errors are raised; insufficient balance
is an expected business outcome and is reported as a ValidationResult instead.
"""

from __future__ import annotations


class WalletCoreError(Exception):
    """Base class for all Wallet Core errors."""

    code = "wallet_core_error"

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidPaymentRequest(WalletCoreError, ValueError):
    """Non-positive amount, empty recipient or otherwise malformed request."""

    code = "invalid_payment_request"


class ContainerFormatError(WalletCoreError, ValueError):
    """Container document is malformed, incomplete or has an unknown version/type."""

    code = "container_format_error"


class UnsupportedStandardError(WalletCoreError):
    """Asset standard has no transfer mapping."""

    code = "unsupported_standard"

    def __init__(self, standard: str):
        super().__init__(f"Unsupported standard: {standard}")
        self.standard = standard


class ConfigurationError(WalletCoreError):
    """Environment or constructor configuration is invalid."""

    code = "configuration_error"
