"""
Recipient classification for the route planner.

A recipient is exactly one of: custodial handle ($name), paymail
(user@domain.tld), native chain address (Base58Check P2PKH/P2SH), or
unrecognized. Checks run in that order; the chain-address check is an
injected predicate so the shell can supply its own validator.
"""

from __future__ import annotations

import re
from typing import Callable

import base58

from wallet_core.config.env import NETWORK_MAINNET, NETWORK_TESTNET
from wallet_core.routing.models import RecipientKind

AddressValidator = Callable[[str], bool]

CUSTODIAL_HANDLE_RE = re.compile(r"^\$[A-Za-z0-9_]+$")
PAYMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

# Version bytes for P2PKH and P2SH per network
ADDRESS_VERSIONS = {
    NETWORK_MAINNET: frozenset({0x00, 0x05}),
    NETWORK_TESTNET: frozenset({0x6F, 0xC4}),
}
# version(1) + hash160(20); the 4-byte checksum is stripped by b58decode_check
ADDRESS_PAYLOAD_LEN = 21


def is_custodial_handle(address: str) -> bool:
    return bool(CUSTODIAL_HANDLE_RE.match(address or ""))


def is_paymail(address: str) -> bool:
    return bool(PAYMAIL_RE.match(address or ""))


def is_valid_chain_address(address: str, network: str = NETWORK_MAINNET) -> bool:
    """Return True if address is a Base58Check P2PKH/P2SH address for the given network."""
    value = (address or "").strip()
    if not value or len(value) > 64:
        return False
    try:
        payload = base58.b58decode_check(value)
    except ValueError:
        return False
    if len(payload) != ADDRESS_PAYLOAD_LEN:
        return False
    return payload[0] in ADDRESS_VERSIONS.get(network, frozenset())


def chain_address_validator(network: str = NETWORK_MAINNET) -> AddressValidator:
    """Return a single-argument validator bound to network."""

    def _validate(address: str) -> bool:
        return is_valid_chain_address(address, network)

    return _validate


def classify_recipient(address: str, validator: AddressValidator | None = None) -> RecipientKind:
    """Classify a recipient string. Order of checks matters."""
    value = (address or "").strip()
    if is_custodial_handle(value):
        return RecipientKind.CUSTODIAL_HANDLE
    if is_paymail(value):
        return RecipientKind.PAYMAIL
    check = validator or is_valid_chain_address
    if value and check(value):
        return RecipientKind.CHAIN_ADDRESS
    return RecipientKind.UNRECOGNIZED
