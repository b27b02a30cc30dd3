"""
Transfer intents: what the shell must send to move a file asset.

Maps an asset back to the standard-specific transfer it represents. Only
describes the transfer; building and broadcasting it is the wallet
provider's job. Assets with no known standard fail fast.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wallet_core.assets.models import FileAsset, TokenStandard
from wallet_core.core.exceptions import InvalidPaymentRequest, UnsupportedStandardError

TRANSFER_BSV20 = "bsv20_transfer"
TRANSFER_ORDINALS = "ordinals_transfer"


@dataclass(frozen=True)
class TransferIntent:
    kind: str
    recipient: str
    token: Any
    """Underlying chain record, passed through by reference."""
    amount: int | None = None
    """Units to move; None for inscriptions (always the whole item)."""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.kind, "recipient": self.recipient}
        if self.kind == TRANSFER_ORDINALS:
            out["inscription"] = self.token
        else:
            out["token"] = self.token
            out["amount"] = self.amount
        return out


def to_transfer_intent(asset: FileAsset, recipient: str, amount: int | None = None) -> TransferIntent:
    """
    Describe the transfer of asset to recipient.

    BSV20: amount defaults to the displayed amount (1 when that is zero).
    Raises UnsupportedStandardError for any other standard than BSV20/Ordinals.
    """
    recipient = (recipient or "").strip()
    if not recipient:
        raise InvalidPaymentRequest("Recipient must be a non-empty string")
    if amount is not None and amount <= 0:
        raise InvalidPaymentRequest("Amount must be greater than 0")

    if asset.standard is TokenStandard.BSV20:
        return TransferIntent(
            kind=TRANSFER_BSV20,
            recipient=recipient,
            token=asset.underlying,
            amount=amount or asset.display_amount or 1,
        )
    if asset.standard is TokenStandard.ORDINALS:
        return TransferIntent(kind=TRANSFER_ORDINALS, recipient=recipient, token=asset.underlying)
    raise UnsupportedStandardError(asset.standard.value)
