"""
Data models for the route planner.

Payment requests, custodial linkage context, route decisions, fee estimates,
validation results and split allocations. All immutable; amounts are Decimal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Protocol

from wallet_core.core.exceptions import InvalidPaymentRequest

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Coerce int/float/str/Decimal to Decimal; floats go through str to avoid binary noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _request_amount(name: str, value: Any) -> Decimal:
    if value is None:
        raise InvalidPaymentRequest(f"{name} is required")
    try:
        amount = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidPaymentRequest(f"{name} must be a number, got {value!r}") from e
    if not amount.is_finite():
        raise InvalidPaymentRequest(f"{name} must be finite, got {value!r}")
    return amount


class CurrencyUnit(str, Enum):
    BSV = "BSV"
    USD = "USD"


class FundingSource(str, Enum):
    """Which balance funds a payment. Values match the shell's wire names."""

    PRIMARY = "native"
    SECONDARY = "handcash"
    SPLIT = "optimal"


class RecipientKind(str, Enum):
    CUSTODIAL_HANDLE = "custodial_handle"
    PAYMAIL = "paymail"
    CHAIN_ADDRESS = "chain_address"
    UNRECOGNIZED = "unrecognized"


class RejectionReason(str, Enum):
    """Why a decision cannot be paid as planned. Rejected decisions carry no fee."""

    NOT_CONNECTED = "not_connected"
    INSUFFICIENT_SECONDARY = "insufficient_secondary"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INVALID_RECIPIENT = "invalid_recipient"


@dataclass(frozen=True)
class PaymentRequest:
    """
    One payment attempt as supplied by the shell.

    secondary_balance is None when no custodial account is linked.
    Preconditions (amount > 0, non-empty recipient) are checked by the planner,
    not here, so stale or hand-built requests can still reach validate().
    """

    recipient: str
    amount: Decimal
    primary_balance: Decimal
    secondary_balance: Decimal | None = None
    currency: CurrencyUnit = CurrencyUnit.BSV

    def __post_init__(self) -> None:
        object.__setattr__(self, "recipient", (self.recipient or "").strip())
        object.__setattr__(self, "amount", _request_amount("amount", self.amount))
        object.__setattr__(self, "primary_balance", _request_amount("primary_balance", self.primary_balance))
        if self.secondary_balance is not None:
            object.__setattr__(
                self, "secondary_balance", _request_amount("secondary_balance", self.secondary_balance)
            )
        try:
            object.__setattr__(self, "currency", CurrencyUnit(self.currency))
        except ValueError as e:
            raise InvalidPaymentRequest(f"Unsupported currency: {self.currency!r}") from e

    @property
    def combined_balance(self) -> Decimal:
        return self.primary_balance + (self.secondary_balance or ZERO)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaymentRequest":
        """Build from the shell payload: to, amount, currency, nativeBalance, handCashBalance."""
        secondary = data.get("handCashBalance", data.get("secondary_balance"))
        return cls(
            recipient=data.get("to", data.get("recipient", "")),
            amount=data.get("amount"),
            primary_balance=data.get("nativeBalance", data.get("primary_balance", 0)),
            secondary_balance=secondary,
            currency=data.get("currency", CurrencyUnit.BSV),
        )


class CustodialClient(Protocol):
    """Custodial-account client surface provided by the shell."""

    def is_linked(self) -> bool: ...

    def get_balance(self) -> dict[str, Any] | None:
        """Return {"amount": ..., "unit": ...} or None when unavailable."""
        ...

    def send_payment(self, to: str, amount: Decimal, currency: str) -> dict[str, Any] | None:
        """Return {"transactionId": ...} or None on failure."""
        ...


@dataclass(frozen=True)
class CustodialContext:
    """Explicit custodial linkage state passed to the planner instead of global auth state."""

    linked: bool
    balance: Decimal | None = None

    def __post_init__(self) -> None:
        if self.balance is not None:
            object.__setattr__(self, "balance", to_decimal(self.balance))

    @classmethod
    def for_request(cls, request: PaymentRequest) -> "CustodialContext":
        """Linked iff the request carries a secondary balance."""
        return cls(linked=request.secondary_balance is not None, balance=request.secondary_balance)

    @classmethod
    def from_client(cls, client: CustodialClient) -> "CustodialContext":
        """Snapshot linkage and balance from a custodial client."""
        if not client.is_linked():
            return cls(linked=False)
        snapshot = client.get_balance()
        if not snapshot or snapshot.get("amount") is None:
            return cls(linked=True, balance=None)
        return cls(linked=True, balance=to_decimal(snapshot["amount"]))


@dataclass(frozen=True)
class RouteDecision:
    """
    Outcome of planning one payment.

    caller_choice: both sources suffice on their own and the shell decides.
    rejection: set when the payment cannot proceed via the intended route; the
    source is then PRIMARY only as a signal, not a commitment.
    """

    source: FundingSource
    reason: str
    can_use_both: bool = False
    recipient_kind: RecipientKind | None = None
    caller_choice: bool = False
    rejection: RejectionReason | None = None

    @property
    def is_rejected(self) -> bool:
        return self.rejection is not None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "source": self.source.value,
            "reason": self.reason,
            "canUseBoth": self.can_use_both,
            "callerChoice": self.caller_choice,
        }
        if self.recipient_kind is not None:
            out["recipientKind"] = self.recipient_kind.value
        if self.rejection is not None:
            out["rejection"] = self.rejection.value
        return out


@dataclass(frozen=True)
class FeeEstimate:
    """Per-source fee components; total is the sum of the components present."""

    primary_fee: Decimal | None = None
    secondary_fee: Decimal | None = None

    @property
    def total(self) -> Decimal:
        return sum((f for f in (self.primary_fee, self.secondary_fee) if f is not None), ZERO)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"total": str(self.total)}
        if self.primary_fee is not None:
            out["native"] = str(self.primary_fee)
        if self.secondary_fee is not None:
            out["handcash"] = str(self.secondary_fee)
        return out


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"valid": self.valid}
        if self.error is not None:
            out["error"] = self.error
        return out


@dataclass(frozen=True)
class SplitAllocation:
    """How much each source contributes; shortfall > 0 only when combined balance is too low."""

    primary_amount: Decimal
    secondary_amount: Decimal
    shortfall: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return self.primary_amount + self.secondary_amount
