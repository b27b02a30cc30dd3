"""
Route planner: pick the balance source that funds a payment.

Classifies the recipient, decides between the primary (native) account, the
secondary (custodial) account, or a split across both, and re-validates a
decision against live balances before submission. Pure and synchronous; the
custodial linkage arrives as an explicit CustodialContext.

Routing rules by recipient kind:
- custodial handle: secondary account only; otherwise a soft rejection
- paymail: either account; both sufficient -> caller chooses
- chain address: primary preferred, then secondary, then split
- unrecognized: definitive rejection before any balance check
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from wallet_core.config import get_settings
from wallet_core.core.exceptions import InvalidPaymentRequest
from wallet_core.routing.address import AddressValidator, chain_address_validator, classify_recipient
from wallet_core.routing.fees import FeeModel
from wallet_core.routing.models import (
    ZERO,
    CustodialContext,
    FeeEstimate,
    FundingSource,
    PaymentRequest,
    RecipientKind,
    RejectionReason,
    RouteDecision,
    SplitAllocation,
    ValidationResult,
    to_decimal,
)
from wallet_core.wallet_logging import get_logger

logger = get_logger(__name__)

REASON_NOT_CONNECTED = "HandCash not connected. Send to BSV address instead."
REASON_HANDLE_INSUFFICIENT = "Insufficient HandCash balance. Use native wallet or top up HandCash."
REASON_HANDLE_OK = "Sending to HandCash handle requires HandCash wallet."
REASON_CHOICE = "Both wallets have sufficient balance. Choose your preferred source."
REASON_PAYMAIL_PRIMARY = "Using native wallet (sufficient balance)."
REASON_PAYMAIL_SECONDARY = "Using HandCash wallet (sufficient balance)."
REASON_PAYMAIL_INSUFFICIENT = "Insufficient balance in both wallets."
REASON_ADDRESS_PRIMARY = "Using native wallet for BSV address transaction."
REASON_ADDRESS_SECONDARY = "Insufficient native balance. Using HandCash wallet."
REASON_SPLIT = "Transaction requires funds from both wallets."
REASON_ALL_INSUFFICIENT = "Insufficient balance across all wallets."
REASON_INVALID_RECIPIENT = "Invalid recipient address format."


class RoutePlanner:
    """Stateless planner; safe to share across callers."""

    def __init__(
        self,
        address_validator: AddressValidator | None = None,
        fee_model: FeeModel | None = None,
    ):
        self.address_validator = address_validator or chain_address_validator()
        self.fee_model = fee_model or FeeModel()

    @classmethod
    def from_settings(cls, address_validator: AddressValidator | None = None) -> "RoutePlanner":
        settings = get_settings()
        return cls(
            address_validator=address_validator or chain_address_validator(settings.network),
            fee_model=FeeModel(
                base_fee=settings.base_fee,
                secondary_surcharge=settings.secondary_surcharge,
            ),
        )

    def plan_route(
        self,
        request: PaymentRequest,
        context: CustodialContext | None = None,
    ) -> RouteDecision:
        """
        Decide the funding source for request.

        Raises InvalidPaymentRequest when amount <= 0 or the recipient is empty.
        Insufficient balances never raise; they come back as a rejected decision.
        """
        if not request.recipient:
            raise InvalidPaymentRequest("Recipient must be a non-empty string")
        if request.amount <= 0:
            raise InvalidPaymentRequest("Amount must be greater than 0")

        ctx = context or CustodialContext.for_request(request)
        kind = classify_recipient(request.recipient, self.address_validator)

        if kind is RecipientKind.CUSTODIAL_HANDLE:
            decision = self._route_custodial_handle(request, ctx)
        elif kind is RecipientKind.PAYMAIL:
            decision = self._route_paymail(request, ctx)
        elif kind is RecipientKind.CHAIN_ADDRESS:
            decision = self._route_chain_address(request, ctx)
        else:
            decision = _rejected(kind, RejectionReason.INVALID_RECIPIENT, REASON_INVALID_RECIPIENT)

        log = logger.info if decision.is_rejected else logger.debug
        log(
            "route_rejected" if decision.is_rejected else "route_planned",
            recipient=request.recipient,
            recipient_kind=kind.value,
            amount=str(request.amount),
            source=decision.source.value,
            can_use_both=decision.can_use_both,
            rejection=decision.rejection.value if decision.rejection else None,
        )
        return decision

    def estimate_fees(self, decision: RouteDecision) -> FeeEstimate:
        return self.fee_model.estimate(decision)

    def validate(
        self,
        request: PaymentRequest,
        decision: RouteDecision,
        context: CustodialContext | None = None,
    ) -> ValidationResult:
        """
        Re-check decision against the balances in request right now.

        Sufficiency is recomputed from scratch (amount + fees vs the funding
        balance) so a stale or hand-built decision cannot slip through. The
        custodial balance is resolved exactly as plan_route resolves it, so
        pass the same context used for planning.
        """
        if request.amount <= 0:
            return ValidationResult(valid=False, error="Amount must be greater than 0")
        if decision.is_rejected:
            return ValidationResult(valid=False, error=decision.reason)

        required = request.amount + self.estimate_fees(decision).total
        secondary = _secondary_available(request, context or CustodialContext.for_request(request))
        unit = request.currency.value
        error: str | None = None

        if decision.source is FundingSource.PRIMARY:
            if request.primary_balance < required:
                error = f"Insufficient balance. Need {required} {unit} (including fees)"
        elif decision.source is FundingSource.SECONDARY:
            if secondary < required:
                error = f"Insufficient HandCash balance. Need {required} {unit} (including fees)"
        elif request.primary_balance + secondary < required:
            error = f"Insufficient combined balance. Need {required} {unit} (including fees)"

        if error is not None:
            logger.info(
                "route_validation_failed",
                recipient=request.recipient,
                source=decision.source.value,
                required=str(required),
            )
            return ValidationResult(valid=False, error=error)
        return ValidationResult(valid=True)

    def split_amount(self, amount: Any, primary_balance: Any, secondary_balance: Any) -> SplitAllocation:
        return split_amount(amount, primary_balance, secondary_balance)

    def _route_custodial_handle(self, request: PaymentRequest, ctx: CustodialContext) -> RouteDecision:
        kind = RecipientKind.CUSTODIAL_HANDLE
        secondary = _secondary_available(request, ctx)
        if secondary <= 0:
            return _rejected(kind, RejectionReason.NOT_CONNECTED, REASON_NOT_CONNECTED)
        if secondary < request.amount:
            return _rejected(kind, RejectionReason.INSUFFICIENT_SECONDARY, REASON_HANDLE_INSUFFICIENT)
        return RouteDecision(FundingSource.SECONDARY, REASON_HANDLE_OK, recipient_kind=kind)

    def _route_paymail(self, request: PaymentRequest, ctx: CustodialContext) -> RouteDecision:
        kind = RecipientKind.PAYMAIL
        secondary = _secondary_available(request, ctx)
        primary_ok = request.primary_balance >= request.amount
        secondary_ok = secondary > 0 and secondary >= request.amount

        if primary_ok and secondary_ok:
            return RouteDecision(
                FundingSource.SPLIT,
                REASON_CHOICE,
                can_use_both=True,
                recipient_kind=kind,
                caller_choice=True,
            )
        if primary_ok:
            return RouteDecision(FundingSource.PRIMARY, REASON_PAYMAIL_PRIMARY, recipient_kind=kind)
        if secondary_ok:
            return RouteDecision(FundingSource.SECONDARY, REASON_PAYMAIL_SECONDARY, recipient_kind=kind)
        if secondary > 0 and self._split_covers(request, secondary):
            return RouteDecision(FundingSource.SPLIT, REASON_SPLIT, can_use_both=True, recipient_kind=kind)
        return _rejected(kind, RejectionReason.INSUFFICIENT_FUNDS, REASON_PAYMAIL_INSUFFICIENT)

    def _route_chain_address(self, request: PaymentRequest, ctx: CustodialContext) -> RouteDecision:
        kind = RecipientKind.CHAIN_ADDRESS
        secondary = _secondary_available(request, ctx)
        secondary_ok = secondary > 0 and secondary >= request.amount

        if request.primary_balance >= request.amount:
            return RouteDecision(
                FundingSource.PRIMARY,
                REASON_ADDRESS_PRIMARY,
                can_use_both=secondary_ok,
                recipient_kind=kind,
            )
        if secondary_ok:
            return RouteDecision(FundingSource.SECONDARY, REASON_ADDRESS_SECONDARY, recipient_kind=kind)
        if self._split_covers(request, secondary):
            return RouteDecision(FundingSource.SPLIT, REASON_SPLIT, can_use_both=True, recipient_kind=kind)
        return _rejected(kind, RejectionReason.INSUFFICIENT_FUNDS, REASON_ALL_INSUFFICIENT)

    def _split_covers(self, request: PaymentRequest, secondary: Decimal) -> bool:
        """Both balances together cover the amount plus the fee of drawing from both."""
        split_fee = self.estimate_fees(RouteDecision(FundingSource.SPLIT, REASON_SPLIT)).total
        return request.primary_balance + secondary >= request.amount + split_fee


def split_amount(amount: Any, primary_balance: Any, secondary_balance: Any) -> SplitAllocation:
    """
    Greedy split: primary first, remainder from secondary.

    Never draws more than either balance; negative balances count as zero.
    When the combined balance is short the uncovered part is reported as shortfall.
    Raises InvalidPaymentRequest when amount <= 0.
    """
    total = to_decimal(amount)
    if total <= 0:
        raise InvalidPaymentRequest("Amount must be greater than 0")
    primary = max(to_decimal(primary_balance), ZERO)
    secondary = max(to_decimal(secondary_balance or 0), ZERO)

    from_primary = min(primary, total)
    remainder = total - from_primary
    from_secondary = min(secondary, remainder)
    return SplitAllocation(
        primary_amount=from_primary,
        secondary_amount=from_secondary,
        shortfall=remainder - from_secondary,
    )


def _secondary_available(request: PaymentRequest, ctx: CustodialContext) -> Decimal:
    """Usable custodial balance: zero unless linked; request balance wins over the context snapshot."""
    if not ctx.linked:
        return ZERO
    balance = request.secondary_balance if request.secondary_balance is not None else ctx.balance
    return max(balance or ZERO, ZERO)


def _rejected(kind: RecipientKind, rejection: RejectionReason, reason: str) -> RouteDecision:
    return RouteDecision(
        FundingSource.PRIMARY,
        reason,
        can_use_both=False,
        recipient_kind=kind,
        rejection=rejection,
    )
