"""
Transaction routing: recipient classification, fee model and route planner.
"""

from wallet_core.routing.address import classify_recipient, is_valid_chain_address
from wallet_core.routing.fees import FeeModel
from wallet_core.routing.models import (
    CurrencyUnit,
    CustodialContext,
    FeeEstimate,
    FundingSource,
    PaymentRequest,
    RecipientKind,
    RejectionReason,
    RouteDecision,
    SplitAllocation,
    ValidationResult,
)
from wallet_core.routing.planner import RoutePlanner, split_amount

__all__ = [
    "CurrencyUnit",
    "CustodialContext",
    "FeeEstimate",
    "FeeModel",
    "FundingSource",
    "PaymentRequest",
    "RecipientKind",
    "RejectionReason",
    "RouteDecision",
    "RoutePlanner",
    "SplitAllocation",
    "ValidationResult",
    "classify_recipient",
    "is_valid_chain_address",
    "split_amount",
]
