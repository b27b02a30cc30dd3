"""
Fee model: fixed base fee for native payments, surcharge for custodial ones.

PRIMARY -> base fee. SECONDARY -> base fee x surcharge (convenience premium,
always >= base). SPLIT -> both components, additive. Rejected decisions are
never paid, so they carry no fee.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from wallet_core.config.env import DEFAULT_BASE_FEE, DEFAULT_SECONDARY_SURCHARGE
from wallet_core.core.exceptions import ConfigurationError
from wallet_core.routing.models import FeeEstimate, FundingSource, RouteDecision, to_decimal


@dataclass(frozen=True)
class FeeModel:
    base_fee: Decimal = DEFAULT_BASE_FEE
    """Fee for a payment funded by the primary account, in BSV."""
    secondary_surcharge: Decimal = DEFAULT_SECONDARY_SURCHARGE
    """Multiplier over base_fee for the secondary account; must be >= 1."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_fee", to_decimal(self.base_fee))
        object.__setattr__(self, "secondary_surcharge", to_decimal(self.secondary_surcharge))
        if self.base_fee < 0:
            raise ConfigurationError(f"base_fee must be >= 0, got {self.base_fee}")
        if self.secondary_surcharge < 1:
            raise ConfigurationError(
                f"secondary_surcharge must be >= 1, got {self.secondary_surcharge}"
            )

    @property
    def primary_fee(self) -> Decimal:
        return self.base_fee

    @property
    def secondary_fee(self) -> Decimal:
        return self.base_fee * self.secondary_surcharge

    def estimate(self, decision: RouteDecision) -> FeeEstimate:
        if decision.is_rejected:
            return FeeEstimate()
        if decision.source is FundingSource.PRIMARY:
            return FeeEstimate(primary_fee=self.primary_fee)
        if decision.source is FundingSource.SECONDARY:
            return FeeEstimate(secondary_fee=self.secondary_fee)
        return FeeEstimate(primary_fee=self.primary_fee, secondary_fee=self.secondary_fee)
