"""
Valuation collaborators for the asset translator.

PricingProvider gives a USD unit price per ticker; InscriptionValuer gives a
USD value per inscription. The defaults are stand-ins for demos and tests:
StaticPriceTable serves a fixed table and PlaceholderInscriptionValuer
returns a bounded pseudo-random figure. Inject real oracles in production.
"""

from __future__ import annotations

import random
from decimal import ROUND_DOWN, Decimal
from typing import Mapping, Protocol

from wallet_core.assets.models import InscriptionRecord
from wallet_core.wallet_logging import get_logger

logger = get_logger(__name__)

DEMO_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("175.50"),
    "GOOGL": Decimal("135.25"),
    "TSLA": Decimal("248.50"),
    "MSFT": Decimal("378.90"),
    "GOLD": Decimal("2045.00"),
    "BTC": Decimal("43500.00"),
    "BSV": Decimal("45.25"),
}
DEFAULT_UNIT_PRICE = Decimal("1.00")

PLACEHOLDER_MIN_VALUE = 100
PLACEHOLDER_SPAN = 1000


class PricingProvider(Protocol):
    def price_of(self, ticker: str) -> Decimal: ...


class InscriptionValuer(Protocol):
    def value_of(self, record: InscriptionRecord) -> Decimal: ...


class StaticPriceTable:
    """Case-insensitive ticker -> price lookup with a default for unknown tickers."""

    def __init__(
        self,
        prices: Mapping[str, Decimal] | None = None,
        default: Decimal = DEFAULT_UNIT_PRICE,
    ):
        source = DEMO_PRICES if prices is None else prices
        self.prices = {k.upper(): Decimal(str(v)) for k, v in source.items()}
        self.default = Decimal(str(default))

    def price_of(self, ticker: str) -> Decimal:
        return self.prices.get((ticker or "").upper(), self.default)


class PlaceholderInscriptionValuer:
    """Pseudo-random value in [100, 1100) USD. Never an authoritative price."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self._warned = False

    def value_of(self, record: InscriptionRecord) -> Decimal:
        if not self._warned:
            logger.warning("placeholder_inscription_valuer_in_use", inscription=record.id)
            self._warned = True
        raw = self.rng.random() * PLACEHOLDER_SPAN + PLACEHOLDER_MIN_VALUE
        return Decimal(str(raw)).quantize(Decimal("0.01"), rounding=ROUND_DOWN)
