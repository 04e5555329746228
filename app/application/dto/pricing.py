from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.order import OrderEntry
from app.domain.entities.pricing import PricingProfile, PricingTier


@dataclass(frozen=True)
class UserPricingOutput:
    user_id: int
    profile: PricingProfile
    tiers: list[PricingTier]


@dataclass(frozen=True)
class QuoteOrderInput:
    user_id: int
    entries: list[OrderEntry]


@dataclass(frozen=True)
class QuoteOrderOutput:
    profile_id: int
    profile_name: str
    entries: list[OrderEntry]
    raw_total: Decimal
    minimum_charge: Decimal
    total: Decimal


@dataclass(frozen=True)
class ValidateOrderPricingInput:
    user_id: int
    entries: list[OrderEntry]
