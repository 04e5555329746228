from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Literal


# "formula" is legacy data only; profiles leave the resolver as "tiered".
PricingMode = Literal["tiered", "formula"]


@dataclass(frozen=True)
class PricingTier:
    data_gb: Decimal
    price: Decimal
    profile_id: int | None = None
    id: int | None = None


@dataclass(frozen=True)
class PricingProfile:
    id: int
    name: str
    description: str | None
    minimum_charge: Decimal
    is_active: bool
    pricing_mode: PricingMode = "tiered"
    base_price: Decimal = Decimal("0.00")
    data_price_per_gb: Decimal | None = None
    tiers: tuple[PricingTier, ...] = ()

    @property
    def is_tiered(self) -> bool:
        return self.pricing_mode == "tiered"

    def as_tiered(self) -> PricingProfile:
        if self.is_tiered and self.data_price_per_gb is None:
            return self
        return replace(self, pricing_mode="tiered", data_price_per_gb=None)


@dataclass(frozen=True)
class UserPricingAssignment:
    user_id: int
    profile_id: int


DEFAULT_PRICING_TIERS: tuple[PricingTier, ...] = (
    PricingTier(data_gb=Decimal("1"), price=Decimal("5.00")),
    PricingTier(data_gb=Decimal("2"), price=Decimal("10.00")),
    PricingTier(data_gb=Decimal("5"), price=Decimal("25.00")),
    PricingTier(data_gb=Decimal("10"), price=Decimal("50.00")),
)

DEFAULT_PRICING_PROFILE = PricingProfile(
    id=0,
    name="Default",
    description="Default pricing for users without a profile",
    minimum_charge=Decimal("10.00"),
    is_active=True,
    pricing_mode="tiered",
    tiers=DEFAULT_PRICING_TIERS,
)
