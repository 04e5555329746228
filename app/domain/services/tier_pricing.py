from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from app.domain.entities.order import OrderEntry
from app.domain.entities.pricing import PricingProfile, PricingTier
from app.domain.exceptions import NoPricingForAllocationError, NoPricingTiersError


CENTS = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert to Decimal without inheriting binary float noise.

    Floats go through their shortest repr, so ``2.0`` becomes ``Decimal("2.0")``
    rather than the exact binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_money(value: Decimal) -> Decimal:
    # ROUND_HALF_UP on Decimal rounds half away from zero.
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def sort_tiers(tiers: Iterable[PricingTier]) -> list[PricingTier]:
    return sorted(tiers, key=lambda tier: tier.data_gb)


def find_exact_tier(allocation_gb: Decimal, tiers: Iterable[PricingTier]) -> PricingTier | None:
    # Decimal equality is numeric: Decimal("2") == Decimal("2.00").
    for tier in tiers:
        if tier.data_gb == allocation_gb:
            return tier
    return None


def highest_tier(tiers: Iterable[PricingTier]) -> PricingTier | None:
    ordered = sort_tiers(tiers)
    if not ordered:
        return None
    return ordered[-1]


def calculate_entry_cost(
    *,
    allocation_gb: Decimal | int | float | str,
    profile: PricingProfile,
    tiers: Sequence[PricingTier],
) -> Decimal:
    allocation = to_decimal(allocation_gb)
    if not tiers:
        raise NoPricingTiersError(allocation, profile.name)

    tier = find_exact_tier(allocation, tiers)
    if tier is None:
        raise NoPricingForAllocationError(allocation, profile.name)
    return round_money(tier.price)


def calculate_entry_costs(
    *,
    entries: Iterable[OrderEntry],
    profile: PricingProfile,
    tiers: Sequence[PricingTier],
) -> list[OrderEntry]:
    return [
        replace(
            entry,
            cost=calculate_entry_cost(
                allocation_gb=entry.allocation_gb,
                profile=profile,
                tiers=tiers,
            ),
        )
        for entry in entries
    ]


def apply_minimum_charge(*, raw_total: Decimal, minimum_charge: Decimal) -> Decimal:
    return round_money(max(raw_total, minimum_charge))
