from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal

from app.domain.entities.order import Order, OrderEntry, has_prior_cost
from app.domain.entities.pricing import DEFAULT_PRICING_TIERS, PricingProfile, PricingTier
from app.domain.services.tier_pricing import apply_minimum_charge


def fallback_tiers(profile: PricingProfile) -> tuple[PricingTier, ...]:
    if profile.tiers:
        return profile.tiers
    return DEFAULT_PRICING_TIERS


def sum_entry_costs(entries: Sequence[OrderEntry]) -> Decimal:
    return sum((entry.cost or Decimal("0") for entry in entries), Decimal("0"))


def order_total(*, profile: PricingProfile, priced_entries: Sequence[OrderEntry]) -> Decimal:
    return apply_minimum_charge(
        raw_total=sum_entry_costs(priced_entries),
        minimum_charge=profile.minimum_charge,
    )


def is_suspicious_zero_total(order: Order, total: Decimal) -> bool:
    return total == 0 and order.total_data > 0


def build_costed_order(
    *,
    order: Order,
    profile: PricingProfile,
    priced_entries: Sequence[OrderEntry],
    total: Decimal,
) -> Order:
    cost = total
    estimated_cost = total
    # A zero total on an order carrying data means the tier lookup went wrong; keep the old bill.
    if is_suspicious_zero_total(order, total) and has_prior_cost(order):
        cost = order.cost or total
        estimated_cost = order.estimated_cost or total

    return replace(
        order,
        entries=tuple(priced_entries),
        cost=cost,
        estimated_cost=estimated_cost,
        pricing_profile_id=profile.id,
        pricing_profile_name=profile.name,
    )
