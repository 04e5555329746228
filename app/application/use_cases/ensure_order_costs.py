from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal, InvalidOperation

from app.application.use_cases.get_pricing_tiers import GetPricingTiersUseCase
from app.application.use_cases.resolve_pricing_profile import ResolvePricingProfileUseCase
from app.domain.entities.order import Order, OrderEntry, has_prior_cost
from app.domain.entities.pricing import PricingProfile, PricingTier
from app.domain.exceptions import PersistenceUnavailableError, PricingError
from app.domain.services.order_costs import (
    build_costed_order,
    fallback_tiers,
    is_suspicious_zero_total,
    order_total,
)
from app.domain.services.tier_pricing import calculate_entry_cost, highest_tier, round_money


logger = logging.getLogger(__name__)


class EnsureOrderCostsUseCase:
    """Recompute entry costs and the order total, best effort.

    Never raises: unpriceable entries fall back to the highest tier price and
    any unexpected failure returns the order untouched. The result is a new
    ``Order``; persisting it is up to the caller.
    """

    def __init__(
        self,
        *,
        resolve_profile_use_case: ResolvePricingProfileUseCase,
        get_tiers_use_case: GetPricingTiersUseCase,
    ):
        self._resolve_profile_use_case = resolve_profile_use_case
        self._get_tiers_use_case = get_tiers_use_case

    def execute(self, *, order: Order, user_id: int | None = None) -> Order:
        try:
            return self._ensure(order=order, user_id=user_id)
        except Exception:
            logger.exception("ensure_order_costs: failed, returning order unchanged order_id=%s", order.id)
            return order

    def _ensure(self, *, order: Order, user_id: int | None) -> Order:
        effective_user_id = user_id or order.user_id or 0
        profile = self._resolve_profile_use_case.execute(user_id=effective_user_id)
        tiers = self._load_tiers(profile=profile, order_id=order.id)

        priced_entries = [
            self._price_entry(entry=entry, profile=profile, tiers=tiers, order_id=order.id)
            for entry in order.entries
        ]
        total = order_total(profile=profile, priced_entries=priced_entries)

        if is_suspicious_zero_total(order, total):
            logger.warning(
                "ensure_order_costs: zero total for order with data order_id=%s total_data=%s preserved=%s",
                order.id,
                order.total_data,
                has_prior_cost(order),
            )

        costed = build_costed_order(
            order=order,
            profile=profile,
            priced_entries=priced_entries,
            total=total,
        )
        logger.info(
            "ensure_order_costs: done order_id=%s user_id=%s profile_id=%s entries=%s cost=%s",
            order.id,
            effective_user_id,
            profile.id,
            len(priced_entries),
            costed.cost,
        )
        return costed

    def _load_tiers(self, *, profile: PricingProfile, order_id: str) -> Sequence[PricingTier]:
        try:
            tiers = self._get_tiers_use_case.for_profile(profile=profile)
        except PersistenceUnavailableError as exc:
            logger.warning(
                "ensure_order_costs: tier lookup failed, using fallback tiers order_id=%s profile_id=%s error=%s",
                order_id,
                profile.id,
                exc,
            )
            return fallback_tiers(profile)

        if not tiers:
            logger.warning(
                "ensure_order_costs: profile has no tiers, using fallback tiers order_id=%s profile_id=%s",
                order_id,
                profile.id,
            )
            return fallback_tiers(profile)
        return tiers

    def _price_entry(
        self,
        *,
        entry: OrderEntry,
        profile: PricingProfile,
        tiers: Sequence[PricingTier],
        order_id: str,
    ) -> OrderEntry:
        try:
            cost = calculate_entry_cost(allocation_gb=entry.allocation_gb, profile=profile, tiers=tiers)
        except (PricingError, InvalidOperation, TypeError, ValueError) as exc:
            cost = self._fallback_cost(tiers)
            logger.warning(
                "ensure_order_costs: entry priced at highest tier order_id=%s entry_id=%s allocation_gb=%s cost=%s reason=%s",
                order_id,
                entry.id,
                entry.allocation_gb,
                cost,
                exc,
            )
        return replace(entry, cost=cost)

    @staticmethod
    def _fallback_cost(tiers: Sequence[PricingTier]) -> Decimal:
        tier = highest_tier(tiers)
        if tier is None:
            raise PricingError("No tier available for fallback pricing.")
        return round_money(tier.price)
