from __future__ import annotations

import logging

from app.application.dto.pricing import QuoteOrderInput, QuoteOrderOutput
from app.application.use_cases.get_pricing_tiers import GetPricingTiersUseCase
from app.application.use_cases.resolve_pricing_profile import ResolvePricingProfileUseCase
from app.domain.exceptions import PricingError
from app.domain.services.order_costs import order_total, sum_entry_costs
from app.domain.services.tier_pricing import calculate_entry_costs


logger = logging.getLogger(__name__)


class QuoteOrderUseCase:
    """Price a prospective order strictly; any entry without an exact tier fails the quote."""

    def __init__(
        self,
        *,
        resolve_profile_use_case: ResolvePricingProfileUseCase,
        get_tiers_use_case: GetPricingTiersUseCase,
    ):
        self._resolve_profile_use_case = resolve_profile_use_case
        self._get_tiers_use_case = get_tiers_use_case

    def execute(self, command: QuoteOrderInput) -> QuoteOrderOutput:
        profile = self._resolve_profile_use_case.execute(user_id=command.user_id)
        tiers = self._get_tiers_use_case.for_profile(profile=profile)

        try:
            priced = calculate_entry_costs(entries=command.entries, profile=profile, tiers=tiers)
        except PricingError as exc:
            logger.info(
                "quote_order: rejected user_id=%s profile_id=%s reason=%s",
                command.user_id,
                profile.id,
                exc,
            )
            raise

        return QuoteOrderOutput(
            profile_id=profile.id,
            profile_name=profile.name,
            entries=priced,
            raw_total=sum_entry_costs(priced),
            minimum_charge=profile.minimum_charge,
            total=order_total(profile=profile, priced_entries=priced),
        )
