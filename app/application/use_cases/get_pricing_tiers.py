from __future__ import annotations

from app.application.ports.pricing_port import PricingPort
from app.domain.entities.pricing import DEFAULT_PRICING_PROFILE, PricingProfile, PricingTier
from app.domain.services.tier_pricing import sort_tiers


class GetPricingTiersUseCase:
    def __init__(self, *, pricing_port: PricingPort):
        self._pricing_port = pricing_port

    def execute(self, *, profile_id: int) -> list[PricingTier]:
        return sort_tiers(self._pricing_port.get_tiers_for_profile(profile_id=profile_id))

    def for_profile(self, *, profile: PricingProfile) -> list[PricingTier]:
        # The built-in default has no rows in the tier table.
        if profile.id == DEFAULT_PRICING_PROFILE.id and profile.tiers:
            return sort_tiers(profile.tiers)
        return self.execute(profile_id=profile.id)
