from __future__ import annotations

from app.application.dto.pricing import UserPricingOutput
from app.application.use_cases.get_pricing_tiers import GetPricingTiersUseCase
from app.application.use_cases.resolve_pricing_profile import ResolvePricingProfileUseCase


class GetUserPricingUseCase:
    def __init__(
        self,
        *,
        resolve_profile_use_case: ResolvePricingProfileUseCase,
        get_tiers_use_case: GetPricingTiersUseCase,
    ):
        self._resolve_profile_use_case = resolve_profile_use_case
        self._get_tiers_use_case = get_tiers_use_case

    def execute(self, *, user_id: int) -> UserPricingOutput:
        profile = self._resolve_profile_use_case.execute(user_id=user_id)
        tiers = self._get_tiers_use_case.for_profile(profile=profile)
        return UserPricingOutput(user_id=user_id, profile=profile, tiers=tiers)
