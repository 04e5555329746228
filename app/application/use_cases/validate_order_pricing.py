from __future__ import annotations

from app.application.dto.pricing import ValidateOrderPricingInput
from app.application.use_cases.get_pricing_tiers import GetPricingTiersUseCase
from app.application.use_cases.resolve_pricing_profile import ResolvePricingProfileUseCase
from app.domain.services.pricing_validation import PricingValidationReport, validate_order_pricing


class ValidateOrderPricingUseCase:
    def __init__(
        self,
        *,
        resolve_profile_use_case: ResolvePricingProfileUseCase,
        get_tiers_use_case: GetPricingTiersUseCase,
    ):
        self._resolve_profile_use_case = resolve_profile_use_case
        self._get_tiers_use_case = get_tiers_use_case

    def execute(self, command: ValidateOrderPricingInput) -> PricingValidationReport:
        profile = self._resolve_profile_use_case.execute(user_id=command.user_id)
        tiers = self._get_tiers_use_case.for_profile(profile=profile)
        return validate_order_pricing(entries=command.entries, tiers=tiers)
