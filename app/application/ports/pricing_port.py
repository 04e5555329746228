from __future__ import annotations

from typing import Protocol

from app.domain.entities.pricing import PricingProfile, PricingTier


class PricingPort(Protocol):
    def get_active_profile_assignment(self, *, user_id: int) -> int | None:
        ...

    def get_profile(self, *, profile_id: int) -> PricingProfile | None:
        ...

    def get_profile_by_name(self, *, name: str) -> PricingProfile | None:
        ...

    def get_any_active_profile(self) -> PricingProfile | None:
        ...

    def get_tiers_for_profile(self, *, profile_id: int) -> list[PricingTier]:
        ...
