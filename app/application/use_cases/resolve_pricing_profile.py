from __future__ import annotations

import logging

from app.application.ports.pricing_port import PricingPort
from app.domain.entities.pricing import DEFAULT_PRICING_PROFILE, PricingProfile


STANDARD_PROFILE_NAME = "Standard"
logger = logging.getLogger(__name__)


class ResolvePricingProfileUseCase:
    """Pick the pricing profile that applies to a user.

    A missing user id (0 or None) gets the built-in default without touching
    the store. Otherwise the order of preference is the user's active
    assignment, the "Standard" profile, any active profile, then the built-in
    default. Every profile comes back in tiered mode.
    """

    def __init__(
        self,
        *,
        pricing_port: PricingPort,
        standard_profile_name: str = STANDARD_PROFILE_NAME,
        default_profile: PricingProfile = DEFAULT_PRICING_PROFILE,
    ):
        self._pricing_port = pricing_port
        self._standard_profile_name = standard_profile_name
        self._default_profile = default_profile

    def execute(self, *, user_id: int | None) -> PricingProfile:
        if not user_id:
            logger.debug("resolve_pricing_profile: no user, using built-in default user_id=%s", user_id)
            return self._default_profile.as_tiered()

        profile = self._assigned_profile(user_id)
        if profile is not None:
            return profile.as_tiered()

        standard = self._pricing_port.get_profile_by_name(name=self._standard_profile_name)
        if standard is not None and standard.is_active:
            logger.debug(
                "resolve_pricing_profile: using standard user_id=%s profile_id=%s",
                user_id,
                standard.id,
            )
            return standard.as_tiered()

        any_active = self._pricing_port.get_any_active_profile()
        if any_active is not None and any_active.is_active:
            logger.info(
                "resolve_pricing_profile: standard missing, using first active user_id=%s profile_id=%s",
                user_id,
                any_active.id,
            )
            return any_active.as_tiered()

        logger.warning("resolve_pricing_profile: no active profile, using built-in default user_id=%s", user_id)
        return self._default_profile.as_tiered()

    def _assigned_profile(self, user_id: int) -> PricingProfile | None:
        profile_id = self._pricing_port.get_active_profile_assignment(user_id=user_id)
        if profile_id is None:
            return None

        profile = self._pricing_port.get_profile(profile_id=profile_id)
        if profile is None or not profile.is_active:
            logger.info(
                "resolve_pricing_profile: assigned profile unusable user_id=%s profile_id=%s",
                user_id,
                profile_id,
            )
            return None
        return profile
