from __future__ import annotations

import logging

from sqlalchemy import text

from app.application.ports.pricing_port import PricingPort
from app.domain.entities.pricing import PricingProfile, PricingTier
from app.infrastructure.db.engine import persistence_errors
from app.infrastructure.db.mappers.pricing_mapper import map_row_to_pricing_profile, map_row_to_pricing_tier


PROFILE_COLUMNS = """
    id, name, description, base_price, data_price_per_gb, minimum_charge, is_active, is_tiered
"""
logger = logging.getLogger(__name__)


class SqlPricingRepository(PricingPort):
    def __init__(self, engine):
        self._engine = engine

    def get_active_profile_assignment(self, *, user_id: int) -> int | None:
        sql = """
            SELECT profile_id
            FROM public.user_pricing_profiles
            WHERE user_id = :user_id
            ORDER BY updated_at DESC
            LIMIT 1
        """
        with persistence_errors("get_active_profile_assignment"):
            with self._engine.connect() as conn:
                row = conn.execute(text(sql), {"user_id": user_id}).mappings().first()
        if row is None:
            return None
        return int(row["profile_id"])

    def get_profile(self, *, profile_id: int) -> PricingProfile | None:
        sql = f"""
            SELECT {PROFILE_COLUMNS}
            FROM public.pricing_profiles
            WHERE id = :profile_id
            LIMIT 1
        """
        with persistence_errors("get_profile"):
            with self._engine.connect() as conn:
                row = conn.execute(text(sql), {"profile_id": profile_id}).mappings().first()
        if row is None:
            logger.warning("pricing_repo: profile_not_found profile_id=%s", profile_id)
            return None
        return map_row_to_pricing_profile(row)

    def get_profile_by_name(self, *, name: str) -> PricingProfile | None:
        sql = f"""
            SELECT {PROFILE_COLUMNS}
            FROM public.pricing_profiles
            WHERE name = :name
            LIMIT 1
        """
        with persistence_errors("get_profile_by_name"):
            with self._engine.connect() as conn:
                row = conn.execute(text(sql), {"name": name}).mappings().first()
        if row is None:
            return None
        return map_row_to_pricing_profile(row)

    def get_any_active_profile(self) -> PricingProfile | None:
        sql = f"""
            SELECT {PROFILE_COLUMNS}
            FROM public.pricing_profiles
            WHERE is_active = true
            LIMIT 1
        """
        with persistence_errors("get_any_active_profile"):
            with self._engine.connect() as conn:
                row = conn.execute(text(sql)).mappings().first()
        if row is None:
            return None
        return map_row_to_pricing_profile(row)

    def get_tiers_for_profile(self, *, profile_id: int) -> list[PricingTier]:
        sql = """
            SELECT id, profile_id, data_gb, price
            FROM public.pricing_tiers
            WHERE profile_id = :profile_id
            ORDER BY data_gb ASC
        """
        with persistence_errors("get_tiers_for_profile"):
            with self._engine.connect() as conn:
                rows = conn.execute(text(sql), {"profile_id": profile_id}).mappings().all()
        logger.debug("pricing_repo: tiers profile_id=%s rows=%s", profile_id, len(rows))
        return [map_row_to_pricing_tier(row) for row in rows]
