from __future__ import annotations

from sqlalchemy import text

from app.domain.entities.pricing import DEFAULT_PRICING_PROFILE, DEFAULT_PRICING_TIERS
from app.infrastructure.db.engine import Base
from app.infrastructure.db.models import orders as _orders_models  # noqa: F401
from app.infrastructure.db.models import pricing as _pricing_models  # noqa: F401


STANDARD_PROFILE_NAME = "Standard"


def create_pricing_schema(engine) -> None:
    Base.metadata.create_all(engine)


def seed_pricing_defaults(engine, *, profile_name: str = STANDARD_PROFILE_NAME) -> int:
    with engine.begin() as conn:
        profile_id = conn.execute(
            text(
                """
                INSERT INTO public.pricing_profiles (
                    name, description, base_price, data_price_per_gb, minimum_charge, is_active, is_tiered
                )
                VALUES (:name, :description, 0, NULL, :minimum_charge, true, true)
                ON CONFLICT (name) DO UPDATE
                SET description = EXCLUDED.description,
                    data_price_per_gb = NULL,
                    minimum_charge = EXCLUDED.minimum_charge,
                    is_active = EXCLUDED.is_active,
                    is_tiered = EXCLUDED.is_tiered,
                    updated_at = now()
                RETURNING id
                """
            ),
            {
                "name": profile_name,
                "description": "Regular tiered pricing for most users",
                "minimum_charge": DEFAULT_PRICING_PROFILE.minimum_charge,
            },
        ).scalar_one()

        for tier in DEFAULT_PRICING_TIERS:
            conn.execute(
                text(
                    """
                    INSERT INTO public.pricing_tiers (profile_id, data_gb, price)
                    VALUES (:profile_id, :data_gb, :price)
                    ON CONFLICT (profile_id, data_gb) DO UPDATE
                    SET price = EXCLUDED.price
                    """
                ),
                {
                    "profile_id": profile_id,
                    "data_gb": tier.data_gb,
                    "price": tier.price,
                },
            )
    return int(profile_id)


if __name__ == "__main__":
    from app.infrastructure.db.engine import get_engine
    from app.shared.config import get_settings

    settings = get_settings()
    if not settings.postgres_dsn:
        raise SystemExit("POSTGRES_DSN is required.")
    engine = get_engine(settings.postgres_dsn)
    create_pricing_schema(engine)
    seeded_id = seed_pricing_defaults(engine, profile_name=settings.standard_profile_name)
    print(f"Seeded pricing profile '{settings.standard_profile_name}' id={seeded_id}")
