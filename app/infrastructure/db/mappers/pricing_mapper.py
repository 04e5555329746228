from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from app.domain.entities.pricing import PricingProfile, PricingTier


def _as_decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _as_decimal_or_none(value: Any) -> Decimal | None:
    return Decimal(str(value)) if value is not None else None


def map_row_to_pricing_profile(row: Mapping[str, Any]) -> PricingProfile:
    is_tiered = row.get("is_tiered")
    return PricingProfile(
        id=int(row["id"]),
        name=row["name"],
        description=row.get("description"),
        minimum_charge=_as_decimal(row["minimum_charge"]) if row.get("minimum_charge") is not None else Decimal("0"),
        is_active=bool(row["is_active"]),
        pricing_mode="formula" if is_tiered is False else "tiered",
        base_price=_as_decimal(row["base_price"]) if row.get("base_price") is not None else Decimal("0"),
        data_price_per_gb=_as_decimal_or_none(row.get("data_price_per_gb")),
    )


def map_row_to_pricing_tier(row: Mapping[str, Any]) -> PricingTier:
    return PricingTier(
        id=int(row["id"]) if row.get("id") is not None else None,
        profile_id=int(row["profile_id"]) if row.get("profile_id") is not None else None,
        data_gb=_as_decimal(row["data_gb"]),
        price=_as_decimal(row["price"]),
    )
