from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from app.domain.entities.order import Order, OrderEntry


def _as_decimal_or_none(value: Any) -> Decimal | None:
    return Decimal(str(value)) if value is not None else None


def map_row_to_order(row: Mapping[str, Any]) -> Order:
    return Order(
        id=str(row["id"]),
        total_data=Decimal(str(row["total_data"])) if row.get("total_data") is not None else Decimal("0"),
        entries=(),
        status=row.get("status") or "pending",
        user_id=int(row["user_id"]) if row.get("user_id") is not None else None,
        cost=_as_decimal_or_none(row.get("cost")),
        estimated_cost=_as_decimal_or_none(row.get("estimated_cost")),
        pricing_profile_id=int(row["pricing_profile_id"]) if row.get("pricing_profile_id") is not None else None,
        pricing_profile_name=row.get("pricing_profile_name"),
    )


def map_row_to_order_entry(row: Mapping[str, Any]) -> OrderEntry:
    return OrderEntry(
        id=int(row["id"]),
        order_id=str(row["order_id"]),
        number=row["number"],
        allocation_gb=Decimal(str(row["allocation_gb"])),
        status=row.get("status"),
        cost=_as_decimal_or_none(row.get("cost")),
    )
