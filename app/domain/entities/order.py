from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal


OrderStatus = Literal["pending", "processed"]


@dataclass(frozen=True)
class OrderEntry:
    number: str
    allocation_gb: Decimal
    id: int | None = None
    order_id: str | None = None
    status: str | None = None
    cost: Decimal | None = None


@dataclass(frozen=True)
class Order:
    id: str
    total_data: Decimal
    entries: tuple[OrderEntry, ...]
    status: OrderStatus = "pending"
    user_id: int | None = None
    cost: Decimal | None = None
    estimated_cost: Decimal | None = None
    pricing_profile_id: int | None = None
    pricing_profile_name: str | None = None


def has_prior_cost(order: Order) -> bool:
    return (order.cost is not None and order.cost > 0) or (
        order.estimated_cost is not None and order.estimated_cost > 0
    )
