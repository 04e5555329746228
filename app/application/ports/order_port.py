from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Protocol

from app.domain.entities.order import Order, OrderEntry


class OrderPort(Protocol):
    def list_orders(self, *, status: str | None = None, limit: int | None = None) -> list[Order]:
        ...

    def get_order(self, *, order_id: str) -> Order | None:
        ...

    def get_order_entries(self, *, order_id: str) -> list[OrderEntry]:
        ...

    def persist_order_cost(
        self,
        *,
        order_id: str,
        cost: Decimal | None,
        estimated_cost: Decimal | None,
        profile_id: int | None,
        profile_name: str | None,
    ) -> None:
        ...

    def persist_entry_cost(self, *, entry_id: int, cost: Decimal | None) -> None:
        ...

    def persist_order_costs(
        self,
        *,
        order_id: str,
        cost: Decimal | None,
        estimated_cost: Decimal | None,
        profile_id: int | None,
        profile_name: str | None,
        entry_costs: Mapping[int, Decimal | None],
    ) -> None:
        """Write the order total and its entry costs in one transaction."""
        ...
