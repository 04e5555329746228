from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from sqlalchemy import text

from app.application.ports.order_port import OrderPort
from app.domain.entities.order import Order, OrderEntry
from app.infrastructure.db.engine import persistence_errors
from app.infrastructure.db.mappers.orders_mapper import map_row_to_order, map_row_to_order_entry


ORDER_COLUMNS = """
    id, user_id, total_data, status, cost, estimated_cost, pricing_profile_id, pricing_profile_name
"""


class SqlOrdersRepository(OrderPort):
    def __init__(self, engine):
        self._engine = engine

    def list_orders(self, *, status: str | None = None, limit: int | None = None) -> list[Order]:
        sql = f"""
            SELECT {ORDER_COLUMNS}
            FROM public.orders
            WHERE (CAST(:status AS text) IS NULL OR status = :status)
            ORDER BY created_at ASC
        """
        params: dict[str, object] = {"status": status}
        if limit:
            sql += "\n            LIMIT :limit"
            params["limit"] = limit
        with persistence_errors("list_orders"):
            with self._engine.connect() as conn:
                rows = conn.execute(text(sql), params).mappings().all()
        return [map_row_to_order(row) for row in rows]

    def get_order(self, *, order_id: str) -> Order | None:
        sql = f"""
            SELECT {ORDER_COLUMNS}
            FROM public.orders
            WHERE id = :order_id
            LIMIT 1
        """
        with persistence_errors("get_order"):
            with self._engine.connect() as conn:
                row = conn.execute(text(sql), {"order_id": order_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_order(row)

    def get_order_entries(self, *, order_id: str) -> list[OrderEntry]:
        sql = """
            SELECT id, order_id, number, allocation_gb, status, cost
            FROM public.order_entries
            WHERE order_id = :order_id
            ORDER BY id ASC
        """
        with persistence_errors("get_order_entries"):
            with self._engine.connect() as conn:
                rows = conn.execute(text(sql), {"order_id": order_id}).mappings().all()
        return [map_row_to_order_entry(row) for row in rows]

    def persist_order_cost(
        self,
        *,
        order_id: str,
        cost: Decimal | None,
        estimated_cost: Decimal | None,
        profile_id: int | None,
        profile_name: str | None,
    ) -> None:
        with persistence_errors("persist_order_cost"):
            with self._engine.begin() as conn:
                _update_order_cost(conn, order_id, cost, estimated_cost, profile_id, profile_name)

    def persist_entry_cost(self, *, entry_id: int, cost: Decimal | None) -> None:
        with persistence_errors("persist_entry_cost"):
            with self._engine.begin() as conn:
                _update_entry_cost(conn, entry_id, cost)

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
        with persistence_errors("persist_order_costs"):
            with self._engine.begin() as conn:
                _update_order_cost(conn, order_id, cost, estimated_cost, profile_id, profile_name)
                for entry_id, entry_cost in entry_costs.items():
                    _update_entry_cost(conn, entry_id, entry_cost)


def _update_order_cost(conn, order_id, cost, estimated_cost, profile_id, profile_name) -> None:
    conn.execute(
        text(
            """
            UPDATE public.orders
            SET cost = :cost,
                estimated_cost = :estimated_cost,
                pricing_profile_id = :profile_id,
                pricing_profile_name = :profile_name
            WHERE id = :order_id
            """
        ),
        {
            "order_id": order_id,
            "cost": cost,
            "estimated_cost": estimated_cost,
            # The built-in default profile (id 0) has no row to reference.
            "profile_id": profile_id or None,
            "profile_name": profile_name,
        },
    )


def _update_entry_cost(conn, entry_id: int, cost: Decimal | None) -> None:
    conn.execute(
        text(
            """
            UPDATE public.order_entries
            SET cost = :cost
            WHERE id = :entry_id
            """
        ),
        {"entry_id": entry_id, "cost": cost},
    )
