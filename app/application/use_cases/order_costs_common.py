from __future__ import annotations

from dataclasses import replace

from app.application.ports.order_port import OrderPort
from app.domain.entities.order import Order


def load_order_with_entries(order_port: OrderPort, order: Order) -> Order:
    entries = order_port.get_order_entries(order_id=order.id)
    return replace(order, entries=tuple(entries))


def persist_order_costs(order_port: OrderPort, order: Order) -> None:
    order_port.persist_order_costs(
        order_id=order.id,
        cost=order.cost,
        estimated_cost=order.estimated_cost,
        profile_id=order.pricing_profile_id,
        profile_name=order.pricing_profile_name,
        entry_costs={entry.id: entry.cost for entry in order.entries if entry.id is not None},
    )
