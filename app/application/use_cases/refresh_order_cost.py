from __future__ import annotations

from app.application.ports.order_port import OrderPort
from app.application.use_cases.ensure_order_costs import EnsureOrderCostsUseCase
from app.application.use_cases.order_costs_common import load_order_with_entries, persist_order_costs
from app.domain.entities.order import Order
from app.domain.exceptions import OrderNotFoundError


class RefreshOrderCostUseCase:
    def __init__(self, *, order_port: OrderPort, ensure_order_costs_use_case: EnsureOrderCostsUseCase):
        self._order_port = order_port
        self._ensure_order_costs_use_case = ensure_order_costs_use_case

    def execute(self, *, order_id: str) -> Order:
        header = self._order_port.get_order(order_id=order_id)
        if header is None:
            raise OrderNotFoundError("Order not found.")

        order = load_order_with_entries(self._order_port, header)
        costed = self._ensure_order_costs_use_case.execute(order=order, user_id=order.user_id)
        if costed is not order:
            persist_order_costs(self._order_port, costed)
        return costed
