from __future__ import annotations

import logging
from decimal import Decimal

from app.application.dto.orders import RecomputeOrderCostsInput, RecomputeOrderCostsOutput
from app.application.ports.order_port import OrderPort
from app.application.use_cases.ensure_order_costs import EnsureOrderCostsUseCase
from app.application.use_cases.order_costs_common import load_order_with_entries, persist_order_costs


logger = logging.getLogger(__name__)


class RecomputeOrderCostsUseCase:
    def __init__(self, *, order_port: OrderPort, ensure_order_costs_use_case: EnsureOrderCostsUseCase):
        self._order_port = order_port
        self._ensure_order_costs_use_case = ensure_order_costs_use_case

    def execute(self, command: RecomputeOrderCostsInput) -> RecomputeOrderCostsOutput:
        orders = self._order_port.list_orders(status=command.status, limit=command.limit or None)
        logger.info("recompute_order_costs: start orders=%s status=%s", len(orders), command.status)

        updated = 0
        skipped = 0
        failed_order_ids: list[str] = []
        total_cost = Decimal("0")

        for header in orders:
            # One broken order must not stop the rest of the batch.
            try:
                order = load_order_with_entries(self._order_port, header)
                costed = self._ensure_order_costs_use_case.execute(order=order, user_id=order.user_id)
                if costed is order:
                    logger.warning("recompute_order_costs: cost unchanged, skip write order_id=%s", order.id)
                    skipped += 1
                    continue
                persist_order_costs(self._order_port, costed)
            except Exception:
                logger.exception("recompute_order_costs: failed order_id=%s", header.id)
                failed_order_ids.append(header.id)
                continue

            updated += 1
            total_cost += costed.cost or Decimal("0")

        logger.info(
            "recompute_order_costs: done processed=%s updated=%s skipped=%s failed=%s",
            len(orders),
            updated,
            skipped,
            len(failed_order_ids),
        )
        return RecomputeOrderCostsOutput(
            processed=len(orders),
            updated=updated,
            skipped=skipped,
            failed=len(failed_order_ids),
            total_cost=total_cost,
            failed_order_ids=failed_order_ids,
        )
