from __future__ import annotations

from decimal import Decimal
import unittest

from app.application.dto.orders import RecomputeOrderCostsInput
from app.application.use_cases.recompute_order_costs import RecomputeOrderCostsUseCase
from app.application.use_cases.refresh_order_cost import RefreshOrderCostUseCase
from app.domain.entities.order import Order, OrderEntry
from app.domain.exceptions import OrderNotFoundError, PersistenceUnavailableError


class FakeOrderPort:
    def __init__(self, *, orders: list[Order], entries: dict[str, list[OrderEntry]], broken: set[str] | None = None):
        self._orders = orders
        self._entries = entries
        self._broken = broken or set()
        self.list_calls: list[tuple[str | None, int | None]] = []
        self.order_costs: dict[str, tuple] = {}
        self.entry_costs: dict[int, Decimal | None] = {}
        self.persist_batches: list[str] = []

    def list_orders(self, *, status: str | None = None, limit: int | None = None) -> list[Order]:
        self.list_calls.append((status, limit))
        return [order for order in self._orders if status is None or order.status == status]

    def get_order(self, *, order_id: str) -> Order | None:
        return next((order for order in self._orders if order.id == order_id), None)

    def get_order_entries(self, *, order_id: str) -> list[OrderEntry]:
        if order_id in self._broken:
            raise PersistenceUnavailableError("get_order_entries failed: OperationalError")
        return list(self._entries.get(order_id, []))

    def persist_order_cost(self, *, order_id, cost, estimated_cost, profile_id, profile_name) -> None:
        self.order_costs[order_id] = (cost, estimated_cost, profile_id, profile_name)

    def persist_entry_cost(self, *, entry_id: int, cost: Decimal | None) -> None:
        self.entry_costs[entry_id] = cost

    def persist_order_costs(self, *, order_id, cost, estimated_cost, profile_id, profile_name, entry_costs) -> None:
        self.persist_batches.append(order_id)
        self.persist_order_cost(
            order_id=order_id,
            cost=cost,
            estimated_cost=estimated_cost,
            profile_id=profile_id,
            profile_name=profile_name,
        )
        for entry_id, entry_cost in entry_costs.items():
            self.persist_entry_cost(entry_id=entry_id, cost=entry_cost)


class FakeEnsureOrderCostsUseCase:
    """Prices every entry at 5.00 per GB; leaves orders listed in ``untouched`` as they are."""

    def __init__(self, *, untouched: set[str] | None = None):
        self._untouched = untouched or set()
        self.calls: list[tuple[str, int | None]] = []

    def execute(self, *, order: Order, user_id: int | None = None) -> Order:
        self.calls.append((order.id, user_id))
        if order.id in self._untouched:
            return order
        entries = tuple(
            OrderEntry(
                id=entry.id,
                order_id=entry.order_id,
                number=entry.number,
                allocation_gb=entry.allocation_gb,
                cost=entry.allocation_gb * Decimal("5.00"),
            )
            for entry in order.entries
        )
        total = sum((entry.cost for entry in entries), Decimal("0"))
        return Order(
            id=order.id,
            total_data=order.total_data,
            entries=entries,
            status=order.status,
            user_id=order.user_id,
            cost=total,
            estimated_cost=total,
            pricing_profile_id=1,
            pricing_profile_name="Standard",
        )


def _order(order_id: str, *, user_id: int | None = 1, status: str = "pending") -> Order:
    return Order(id=order_id, total_data=Decimal("2"), entries=(), status=status, user_id=user_id)


def _entries(order_id: str, first_id: int) -> list[OrderEntry]:
    return [
        OrderEntry(id=first_id, order_id=order_id, number="0241111111", allocation_gb=Decimal("1")),
        OrderEntry(id=first_id + 1, order_id=order_id, number="0242222222", allocation_gb=Decimal("1")),
    ]


class RecomputeOrderCostsUseCaseTests(unittest.TestCase):
    def test_persists_costs_for_every_order(self):
        port = FakeOrderPort(
            orders=[_order("a"), _order("b", user_id=None)],
            entries={"a": _entries("a", 1), "b": _entries("b", 3)},
        )
        ensure = FakeEnsureOrderCostsUseCase()

        output = RecomputeOrderCostsUseCase(order_port=port, ensure_order_costs_use_case=ensure).execute(
            RecomputeOrderCostsInput()
        )

        self.assertEqual(output.processed, 2)
        self.assertEqual(output.updated, 2)
        self.assertEqual(output.failed, 0)
        self.assertEqual(output.total_cost, Decimal("20.00"))
        self.assertEqual(port.order_costs["a"], (Decimal("10.00"), Decimal("10.00"), 1, "Standard"))
        self.assertEqual(sorted(port.entry_costs), [1, 2, 3, 4])
        self.assertEqual(ensure.calls, [("a", 1), ("b", None)])

    def test_failing_order_does_not_stop_the_batch(self):
        port = FakeOrderPort(
            orders=[_order("a"), _order("b"), _order("c")],
            entries={"a": _entries("a", 1), "c": _entries("c", 5)},
            broken={"b"},
        )

        output = RecomputeOrderCostsUseCase(
            order_port=port,
            ensure_order_costs_use_case=FakeEnsureOrderCostsUseCase(),
        ).execute(RecomputeOrderCostsInput())

        self.assertEqual(output.processed, 3)
        self.assertEqual(output.updated, 2)
        self.assertEqual(output.failed, 1)
        self.assertEqual(output.failed_order_ids, ["b"])
        self.assertIn("c", port.order_costs)

    def test_unchanged_orders_are_not_written(self):
        port = FakeOrderPort(orders=[_order("a")], entries={"a": _entries("a", 1)})

        output = RecomputeOrderCostsUseCase(
            order_port=port,
            ensure_order_costs_use_case=FakeEnsureOrderCostsUseCase(untouched={"a"}),
        ).execute(RecomputeOrderCostsInput())

        self.assertEqual(output.skipped, 1)
        self.assertEqual(output.updated, 0)
        self.assertEqual(port.order_costs, {})

    def test_forwards_status_and_limit(self):
        port = FakeOrderPort(
            orders=[_order("a"), _order("b", status="processed")],
            entries={"a": _entries("a", 1), "b": _entries("b", 3)},
        )

        output = RecomputeOrderCostsUseCase(
            order_port=port,
            ensure_order_costs_use_case=FakeEnsureOrderCostsUseCase(),
        ).execute(RecomputeOrderCostsInput(status="pending", limit=50))

        self.assertEqual(port.list_calls, [("pending", 50)])
        self.assertEqual(output.processed, 1)


class RefreshOrderCostUseCaseTests(unittest.TestCase):
    def test_refreshes_and_persists_single_order(self):
        port = FakeOrderPort(orders=[_order("a")], entries={"a": _entries("a", 1)})

        order = RefreshOrderCostUseCase(
            order_port=port,
            ensure_order_costs_use_case=FakeEnsureOrderCostsUseCase(),
        ).execute(order_id="a")

        self.assertEqual(order.cost, Decimal("10.00"))
        self.assertEqual(len(order.entries), 2)
        self.assertEqual(port.entry_costs, {1: Decimal("5.00"), 2: Decimal("5.00")})
        self.assertEqual(port.persist_batches, ["a"])

    def test_unknown_order_raises(self):
        port = FakeOrderPort(orders=[], entries={})

        with self.assertRaises(OrderNotFoundError):
            RefreshOrderCostUseCase(
                order_port=port,
                ensure_order_costs_use_case=FakeEnsureOrderCostsUseCase(),
            ).execute(order_id="missing")


if __name__ == "__main__":
    unittest.main()
