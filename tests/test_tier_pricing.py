from __future__ import annotations

from decimal import Decimal
import unittest

from app.domain.entities.order import OrderEntry
from app.domain.entities.pricing import PricingProfile, PricingTier
from app.domain.exceptions import NoPricingForAllocationError, NoPricingTiersError
from app.domain.services.tier_pricing import (
    apply_minimum_charge,
    calculate_entry_cost,
    calculate_entry_costs,
    highest_tier,
    round_money,
)


STANDARD = PricingProfile(
    id=1,
    name="Standard",
    description=None,
    minimum_charge=Decimal("10.00"),
    is_active=True,
)
STANDARD_TIERS = [
    PricingTier(data_gb=Decimal("1"), price=Decimal("5.00")),
    PricingTier(data_gb=Decimal("2"), price=Decimal("10.00")),
    PricingTier(data_gb=Decimal("5"), price=Decimal("25.00")),
]


class CalculateEntryCostTests(unittest.TestCase):
    def test_exact_match_returns_tier_price(self):
        cost = calculate_entry_cost(allocation_gb=Decimal("2"), profile=STANDARD, tiers=STANDARD_TIERS)

        self.assertEqual(cost, Decimal("10.00"))

    def test_price_is_rounded_half_away_from_zero(self):
        tiers = [PricingTier(data_gb=Decimal("1.5"), price=Decimal("7.125"))]

        cost = calculate_entry_cost(allocation_gb=Decimal("1.5"), profile=STANDARD, tiers=tiers)

        self.assertEqual(cost, Decimal("7.13"))
        self.assertEqual(str(cost), "7.13")

    def test_missing_allocation_raises_with_context(self):
        with self.assertRaises(NoPricingForAllocationError) as ctx:
            calculate_entry_cost(allocation_gb=Decimal("3"), profile=STANDARD, tiers=STANDARD_TIERS)

        self.assertEqual(ctx.exception.allocation_gb, Decimal("3"))
        self.assertEqual(ctx.exception.profile_name, "Standard")

    def test_empty_tiers_raise_no_pricing_tiers(self):
        with self.assertRaises(NoPricingTiersError):
            calculate_entry_cost(allocation_gb=Decimal("1"), profile=STANDARD, tiers=[])

    def test_empty_tiers_are_a_missing_allocation_with_context(self):
        with self.assertRaises(NoPricingForAllocationError) as ctx:
            calculate_entry_cost(allocation_gb="2.00", profile=STANDARD, tiers=[])

        self.assertIsInstance(ctx.exception, NoPricingTiersError)
        self.assertEqual(ctx.exception.allocation_gb, Decimal("2"))
        self.assertEqual(ctx.exception.profile_name, "Standard")

    def test_equal_decimals_with_different_scale_match(self):
        self.assertEqual(
            calculate_entry_cost(allocation_gb="2.00", profile=STANDARD, tiers=STANDARD_TIERS),
            Decimal("10.00"),
        )
        self.assertEqual(
            calculate_entry_cost(allocation_gb=2.0, profile=STANDARD, tiers=STANDARD_TIERS),
            Decimal("10.00"),
        )
        self.assertEqual(
            calculate_entry_cost(allocation_gb=5, profile=STANDARD, tiers=STANDARD_TIERS),
            Decimal("25.00"),
        )

    def test_near_equal_allocation_is_rejected(self):
        with self.assertRaises(NoPricingForAllocationError):
            calculate_entry_cost(allocation_gb=Decimal("2.0000001"), profile=STANDARD, tiers=STANDARD_TIERS)

    def test_float_noise_does_not_match_decimal_tier(self):
        tiers = [PricingTier(data_gb=Decimal("0.3"), price=Decimal("2.00"))]

        self.assertEqual(
            calculate_entry_cost(allocation_gb=0.3, profile=STANDARD, tiers=tiers),
            Decimal("2.00"),
        )
        with self.assertRaises(NoPricingForAllocationError):
            calculate_entry_cost(allocation_gb=0.1 + 0.2, profile=STANDARD, tiers=tiers)


class CalculateEntryCostsTests(unittest.TestCase):
    def test_prices_every_entry(self):
        entries = [
            OrderEntry(number="0241111111", allocation_gb=Decimal("1")),
            OrderEntry(number="0242222222", allocation_gb=Decimal("5")),
        ]

        priced = calculate_entry_costs(entries=entries, profile=STANDARD, tiers=STANDARD_TIERS)

        self.assertEqual([entry.cost for entry in priced], [Decimal("5.00"), Decimal("25.00")])
        self.assertEqual([entry.number for entry in priced], ["0241111111", "0242222222"])
        self.assertIsNone(entries[0].cost)

    def test_raises_on_first_unpriceable_entry(self):
        entries = [
            OrderEntry(number="0241111111", allocation_gb=Decimal("1")),
            OrderEntry(number="0242222222", allocation_gb=Decimal("4")),
        ]

        with self.assertRaises(NoPricingForAllocationError) as ctx:
            calculate_entry_costs(entries=entries, profile=STANDARD, tiers=STANDARD_TIERS)

        self.assertEqual(ctx.exception.allocation_gb, Decimal("4"))


class MoneyHelpersTests(unittest.TestCase):
    def test_minimum_charge_floor_applies_below_minimum(self):
        self.assertEqual(
            apply_minimum_charge(raw_total=Decimal("5.00"), minimum_charge=Decimal("10.00")),
            Decimal("10.00"),
        )

    def test_minimum_charge_floor_not_binding_above_minimum(self):
        self.assertEqual(
            apply_minimum_charge(raw_total=Decimal("20.00"), minimum_charge=Decimal("10.00")),
            Decimal("20.00"),
        )

    def test_round_money_handles_negative_half(self):
        self.assertEqual(round_money(Decimal("-2.345")), Decimal("-2.35"))

    def test_highest_tier_uses_allocation_size(self):
        tiers = [
            PricingTier(data_gb=Decimal("10"), price=Decimal("50.00")),
            PricingTier(data_gb=Decimal("2"), price=Decimal("60.00")),
        ]

        self.assertEqual(highest_tier(tiers).data_gb, Decimal("10"))
        self.assertIsNone(highest_tier([]))


if __name__ == "__main__":
    unittest.main()
