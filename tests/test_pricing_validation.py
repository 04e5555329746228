from __future__ import annotations

from decimal import Decimal

from app.domain.entities.order import OrderEntry
from app.domain.entities.pricing import PricingTier
from app.domain.services.pricing_validation import (
    INVALID_ALLOCATION_REASON,
    NO_EXACT_TIER_REASON,
    NO_TIERS_REASON,
    validate_order_pricing,
)


TIERS = [
    PricingTier(data_gb=Decimal("1"), price=Decimal("5.00")),
    PricingTier(data_gb=Decimal("2"), price=Decimal("10.00")),
]


def test_all_priceable_entries_are_valid():
    entries = [
        OrderEntry(number="0241111111", allocation_gb=Decimal("1")),
        OrderEntry(number="0242222222", allocation_gb=Decimal("2.00")),
    ]

    report = validate_order_pricing(entries=entries, tiers=TIERS)

    assert report.is_valid is True
    assert report.invalid_entries == []


def test_reports_every_unpriceable_entry():
    entries = [
        OrderEntry(number="0241111111", allocation_gb=Decimal("3"), id=11),
        OrderEntry(number="0242222222", allocation_gb=Decimal("1")),
        OrderEntry(number="0243333333", allocation_gb=Decimal("7")),
    ]

    report = validate_order_pricing(entries=entries, tiers=TIERS)

    assert report.is_valid is False
    assert [item.entry_ref for item in report.invalid_entries] == ["11", "0243333333"]
    assert [item.allocation_gb for item in report.invalid_entries] == [Decimal("3"), Decimal("7")]
    assert {item.reason for item in report.invalid_entries} == {NO_EXACT_TIER_REASON}


def test_empty_tiers_mark_every_entry_invalid():
    entries = [
        OrderEntry(number="0241111111", allocation_gb=Decimal("1")),
        OrderEntry(number="", allocation_gb=Decimal("2")),
    ]

    report = validate_order_pricing(entries=entries, tiers=[])

    assert report.is_valid is False
    assert len(report.invalid_entries) == 2
    assert report.invalid_entries[1].entry_ref == "1"
    assert all(item.reason == NO_TIERS_REASON for item in report.invalid_entries)
    assert report.invalid_entries[0].reason == "no pricing tiers available in profile."


def test_malformed_allocation_is_reported_not_raised():
    entries = [OrderEntry(number="0241111111", allocation_gb="abc")]

    report = validate_order_pricing(entries=entries, tiers=TIERS)

    assert report.is_valid is False
    assert report.invalid_entries[0].reason == INVALID_ALLOCATION_REASON
    assert report.invalid_entries[0].allocation_gb == "abc"


def test_no_entries_is_valid():
    report = validate_order_pricing(entries=[], tiers=[])

    assert report.is_valid is True
