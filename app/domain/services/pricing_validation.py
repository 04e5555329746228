from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from app.domain.entities.order import OrderEntry
from app.domain.entities.pricing import PricingTier
from app.domain.services.tier_pricing import find_exact_tier, to_decimal


NO_TIERS_REASON = "no pricing tiers available in profile."
NO_EXACT_TIER_REASON = "no pricing tier matches allocation exactly"
INVALID_ALLOCATION_REASON = "allocation is not a valid decimal value"


@dataclass(frozen=True)
class InvalidPricingEntry:
    entry_ref: str
    allocation_gb: Decimal | str
    reason: str


@dataclass(frozen=True)
class PricingValidationReport:
    is_valid: bool
    invalid_entries: list[InvalidPricingEntry]


def _entry_ref(entry: OrderEntry, position: int) -> str:
    if entry.id is not None:
        return str(entry.id)
    if entry.number:
        return entry.number
    return str(position)


def validate_order_pricing(
    *,
    entries: Sequence[OrderEntry],
    tiers: Sequence[PricingTier],
) -> PricingValidationReport:
    """Report every entry that cannot be priced, without raising.

    Unlike ``calculate_entry_costs`` this collects all problems in one pass so
    the caller can show them together.
    """
    invalid: list[InvalidPricingEntry] = []

    for position, entry in enumerate(entries):
        ref = _entry_ref(entry, position)
        if not tiers:
            invalid.append(
                InvalidPricingEntry(entry_ref=ref, allocation_gb=entry.allocation_gb, reason=NO_TIERS_REASON)
            )
            continue

        try:
            allocation = to_decimal(entry.allocation_gb)
        except (InvalidOperation, TypeError, ValueError):
            invalid.append(
                InvalidPricingEntry(
                    entry_ref=ref,
                    allocation_gb=str(entry.allocation_gb),
                    reason=INVALID_ALLOCATION_REASON,
                )
            )
            continue

        if find_exact_tier(allocation, tiers) is None:
            invalid.append(
                InvalidPricingEntry(entry_ref=ref, allocation_gb=allocation, reason=NO_EXACT_TIER_REASON)
            )

    return PricingValidationReport(is_valid=not invalid, invalid_entries=invalid)
