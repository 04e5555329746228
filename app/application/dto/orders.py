from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class RecomputeOrderCostsInput:
    status: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class RecomputeOrderCostsOutput:
    processed: int
    updated: int
    skipped: int
    failed: int
    total_cost: Decimal
    failed_order_ids: list[str] = field(default_factory=list)
