from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class OrderEntryCostResponse(BaseModel):
    id: int | None
    number: str
    allocation_gb: Decimal
    status: str | None
    cost: Decimal | None


class OrderCostResponse(BaseModel):
    id: str
    status: str
    total_data: Decimal
    cost: Decimal | None
    estimated_cost: Decimal | None
    pricing_profile_id: int | None
    pricing_profile_name: str | None
    entries: list[OrderEntryCostResponse]


class RecomputeOrderCostsRequest(BaseModel):
    status: str | None = Field(None, description="Only recompute orders with this status (e.g. pending).")
    limit: int | None = Field(None, ge=1, description="Maximum number of orders to process.")


class RecomputeOrderCostsResponse(BaseModel):
    processed: int
    updated: int
    skipped: int
    failed: int
    total_cost: Decimal
    failed_order_ids: list[str]
