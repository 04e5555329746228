from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class PricingTierResponse(BaseModel):
    data_gb: Decimal
    price: Decimal


class PricingProfileResponse(BaseModel):
    id: int
    name: str
    description: str | None
    minimum_charge: Decimal
    is_active: bool
    is_tiered: bool


class UserPricingResponse(BaseModel):
    user_id: int
    profile: PricingProfileResponse
    tiers: list[PricingTierResponse]


class OrderEntryRequest(BaseModel):
    number: str = Field("", description="Phone number receiving the bundle.")
    allocation_gb: Decimal = Field(..., gt=0, description="Bundle size in GB.")


class QuoteOrderRequest(BaseModel):
    user_id: int = Field(0, ge=0, description="User whose pricing profile applies; 0 uses the fallback chain.")
    entries: list[OrderEntryRequest] = Field(..., min_length=1)


class PricedEntryResponse(BaseModel):
    number: str
    allocation_gb: Decimal
    cost: Decimal


class QuoteOrderResponse(BaseModel):
    profile_id: int
    profile_name: str
    entries: list[PricedEntryResponse]
    raw_total: Decimal
    minimum_charge: Decimal
    total: Decimal


class ValidateOrderPricingRequest(BaseModel):
    user_id: int = Field(0, ge=0)
    entries: list[OrderEntryRequest] = Field(default_factory=list)


class InvalidEntryResponse(BaseModel):
    entry_ref: str
    allocation_gb: str
    reason: str


class ValidateOrderPricingResponse(BaseModel):
    is_valid: bool
    invalid_entries: list[InvalidEntryResponse]
