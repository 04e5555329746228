from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import (
    get_quote_order_use_case,
    get_user_pricing_use_case,
    get_validate_order_pricing_use_case,
)
from app.api.schemas.pricing import (
    InvalidEntryResponse,
    OrderEntryRequest,
    PricedEntryResponse,
    PricingProfileResponse,
    PricingTierResponse,
    QuoteOrderRequest,
    QuoteOrderResponse,
    UserPricingResponse,
    ValidateOrderPricingRequest,
    ValidateOrderPricingResponse,
)
from app.application.dto.pricing import QuoteOrderInput, ValidateOrderPricingInput
from app.application.use_cases.get_user_pricing import GetUserPricingUseCase
from app.application.use_cases.quote_order import QuoteOrderUseCase
from app.application.use_cases.validate_order_pricing import ValidateOrderPricingUseCase
from app.domain.entities.order import OrderEntry
from app.domain.exceptions import NoPricingForAllocationError, PersistenceUnavailableError, PricingError


router = APIRouter()
logger = logging.getLogger(__name__)


def _to_entries(entries: list[OrderEntryRequest]) -> list[OrderEntry]:
    return [OrderEntry(number=item.number, allocation_gb=item.allocation_gb) for item in entries]


@router.get("/v1/pricing/users/{user_id}", response_model=UserPricingResponse)
def get_user_pricing(
    user_id: int,
    use_case: GetUserPricingUseCase = Depends(get_user_pricing_use_case),
):
    try:
        output = use_case.execute(user_id=user_id)
    except PersistenceUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    profile = output.profile
    return UserPricingResponse(
        user_id=output.user_id,
        profile=PricingProfileResponse(
            id=profile.id,
            name=profile.name,
            description=profile.description,
            minimum_charge=profile.minimum_charge,
            is_active=profile.is_active,
            is_tiered=profile.is_tiered,
        ),
        tiers=[PricingTierResponse(data_gb=tier.data_gb, price=tier.price) for tier in output.tiers],
    )


@router.post("/v1/pricing/quote", response_model=QuoteOrderResponse)
def quote_order(
    req: QuoteOrderRequest,
    use_case: QuoteOrderUseCase = Depends(get_quote_order_use_case),
):
    try:
        output = use_case.execute(QuoteOrderInput(user_id=req.user_id, entries=_to_entries(req.entries)))
    except NoPricingForAllocationError as exc:
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(exc),
                "allocation_gb": str(exc.allocation_gb),
                "profile_name": exc.profile_name,
            },
        ) from exc
    except PricingError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except PersistenceUnavailableError as exc:
        logger.warning("pricing_router: quote persistence_unavailable user_id=%s detail=%s", req.user_id, exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return QuoteOrderResponse(
        profile_id=output.profile_id,
        profile_name=output.profile_name,
        entries=[
            PricedEntryResponse(number=entry.number, allocation_gb=entry.allocation_gb, cost=entry.cost)
            for entry in output.entries
        ],
        raw_total=output.raw_total,
        minimum_charge=output.minimum_charge,
        total=output.total,
    )


@router.post("/v1/pricing/validate", response_model=ValidateOrderPricingResponse)
def validate_order_pricing(
    req: ValidateOrderPricingRequest,
    use_case: ValidateOrderPricingUseCase = Depends(get_validate_order_pricing_use_case),
):
    try:
        report = use_case.execute(
            ValidateOrderPricingInput(user_id=req.user_id, entries=_to_entries(req.entries))
        )
    except PersistenceUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return ValidateOrderPricingResponse(
        is_valid=report.is_valid,
        invalid_entries=[
            InvalidEntryResponse(
                entry_ref=item.entry_ref,
                allocation_gb=str(item.allocation_gb),
                reason=item.reason,
            )
            for item in report.invalid_entries
        ],
    )
