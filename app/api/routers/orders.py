from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_recompute_order_costs_use_case, get_refresh_order_cost_use_case
from app.api.schemas.orders import (
    OrderCostResponse,
    OrderEntryCostResponse,
    RecomputeOrderCostsRequest,
    RecomputeOrderCostsResponse,
)
from app.application.dto.orders import RecomputeOrderCostsInput
from app.application.use_cases.recompute_order_costs import RecomputeOrderCostsUseCase
from app.application.use_cases.refresh_order_cost import RefreshOrderCostUseCase
from app.domain.exceptions import OrderNotFoundError, PersistenceUnavailableError
from app.shared.config import get_settings


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/v1/admin/orders/{order_id}/recompute-cost", response_model=OrderCostResponse)
def recompute_order_cost(
    order_id: str,
    use_case: RefreshOrderCostUseCase = Depends(get_refresh_order_cost_use_case),
):
    try:
        order = use_case.execute(order_id=order_id)
    except OrderNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PersistenceUnavailableError as exc:
        logger.warning("orders_router: persistence_unavailable order_id=%s detail=%s", order_id, exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return OrderCostResponse(
        id=order.id,
        status=order.status,
        total_data=order.total_data,
        cost=order.cost,
        estimated_cost=order.estimated_cost,
        pricing_profile_id=order.pricing_profile_id,
        pricing_profile_name=order.pricing_profile_name,
        entries=[
            OrderEntryCostResponse(
                id=entry.id,
                number=entry.number,
                allocation_gb=entry.allocation_gb,
                status=entry.status,
                cost=entry.cost,
            )
            for entry in order.entries
        ],
    )


@router.post("/v1/admin/orders/recompute-costs", response_model=RecomputeOrderCostsResponse)
def recompute_order_costs(
    req: RecomputeOrderCostsRequest,
    use_case: RecomputeOrderCostsUseCase = Depends(get_recompute_order_costs_use_case),
):
    limit = req.limit or get_settings().cost_recompute_batch_limit or None
    try:
        output = use_case.execute(RecomputeOrderCostsInput(status=req.status, limit=limit))
    except PersistenceUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return RecomputeOrderCostsResponse(
        processed=output.processed,
        updated=output.updated,
        skipped=output.skipped,
        failed=output.failed,
        total_cost=output.total_cost,
        failed_order_ids=output.failed_order_ids,
    )
