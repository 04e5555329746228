from __future__ import annotations

from fastapi import Depends, HTTPException

from app.application.use_cases.ensure_order_costs import EnsureOrderCostsUseCase
from app.application.use_cases.get_pricing_tiers import GetPricingTiersUseCase
from app.application.use_cases.get_user_pricing import GetUserPricingUseCase
from app.application.use_cases.quote_order import QuoteOrderUseCase
from app.application.use_cases.recompute_order_costs import RecomputeOrderCostsUseCase
from app.application.use_cases.refresh_order_cost import RefreshOrderCostUseCase
from app.application.use_cases.resolve_pricing_profile import ResolvePricingProfileUseCase
from app.application.use_cases.validate_order_pricing import ValidateOrderPricingUseCase
from app.infrastructure.db.engine import get_engine
from app.infrastructure.db.repositories.orders_repository import SqlOrdersRepository
from app.infrastructure.db.repositories.pricing_repository import SqlPricingRepository
from app.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


def get_pricing_repository() -> SqlPricingRepository:
    return SqlPricingRepository(_get_db_engine())


def get_orders_repository() -> SqlOrdersRepository:
    return SqlOrdersRepository(_get_db_engine())


def get_resolve_pricing_profile_use_case(
    repo: SqlPricingRepository = Depends(get_pricing_repository),
) -> ResolvePricingProfileUseCase:
    settings = get_settings()
    return ResolvePricingProfileUseCase(
        pricing_port=repo,
        standard_profile_name=settings.standard_profile_name,
    )


def get_pricing_tiers_use_case(
    repo: SqlPricingRepository = Depends(get_pricing_repository),
) -> GetPricingTiersUseCase:
    return GetPricingTiersUseCase(pricing_port=repo)


def get_user_pricing_use_case(
    resolve_profile_use_case: ResolvePricingProfileUseCase = Depends(get_resolve_pricing_profile_use_case),
    get_tiers_use_case: GetPricingTiersUseCase = Depends(get_pricing_tiers_use_case),
) -> GetUserPricingUseCase:
    return GetUserPricingUseCase(
        resolve_profile_use_case=resolve_profile_use_case,
        get_tiers_use_case=get_tiers_use_case,
    )


def get_quote_order_use_case(
    resolve_profile_use_case: ResolvePricingProfileUseCase = Depends(get_resolve_pricing_profile_use_case),
    get_tiers_use_case: GetPricingTiersUseCase = Depends(get_pricing_tiers_use_case),
) -> QuoteOrderUseCase:
    return QuoteOrderUseCase(
        resolve_profile_use_case=resolve_profile_use_case,
        get_tiers_use_case=get_tiers_use_case,
    )


def get_validate_order_pricing_use_case(
    resolve_profile_use_case: ResolvePricingProfileUseCase = Depends(get_resolve_pricing_profile_use_case),
    get_tiers_use_case: GetPricingTiersUseCase = Depends(get_pricing_tiers_use_case),
) -> ValidateOrderPricingUseCase:
    return ValidateOrderPricingUseCase(
        resolve_profile_use_case=resolve_profile_use_case,
        get_tiers_use_case=get_tiers_use_case,
    )


def get_ensure_order_costs_use_case(
    resolve_profile_use_case: ResolvePricingProfileUseCase = Depends(get_resolve_pricing_profile_use_case),
    get_tiers_use_case: GetPricingTiersUseCase = Depends(get_pricing_tiers_use_case),
) -> EnsureOrderCostsUseCase:
    return EnsureOrderCostsUseCase(
        resolve_profile_use_case=resolve_profile_use_case,
        get_tiers_use_case=get_tiers_use_case,
    )


def get_refresh_order_cost_use_case(
    orders_repo: SqlOrdersRepository = Depends(get_orders_repository),
    ensure_order_costs_use_case: EnsureOrderCostsUseCase = Depends(get_ensure_order_costs_use_case),
) -> RefreshOrderCostUseCase:
    return RefreshOrderCostUseCase(
        order_port=orders_repo,
        ensure_order_costs_use_case=ensure_order_costs_use_case,
    )


def get_recompute_order_costs_use_case(
    orders_repo: SqlOrdersRepository = Depends(get_orders_repository),
    ensure_order_costs_use_case: EnsureOrderCostsUseCase = Depends(get_ensure_order_costs_use_case),
) -> RecomputeOrderCostsUseCase:
    return RecomputeOrderCostsUseCase(
        order_port=orders_repo,
        ensure_order_costs_use_case=ensure_order_costs_use_case,
    )
