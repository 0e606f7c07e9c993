"""
Dashboard Controller
====================
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.domain.models.identity import Identity
from app.domain.models.user import UserRole
from app.application.dto.dashboard_dto import AnalyticsResponse, ChartResponse, RegionalSaleResponse
from app.application.services.dashboard_service import MAX_CHART_YEAR, MIN_CHART_YEAR, DashboardService
from app.api.v1.dependencies import get_dashboard_service, require_roles
from app.utils.datetime_utils import now

router = APIRouter(tags=["dashboard"])


@router.get("/analytics", response_model=AnalyticsResponse, summary="Admin dashboard totals")
def get_analytics(
    _: Identity = Depends(require_roles(UserRole.ADMIN)),
    service: DashboardService = Depends(get_dashboard_service),
) -> AnalyticsResponse:
    return AnalyticsResponse.from_result(service.analytics())


@router.get("/charts", response_model=ChartResponse, summary="Monthly revenue or order chart")
def get_charts(
    chart_type: str = Query("revenue", alias="type", description="revenue or order"),
    year: Optional[int] = Query(None, ge=MIN_CHART_YEAR, le=MAX_CHART_YEAR),
    service: DashboardService = Depends(get_dashboard_service),
) -> ChartResponse:
    year = year or now().year
    return ChartResponse.from_points(chart_type, year, service.charts(chart_type, year))


@router.get("/regional-sales", response_model=List[RegionalSaleResponse], summary="Order lines per region")
def get_regional_sales(
    service: DashboardService = Depends(get_dashboard_service),
) -> List[RegionalSaleResponse]:
    return [RegionalSaleResponse.from_result(sale) for sale in service.regional_sales()]
