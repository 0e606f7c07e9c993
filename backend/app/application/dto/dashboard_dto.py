from typing import List, Optional

from app.application.dto.common_dto import ApiModel
from app.application.services.dashboard_service import Analytics, ChartPoint, RegionalSale


class AnalyticsResponse(ApiModel):
    total_order: int
    total_revenue: float
    total_customer: int
    total_supplier: int

    @classmethod
    def from_result(cls, analytics: Analytics) -> "AnalyticsResponse":
        return cls(**vars(analytics))


class ChartPointResponse(ApiModel):
    month: str
    value: float


class ChartResponse(ApiModel):
    type: str
    year: int
    data: List[ChartPointResponse]

    @classmethod
    def from_points(cls, chart_type: str, year: int, points: List[ChartPoint]) -> "ChartResponse":
        return cls(
            type=chart_type,
            year=year,
            data=[ChartPointResponse(month=point.month, value=point.value) for point in points],
        )


class RegionalSaleResponse(ApiModel):
    region: Optional[str] = None
    total_orders: int
    percentage: int

    @classmethod
    def from_result(cls, sale: RegionalSale) -> "RegionalSaleResponse":
        return cls(**vars(sale))
