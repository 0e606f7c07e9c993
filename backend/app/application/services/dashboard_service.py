"""
Dashboard Service
=================

Sales analytics for the admin dashboard.
"""
import math
from dataclasses import dataclass
from typing import List, Optional

from app.core.exceptions import BadRequestError
from app.domain.models.user import UserRole
from app.domain.repositories.order_repository import OrderRepository
from app.domain.repositories.user_repository import UserRepository
from app.utils.datetime_utils import now, year_bounds

CHART_TYPES = ("revenue", "order")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Years whose Jan 1 to Dec 31 range is representable as a datetime
MIN_CHART_YEAR = 1970
MAX_CHART_YEAR = 9998


@dataclass
class Analytics:
    total_order: int
    total_revenue: float
    total_customer: int
    total_supplier: int


@dataclass
class ChartPoint:
    month: str
    value: float


@dataclass
class RegionalSale:
    region: str
    total_orders: int
    percentage: int


class DashboardService:
    """Application service for dashboard figures."""

    def __init__(self, user_repository: UserRepository, order_repository: OrderRepository):
        self._users = user_repository
        self._orders = order_repository

    def analytics(self) -> Analytics:
        return Analytics(
            total_order=self._orders.count_all(),
            total_revenue=self._orders.total_revenue(),
            total_customer=self._users.count_active_by_role(UserRole.CUSTOMER),
            total_supplier=self._users.count_active_by_role(UserRole.SUPPLIER),
        )

    def charts(self, chart_type: str = "revenue", year: Optional[int] = None) -> List[ChartPoint]:
        """
        Monthly revenue or order count for one year.

        Always twelve points, Jan to Dec; months without orders are zero.

        Raises:
            BadRequestError: Unknown chart type or year out of range
        """
        if chart_type not in CHART_TYPES:
            raise BadRequestError(f"Invalid chart type: {chart_type}")

        year = year or now().year
        if not MIN_CHART_YEAR <= year <= MAX_CHART_YEAR:
            raise BadRequestError(f"Year must be between {MIN_CHART_YEAR} and {MAX_CHART_YEAR}")

        start, end = year_bounds(year)
        totals = self._orders.monthly_totals(chart_type, start, end)
        return [
            ChartPoint(month=name, value=totals.get(month, 0))
            for month, name in enumerate(MONTHS, start=1)
        ]

    def regional_sales(self) -> List[RegionalSale]:
        """Order lines per category region, with each region's share rounded up."""
        regions = self._orders.order_lines_by_region()
        grand_total = sum(count for _, count in regions)
        return [
            RegionalSale(
                region=region,
                total_orders=count,
                percentage=math.ceil(count / grand_total * 100) if grand_total else 0,
            )
            for region, count in regions
        ]
