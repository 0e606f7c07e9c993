"""
Order Repository Interface
==========================

Abstract interface for order data access and sales aggregations.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from app.domain.models.order import Order


class OrderRepository(ABC):
    """Abstract repository for order persistence and reporting."""

    @abstractmethod
    def create(self, order: Order, session: Any = None) -> Order:
        pass

    @abstractmethod
    def find_by_id(self, order_id: str) -> Optional[Order]:
        pass

    @abstractmethod
    def find_delivered_for_user(self, order_id: str, user_id: str) -> Optional[Order]:
        """Find an order owned by ``user_id`` whose status is delivered."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> List[Order]:
        pass

    @abstractmethod
    def find_by_supplier_id(self, supplier_id: str) -> List[Order]:
        """Find orders with at least one line sold by ``supplier_id``."""
        pass

    @abstractmethod
    def find_all(self) -> List[Order]:
        pass

    @abstractmethod
    def count_all(self) -> int:
        pass

    @abstractmethod
    def total_revenue(self) -> float:
        """Sum of totals over paid online orders and delivered cash-on-delivery orders."""
        pass

    @abstractmethod
    def monthly_totals(self, metric: str, start: datetime, end: datetime) -> Dict[int, float]:
        """
        Aggregate orders created in [start, end] by calendar month.

        Args:
            metric: "revenue" sums revenue-eligible totals, "order" counts orders
            start: Inclusive lower bound
            end: Inclusive upper bound

        Returns:
            Mapping of month number (1-12) to value; months without orders are absent
        """
        pass

    @abstractmethod
    def order_lines_by_region(self) -> List[Tuple[str, int]]:
        """Count order lines grouped by the region of the product's category."""
        pass
