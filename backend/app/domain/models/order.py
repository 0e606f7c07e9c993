"""
Order Model
===========

Domain model representing a purchase.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from app.utils.datetime_utils import now


class PaymentType(str, Enum):
    ONLINE = "online"
    COD = "cod"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass
class OrderItem:
    product_id: str
    quantity: int
    price: float
    supplier_id: Optional[str] = None

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order domain model.

    Revenue counts online orders once paid and cash-on-delivery orders once delivered.
    """
    user_id: str
    items: List[OrderItem]
    total_price: float
    payment_type: PaymentType
    order_number: Optional[str] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    order_status: OrderStatus = OrderStatus.PENDING
    shipping_address: Optional[str] = None
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def is_delivered(self) -> bool:
        return self.order_status == OrderStatus.DELIVERED

    def counts_as_revenue(self) -> bool:
        if self.payment_type == PaymentType.ONLINE:
            return self.payment_status == PaymentStatus.PAID
        return self.order_status == OrderStatus.DELIVERED
