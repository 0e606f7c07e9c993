"""
Order DTO
=========
"""
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from app.domain.models.order import Order, OrderStatus, PaymentStatus, PaymentType
from app.application.dto.common_dto import ApiModel
from app.application.services.order_service import RequestedItem


class OrderItemRequest(ApiModel):
    product_id: str
    quantity: int = Field(..., ge=1)


class OrderCreateRequest(ApiModel):
    items: List[OrderItemRequest]
    payment_type: PaymentType
    shipping_address: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [{"productId": "66f1c0a2e4b0a1b2c3d4e5a1", "quantity": 2}],
                "paymentType": "cod",
                "shippingAddress": "1 Main St, Springfield",
            }
        }
    )

    def requested_items(self) -> List[RequestedItem]:
        return [RequestedItem(product_id=item.product_id, quantity=item.quantity) for item in self.items]


class OrderItemResponse(ApiModel):
    product_id: str
    supplier_id: Optional[str] = None
    quantity: int
    price: float


class OrderResponse(ApiModel):
    id: str
    order_number: Optional[str] = None
    user_id: str
    items: List[OrderItemResponse]
    total_price: float
    payment_type: PaymentType
    payment_status: PaymentStatus
    order_status: OrderStatus
    shipping_address: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            order_number=order.order_number,
            user_id=order.user_id,
            items=[
                OrderItemResponse(
                    product_id=item.product_id,
                    supplier_id=item.supplier_id,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
            total_price=order.total_price,
            payment_type=order.payment_type,
            payment_status=order.payment_status,
            order_status=order.order_status,
            shipping_address=order.shipping_address,
            created_at=order.created_at,
        )
