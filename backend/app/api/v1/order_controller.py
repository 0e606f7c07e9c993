"""
Order Controller
================

FastAPI controller for placing orders and the per-role order views.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.domain.models.identity import Identity
from app.domain.models.user import UserRole
from app.application.dto.order_dto import OrderCreateRequest, OrderResponse
from app.application.services.order_service import OrderService
from app.api.v1.dependencies import get_order_service, require_roles

router = APIRouter(tags=["orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    description="""
    Prices and suppliers are read from the catalog. The order gets a
    human readable number such as ORD-1001.
    """,
)
def create_order(
    request: OrderCreateRequest,
    identity: Identity = Depends(require_roles(UserRole.CUSTOMER)),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    order = service.create(
        identity,
        items=request.requested_items(),
        payment_type=request.payment_type,
        shipping_address=request.shipping_address,
    )
    return OrderResponse.from_entity(order)


@router.get("/me", response_model=List[OrderResponse], summary="Get my orders")
def get_my_orders(
    identity: Identity = Depends(require_roles(UserRole.CUSTOMER)),
    service: OrderService = Depends(get_order_service),
) -> List[OrderResponse]:
    return [OrderResponse.from_entity(order) for order in service.get_mine(identity)]


@router.get("/supplier", response_model=List[OrderResponse], summary="Get orders for my products")
def get_supplier_orders(
    identity: Identity = Depends(require_roles(UserRole.SUPPLIER)),
    service: OrderService = Depends(get_order_service),
) -> List[OrderResponse]:
    return [OrderResponse.from_entity(order) for order in service.get_for_supplier(identity)]


@router.get("", response_model=List[OrderResponse], summary="Get all orders")
def get_all_orders(
    _: Identity = Depends(require_roles(UserRole.ADMIN)),
    service: OrderService = Depends(get_order_service),
) -> List[OrderResponse]:
    return [OrderResponse.from_entity(order) for order in service.get_all()]
