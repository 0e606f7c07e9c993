"""
Cart Controller
===============

FastAPI controller for the caller's shopping cart.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.domain.models.identity import Identity
from app.domain.models.user import UserRole
from app.application.dto.cart_dto import (
    CartAddRequest,
    CartItemResponse,
    CartPageResponse,
    CartQuantityRequest,
)
from app.application.dto.common_dto import MessageResponse
from app.application.services.cart_service import CartService
from app.api.v1.dependencies import get_cart_service, require_roles

router = APIRouter(tags=["cart"])

customer_only = require_roles(UserRole.CUSTOMER)


@router.post(
    "",
    response_model=CartItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product to the cart",
)
def add_to_cart(
    request: CartAddRequest,
    identity: Identity = Depends(customer_only),
    service: CartService = Depends(get_cart_service),
) -> CartItemResponse:
    return CartItemResponse.from_entity(service.add(identity, request.product_id, request.quantity))


@router.get("", response_model=CartPageResponse, summary="Get my cart")
def get_my_cart(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    identity: Identity = Depends(customer_only),
    service: CartService = Depends(get_cart_service),
) -> CartPageResponse:
    return CartPageResponse.from_page(service.get_mine(identity, page=page, limit=limit))


@router.patch(
    "/{product_id}/increase",
    response_model=CartItemResponse,
    summary="Add units to a cart line",
)
def increase_quantity(
    product_id: str,
    request: Optional[CartQuantityRequest] = None,
    identity: Identity = Depends(customer_only),
    service: CartService = Depends(get_cart_service),
) -> CartItemResponse:
    quantity = request.quantity if request else 1
    return CartItemResponse.from_entity(service.increase(identity, product_id, quantity))


@router.patch(
    "/{product_id}/decrease",
    response_model=CartItemResponse,
    summary="Remove units from a cart line",
    description="A line never drops below one unit; delete the line instead.",
)
def decrease_quantity(
    product_id: str,
    request: Optional[CartQuantityRequest] = None,
    identity: Identity = Depends(customer_only),
    service: CartService = Depends(get_cart_service),
) -> CartItemResponse:
    quantity = request.quantity if request else 1
    return CartItemResponse.from_entity(service.decrease(identity, product_id, quantity))


@router.delete("/{product_id}", response_model=MessageResponse, summary="Remove a product from the cart")
def remove_from_cart(
    product_id: str,
    identity: Identity = Depends(customer_only),
    service: CartService = Depends(get_cart_service),
) -> MessageResponse:
    service.remove(identity, product_id)
    return MessageResponse(message="Product removed from cart")
