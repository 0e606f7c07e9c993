"""
Wishlist Controller
===================
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.domain.models.identity import Identity
from app.domain.models.user import UserRole
from app.application.dto.cart_dto import WishlistAddRequest, WishlistItemResponse
from app.application.services.wishlist_service import WishlistEntryView, WishlistService
from app.api.v1.dependencies import get_wishlist_service, require_roles

router = APIRouter(tags=["wishlist"])

customer_only = require_roles(UserRole.CUSTOMER)


@router.post(
    "",
    response_model=WishlistItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product to the wishlist",
)
def add_to_wishlist(
    request: WishlistAddRequest,
    identity: Identity = Depends(customer_only),
    service: WishlistService = Depends(get_wishlist_service),
) -> WishlistItemResponse:
    item = service.add(identity, request.product_id)
    return WishlistItemResponse.from_view(WishlistEntryView(item=item))


@router.get("", response_model=List[WishlistItemResponse], summary="Get my wishlist")
def get_my_wishlist(
    identity: Identity = Depends(customer_only),
    service: WishlistService = Depends(get_wishlist_service),
) -> List[WishlistItemResponse]:
    return [WishlistItemResponse.from_view(entry) for entry in service.get_mine(identity)]
