"""
Cart and Wishlist DTO
=====================
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.domain.models.cart import CartItem
from app.application.dto.common_dto import ApiModel, PageMetaResponse, ProductSummaryResponse
from app.application.services.cart_service import CartLineView
from app.application.services.wishlist_service import WishlistEntryView
from app.utils.pagination import Page


class CartAddRequest(ApiModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class CartQuantityRequest(ApiModel):
    quantity: int = Field(1, ge=1)


class CartItemResponse(ApiModel):
    id: str
    product_id: str
    quantity: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, item: CartItem) -> "CartItemResponse":
        return cls(
            id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class CartLineResponse(ApiModel):
    id: str
    product_id: str
    quantity: int
    subtotal: float
    product: Optional[ProductSummaryResponse] = None

    @classmethod
    def from_view(cls, line: CartLineView) -> "CartLineResponse":
        return cls(
            id=line.item.id,
            product_id=line.item.product_id,
            quantity=line.item.quantity,
            subtotal=line.subtotal,
            product=ProductSummaryResponse.from_entity(line.product) if line.product else None,
        )


class CartPageResponse(ApiModel):
    data: List[CartLineResponse]
    meta: PageMetaResponse

    @classmethod
    def from_page(cls, page: Page[CartLineView]) -> "CartPageResponse":
        return cls(
            data=[CartLineResponse.from_view(line) for line in page.data],
            meta=PageMetaResponse.from_meta(page.meta),
        )


class WishlistAddRequest(ApiModel):
    product_id: str


class WishlistItemResponse(ApiModel):
    id: str
    product_id: str
    created_at: datetime
    product: Optional[ProductSummaryResponse] = None

    @classmethod
    def from_view(cls, entry: WishlistEntryView) -> "WishlistItemResponse":
        return cls(
            id=entry.item.id,
            product_id=entry.item.product_id,
            created_at=entry.item.created_at,
            product=ProductSummaryResponse.from_entity(entry.product) if entry.product else None,
        )
