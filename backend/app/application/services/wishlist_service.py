from dataclasses import dataclass
from typing import List, Optional

from app.core.exceptions import ConflictError, NotFoundError
from app.domain.models.cart import WishlistItem
from app.domain.models.identity import Identity
from app.domain.models.product import Product
from app.domain.repositories.cart_repository import WishlistRepository
from app.domain.repositories.catalog_repository import ProductRepository
from app.domain.repositories.user_repository import UserRepository


@dataclass
class WishlistEntryView:
    item: WishlistItem
    product: Optional[Product] = None


class WishlistService:
    """Application service for wishlists."""

    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
        wishlist_repository: WishlistRepository,
    ):
        self._users = user_repository
        self._products = product_repository
        self._wishlist = wishlist_repository

    def add(self, identity: Identity, product_id: str) -> WishlistItem:
        user = self._users.find_by_email(identity.email)
        if not user:
            raise NotFoundError("User not found")
        if not self._products.find_by_id(product_id):
            raise NotFoundError("Product not found")
        if self._wishlist.find_line(user.id, product_id):
            raise ConflictError("Product already in wishlist")

        return self._wishlist.create(WishlistItem(user_id=user.id, product_id=product_id))

    def get_mine(self, identity: Identity) -> List[WishlistEntryView]:
        user = self._users.find_by_email(identity.email)
        if not user:
            raise NotFoundError("User not found")

        items = self._wishlist.find_by_user_id(user.id)
        products = self._products.find_many_by_ids(item.product_id for item in items)
        return [WishlistEntryView(item=item, product=products.get(item.product_id)) for item in items]
