"""
Cart Service
============

One cart line per (user, product); quantities never drop below one.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from app.core.exceptions import BadRequestError, NotFoundError
from app.domain.models.cart import CartItem
from app.domain.models.identity import Identity
from app.domain.models.product import Product
from app.domain.models.user import User
from app.domain.repositories.cart_repository import CartRepository
from app.domain.repositories.catalog_repository import ProductRepository
from app.domain.repositories.user_repository import UserRepository
from app.utils.pagination import Page, build_meta, normalize_page, skip_for

logger = logging.getLogger(__name__)


@dataclass
class CartLineView:
    item: CartItem
    product: Optional[Product] = None

    @property
    def subtotal(self) -> float:
        if not self.product:
            return 0.0
        return round(self.product.price * self.item.quantity, 2)


class CartService:
    """Application service for the shopping cart."""

    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
        cart_repository: CartRepository,
        default_page_size: int = 10,
    ):
        self._users = user_repository
        self._products = product_repository
        self._cart = cart_repository
        self._default_page_size = default_page_size

    def _require_user(self, identity: Identity) -> User:
        user = self._users.find_by_email(identity.email)
        if not user:
            raise NotFoundError("User not found")
        return user

    def _require_line(self, user: User, product_id: str) -> CartItem:
        item = self._cart.find_line(user.id, product_id)
        if not item:
            raise NotFoundError("Product is not in your cart")
        return item

    def add(self, identity: Identity, product_id: str, quantity: int = 1) -> CartItem:
        """
        Add a product, or more units of a product already in the cart.

        Raises:
            NotFoundError: Unknown user or product
            BadRequestError: Quantity below one
        """
        user = self._require_user(identity)
        if quantity < 1:
            raise BadRequestError("Quantity must be at least 1")
        if not self._products.find_by_id(product_id):
            raise NotFoundError("Product not found")

        item = self._cart.find_line(user.id, product_id)
        if item:
            item.increase(quantity)
            return self._cart.update(item)

        item = self._cart.create(CartItem(user_id=user.id, product_id=product_id, quantity=quantity))
        logger.info(f"Product {product_id} added to cart of user {user.id}")
        return item

    def get_mine(
        self,
        identity: Identity,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Page[CartLineView]:
        """Page through the caller's cart, newest lines first."""
        user = self._require_user(identity)
        page, limit = normalize_page(page, limit, self._default_page_size)

        items, total = self._cart.find_page(user.id, skip=skip_for(page, limit), limit=limit)
        products = self._products.find_many_by_ids(item.product_id for item in items)
        lines = [CartLineView(item=item, product=products.get(item.product_id)) for item in items]
        return Page(data=lines, meta=build_meta(page, limit, total))

    def increase(self, identity: Identity, product_id: str, quantity: int = 1) -> CartItem:
        user = self._require_user(identity)
        item = self._require_line(user, product_id)
        try:
            item.increase(quantity)
        except ValueError as e:
            raise BadRequestError(str(e))
        return self._cart.update(item)

    def decrease(self, identity: Identity, product_id: str, quantity: int = 1) -> CartItem:
        """
        Remove units from a line.

        Raises:
            BadRequestError: The line would hold fewer than one unit
        """
        user = self._require_user(identity)
        item = self._require_line(user, product_id)
        try:
            item.decrease(quantity)
        except ValueError as e:
            raise BadRequestError(str(e))
        return self._cart.update(item)

    def remove(self, identity: Identity, product_id: str) -> bool:
        user = self._require_user(identity)
        item = self._require_line(user, product_id)
        removed = self._cart.delete(item.id)
        logger.info(f"Product {product_id} removed from cart of user {user.id}")
        return removed
