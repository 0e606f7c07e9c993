"""
Order Service
=============

Places orders priced from the catalog and serves the order views of
customers, suppliers and administrators.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from app.core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from app.domain.models.identity import Identity
from app.domain.models.order import Order, OrderItem, PaymentType
from app.domain.models.user import User, UserRole
from app.domain.repositories.catalog_repository import CounterRepository, ProductRepository
from app.domain.repositories.order_repository import OrderRepository
from app.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

ORDER_COUNTER = "order"
ORDER_NUMBER_PREFIX = "ORD"


@dataclass(frozen=True)
class RequestedItem:
    product_id: str
    quantity: int


class OrderService:
    """Application service for orders."""

    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
        order_repository: OrderRepository,
        counter_repository: CounterRepository,
    ):
        self._users = user_repository
        self._products = product_repository
        self._orders = order_repository
        self._counters = counter_repository

    def _require_user(self, identity: Identity) -> User:
        user = self._users.find_by_email(identity.email)
        if not user:
            raise NotFoundError("User not found")
        return user

    def create(
        self,
        identity: Identity,
        items: List[RequestedItem],
        payment_type: PaymentType,
        shipping_address: Optional[str] = None,
    ) -> Order:
        """
        Place an order.

        Unit prices and suppliers are taken from the catalog, never from
        the request.

        Raises:
            NotFoundError: Unknown user or product
            BadRequestError: No items, or a quantity below one
        """
        user = self._require_user(identity)
        if not items:
            raise BadRequestError("Order must contain at least one item")
        if any(item.quantity < 1 for item in items):
            raise BadRequestError("Quantity must be at least 1")

        products = self._products.find_many_by_ids(item.product_id for item in items)
        missing = [item.product_id for item in items if item.product_id not in products]
        if missing:
            raise NotFoundError(f"Product not found: {', '.join(missing)}")

        order_items = [
            OrderItem(
                product_id=item.product_id,
                quantity=item.quantity,
                price=products[item.product_id].price,
                supplier_id=products[item.product_id].supplier_id,
            )
            for item in items
        ]
        total_price = round(sum(item.subtotal for item in order_items), 2)
        sequence = self._counters.next_value(ORDER_COUNTER)

        order = self._orders.create(
            Order(
                user_id=user.id,
                items=order_items,
                total_price=total_price,
                payment_type=payment_type,
                order_number=f"{ORDER_NUMBER_PREFIX}-{sequence}",
                shipping_address=shipping_address,
            )
        )
        logger.info(f"Order {order.order_number} placed by user {user.id} for {total_price}")
        return order

    def get_mine(self, identity: Identity) -> List[Order]:
        user = self._require_user(identity)
        return self._orders.find_by_user_id(user.id)

    def get_for_supplier(self, identity: Identity) -> List[Order]:
        """
        Orders containing at least one of the supplier's products.

        Raises:
            ForbiddenError: Caller is not a supplier
        """
        user = self._require_user(identity)
        if user.role != UserRole.SUPPLIER:
            raise ForbiddenError("Only suppliers can view supplier orders")
        return self._orders.find_by_supplier_id(user.id)

    def get_all(self) -> List[Order]:
        return self._orders.find_all()
