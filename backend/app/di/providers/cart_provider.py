from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.cart_repository import CartRepository, WishlistRepository
from ...domain.repositories.catalog_repository import ProductRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.cart_service import CartService
from ...application.services.wishlist_service import WishlistService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CartProvider:
    """Cart and wishlist service provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        users = container.get(UserRepository)
        products = container.get(ProductRepository)

        container.register_singleton(
            CartService,
            CartService(
                user_repository=users,
                product_repository=products,
                cart_repository=container.get(CartRepository),
                default_page_size=get_settings().default_page_size,
            ),
        )
        container.register_singleton(
            WishlistService,
            WishlistService(
                user_repository=users,
                product_repository=products,
                wishlist_repository=container.get(WishlistRepository),
            ),
        )
