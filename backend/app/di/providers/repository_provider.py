from typing import TYPE_CHECKING
from ...domain.repositories.cart_repository import CartRepository, WishlistRepository
from ...domain.repositories.catalog_repository import CounterRepository, ProductRepository
from ...domain.repositories.driver_application_repository import DriverApplicationRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.repositories.review_repository import ReviewRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.wholesale_repository import WholesaleRepository
from ...infrastructure.db.mongo_cart_repository import MongoCartRepository, MongoWishlistRepository
from ...infrastructure.db.mongo_catalog_repository import MongoCounterRepository, MongoProductRepository
from ...infrastructure.db.mongo_driver_application_repository import MongoDriverApplicationRepository
from ...infrastructure.db.mongo_order_repository import MongoOrderRepository
from ...infrastructure.db.mongo_review_repository import MongoReviewRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_wholesale_repository import MongoWholesaleRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get("mongo_client")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(UserRepository, MongoUserRepository(mongo_client))
        container.register_singleton(
            DriverApplicationRepository,
            MongoDriverApplicationRepository(mongo_client),
        )
        container.register_singleton(OrderRepository, MongoOrderRepository(mongo_client))
        container.register_singleton(ReviewRepository, MongoReviewRepository(mongo_client))
        container.register_singleton(CartRepository, MongoCartRepository(mongo_client))
        container.register_singleton(WishlistRepository, MongoWishlistRepository(mongo_client))
        container.register_singleton(ProductRepository, MongoProductRepository(mongo_client))
        container.register_singleton(CounterRepository, MongoCounterRepository(mongo_client))
        container.register_singleton(WholesaleRepository, MongoWholesaleRepository(mongo_client))
