from typing import TYPE_CHECKING
from ...domain.repositories.catalog_repository import CounterRepository, ProductRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.repositories.review_repository import ReviewRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.dashboard_service import DashboardService
from ...application.services.order_service import OrderService
from ...application.services.review_service import ReviewService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class OrderProvider:
    """Registers services built on orders: ordering, reviews and the dashboard"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        users = container.get(UserRepository)
        orders = container.get(OrderRepository)

        container.register_singleton(
            OrderService,
            OrderService(
                user_repository=users,
                product_repository=container.get(ProductRepository),
                order_repository=orders,
                counter_repository=container.get(CounterRepository),
            ),
        )
        container.register_singleton(
            ReviewService,
            ReviewService(
                user_repository=users,
                order_repository=orders,
                review_repository=container.get(ReviewRepository),
            ),
        )
        container.register_singleton(
            DashboardService,
            DashboardService(user_repository=users, order_repository=orders),
        )
