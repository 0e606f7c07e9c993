from typing import TYPE_CHECKING
from ...domain.repositories.catalog_repository import ProductRepository
from ...domain.repositories.wholesale_repository import WholesaleRepository
from ...application.services.wholesale_service import WholesaleService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class WholesaleProvider:
    """Wholesale service provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            WholesaleService,
            WholesaleService(
                product_repository=container.get(ProductRepository),
                wholesale_repository=container.get(WholesaleRepository),
            ),
        )
