"""
Wholesale Service
=================

Wholesale catalog entries. Each entry type carries its own item list and
every referenced product must exist in the catalog.
"""
import logging
from typing import List, Optional

from app.core.exceptions import BadRequestError, NotFoundError
from app.domain.models.wholesale import Wholesale, WholesaleType
from app.domain.repositories.catalog_repository import ProductRepository
from app.domain.repositories.wholesale_repository import WholesaleRepository

logger = logging.getLogger(__name__)

# Item list each type must provide
REQUIRED_ITEMS = {
    WholesaleType.CASE: ("case_items", "caseItems"),
    WholesaleType.PALLET: ("pallet_items", "palletItems"),
    WholesaleType.FAST_MOVING: ("fast_moving_items", "fastMovingItems"),
}


class WholesaleService:
    """Application service for wholesale entries."""

    def __init__(self, product_repository: ProductRepository, wholesale_repository: WholesaleRepository):
        self._products = product_repository
        self._wholesales = wholesale_repository

    def add(self, wholesale: Wholesale) -> Wholesale:
        """
        Validate and store a wholesale entry.

        Pallet totals are derived from the pallet lines, whatever the
        client sent.

        Raises:
            BadRequestError: The item list for the entry's type is empty
            NotFoundError: A referenced product does not exist
        """
        attribute, label = REQUIRED_ITEMS[wholesale.type]
        if not getattr(wholesale, attribute):
            raise BadRequestError(f"{label} is required for {wholesale.type.value} wholesale")

        for pallet in wholesale.pallet_items:
            if not pallet.items:
                raise BadRequestError(f"Pallet '{pallet.pallet_name}' has no items")
            pallet.recompute()

        product_ids = wholesale.product_ids()
        found = self._products.find_many_by_ids(product_ids)
        missing = sorted({product_id for product_id in product_ids if product_id not in found})
        if missing:
            raise NotFoundError(f"Product not found: {', '.join(missing)}")

        wholesale = self._wholesales.create(wholesale)
        logger.info(f"Wholesale {wholesale.id} ({wholesale.type.value}) created")
        return wholesale

    def list_all(self, wholesale_type: Optional[WholesaleType] = None) -> List[Wholesale]:
        return self._wholesales.find_all(wholesale_type)

    def get(self, wholesale_id: str) -> Wholesale:
        wholesale = self._wholesales.find_by_id(wholesale_id)
        if not wholesale:
            raise NotFoundError("Wholesale not found")
        return wholesale
