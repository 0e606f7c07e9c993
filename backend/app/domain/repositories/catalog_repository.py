"""
Catalog and Counter Repository Interfaces
=========================================
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

from app.domain.models.product import Product


class ProductRepository(ABC):
    """Read-only access to the product catalog."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        pass

    @abstractmethod
    def find_many_by_ids(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        """
        Resolve several products at once.

        Returns:
            Mapping of product id to product; unknown ids are absent
        """
        pass


class CounterRepository(ABC):
    """Named monotonically increasing sequences."""

    @abstractmethod
    def next_value(self, name: str, session: Any = None) -> int:
        """
        Atomically increment the named sequence and return the new value.

        A sequence that does not exist yet starts from CounterFields.START_SEQ.
        """
        pass
