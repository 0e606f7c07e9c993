"""
Wholesale Repository Interface
==============================
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.wholesale import Wholesale, WholesaleType


class WholesaleRepository(ABC):
    """Abstract repository for wholesale catalog entries."""

    @abstractmethod
    def create(self, wholesale: Wholesale) -> Wholesale:
        pass

    @abstractmethod
    def find_by_id(self, wholesale_id: str) -> Optional[Wholesale]:
        pass

    @abstractmethod
    def find_all(self, wholesale_type: Optional[WholesaleType] = None) -> List[Wholesale]:
        """Find entries, newest first, optionally restricted to one type."""
        pass
