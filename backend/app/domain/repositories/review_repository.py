"""
Review Repository Interface
===========================
"""
from abc import ABC, abstractmethod
from typing import Any

from app.domain.models.review import Review


class ReviewRepository(ABC):
    """Abstract repository for review persistence operations."""

    @abstractmethod
    def create(self, review: Review, session: Any = None) -> Review:
        pass

    @abstractmethod
    def exists_for(self, user_id: str, order_id: str, product_id: str) -> bool:
        """Check if the user already reviewed this product for this order."""
        pass
