"""
Cart and Wishlist Repository Interfaces
=======================================
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.domain.models.cart import CartItem, WishlistItem


class CartRepository(ABC):
    """Abstract repository for cart lines."""

    @abstractmethod
    def create(self, item: CartItem) -> CartItem:
        pass

    @abstractmethod
    def update(self, item: CartItem) -> CartItem:
        pass

    @abstractmethod
    def find_line(self, user_id: str, product_id: str) -> Optional[CartItem]:
        pass

    @abstractmethod
    def find_page(self, user_id: str, skip: int, limit: int) -> Tuple[List[CartItem], int]:
        """
        Find one page of a user's cart, newest first.

        Returns:
            (lines on this page, total number of lines)
        """
        pass

    @abstractmethod
    def delete(self, item_id: str) -> bool:
        pass


class WishlistRepository(ABC):
    """Abstract repository for wishlist entries."""

    @abstractmethod
    def create(self, item: WishlistItem) -> WishlistItem:
        pass

    @abstractmethod
    def find_line(self, user_id: str, product_id: str) -> Optional[WishlistItem]:
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> List[WishlistItem]:
        pass
