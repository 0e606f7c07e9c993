"""
Cart and Wishlist Models
========================

One document per (user, product) line.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.utils.datetime_utils import now


@dataclass
class CartItem:
    user_id: str
    product_id: str
    quantity: int = 1
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def increase(self, quantity: int) -> None:
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        self.quantity += quantity
        self.updated_at = now()

    def decrease(self, quantity: int) -> None:
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.quantity - quantity < 1:
            raise ValueError("Quantity cannot be less than 1")
        self.quantity -= quantity
        self.updated_at = now()


@dataclass
class WishlistItem:
    user_id: str
    product_id: str
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
