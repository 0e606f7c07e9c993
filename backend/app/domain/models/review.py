"""
Review Model
============

Domain model for a product review tied to a delivered order.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from app.utils.datetime_utils import now


class ReviewStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class Review:
    user_id: str
    order_id: str
    product_id: str
    rating: int
    comment: str = ""
    status: ReviewStatus = ReviewStatus.PENDING
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
