"""
User Model
==========

Domain model representing a marketplace account.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from app.utils.datetime_utils import now


class UserRole(str, Enum):
    CUSTOMER = "customer"
    DRIVER = "driver"
    SUPPLIER = "supplier"
    ADMIN = "admin"


@dataclass
class User:
    """
    User domain model.

    ``password`` holds the hash, never the plain text.
    """
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: Optional[str] = None
    password: Optional[str] = None
    role: UserRole = UserRole.CUSTOMER
    is_verified: bool = False
    is_suspended: bool = False
    image: Optional[str] = None
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def promote_to(self, role: UserRole) -> None:
        """Change the user's role."""
        self.role = role
        self.updated_at = now()

    def public_profile(self) -> dict:
        """Fields safe to embed in other resources."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "image": self.image,
        }
