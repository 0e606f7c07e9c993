"""
Caller Identity
===============

Explicit values describing who is calling a service operation.
"""
from dataclasses import dataclass
from typing import Optional, Union

from app.domain.models.driver_application import ApplicantProfile
from app.domain.models.user import UserRole


@dataclass(frozen=True)
class Identity:
    """Verified email and role of an authenticated caller."""
    email: str
    role: UserRole

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles


@dataclass(frozen=True)
class LoggedIn:
    """Driver submission from an authenticated account."""
    identity: Identity
    profile: ApplicantProfile


@dataclass(frozen=True)
class Guest:
    """Driver submission that also registers a new account."""
    profile: ApplicantProfile
    password: Optional[str] = None


Submission = Union[LoggedIn, Guest]
