from dataclasses import dataclass
from typing import Optional

from app.domain.models.driver_application import DriverApplication
from app.domain.models.user import User


@dataclass
class DriverApplicationView:
    """An application together with its owner's account, if it still exists."""
    application: DriverApplication
    owner: Optional[User] = None


@dataclass
class RegistrationResult:
    user_id: str
    driver_id: str


@dataclass
class DeletionResult:
    success: bool
    message: str
