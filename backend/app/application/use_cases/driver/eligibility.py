"""Rules deciding whether an account may apply to become a driver."""
from typing import Any

from app.core.exceptions import BadRequestError, ForbiddenError
from app.domain.models.user import User, UserRole
from app.domain.repositories.driver_application_repository import DriverApplicationRepository


def ensure_can_apply(
    user: User,
    applications: DriverApplicationRepository,
    session: Any = None,
) -> None:
    """
    Raise if ``user`` may not submit a driver application.

    Raises:
        BadRequestError: Already a driver, or a pending/approved application exists
        ForbiddenError: Supplier accounts are never eligible
    """
    if user.role == UserRole.DRIVER:
        raise BadRequestError("You are already a driver")
    if user.role == UserRole.SUPPLIER:
        raise ForbiddenError("Supplier accounts cannot register as drivers. Use a different email.")

    existing = applications.find_open_by_user_id(user.id, session=session)
    if existing:
        raise BadRequestError(f"Request already {existing.status.value}")
