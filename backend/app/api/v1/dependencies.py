"""
API Dependencies
================

FastAPI dependencies resolving services from the DI container and the
caller's identity from a bearer JWT.
"""
import logging
from typing import Callable, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import get_settings
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.domain.models.identity import Identity
from app.domain.models.user import UserRole
from app.application.services.cart_service import CartService
from app.application.services.dashboard_service import DashboardService
from app.application.services.driver_application_service import DriverApplicationService
from app.application.services.order_service import OrderService
from app.application.services.review_service import ReviewService
from app.application.services.wholesale_service import WholesaleService
from app.application.services.wishlist_service import WishlistService
from app.di.container import get_container

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_driver_service() -> DriverApplicationService:
    """
    Get driver application service instance (singleton).

    Returns:
        DriverApplicationService instance
    """
    return get_container().get(DriverApplicationService)


def get_review_service() -> ReviewService:
    return get_container().get(ReviewService)


def get_cart_service() -> CartService:
    return get_container().get(CartService)


def get_wishlist_service() -> WishlistService:
    return get_container().get(WishlistService)


def get_order_service() -> OrderService:
    return get_container().get(OrderService)


def get_wholesale_service() -> WholesaleService:
    return get_container().get(WholesaleService)


def get_dashboard_service() -> DashboardService:
    return get_container().get(DashboardService)


def decode_identity(token: str) -> Identity:
    """
    Decode a bearer token into an Identity.

    Raises:
        UnauthorizedError: Invalid, expired or incomplete token
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.InvalidTokenError as e:
        raise UnauthorizedError(f"Invalid token: {e}")

    email = payload.get("email")
    try:
        role = UserRole(payload.get("role"))
    except ValueError:
        raise UnauthorizedError("Invalid token: unknown role")
    if not email:
        raise UnauthorizedError("Invalid token: missing email")
    return Identity(email=email, role=role)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    if credentials is None:
        raise UnauthorizedError("You are not authorized")
    return decode_identity(credentials.credentials)


def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Identity]:
    """Identity when a valid token is sent; None for guests and unusable tokens."""
    if credentials is None:
        return None
    try:
        return decode_identity(credentials.credentials)
    except UnauthorizedError as e:
        logger.info(f"Ignoring bearer token, continuing as guest: {e.message}")
        return None


def require_roles(*roles: UserRole) -> Callable[..., Identity]:
    """Dependency factory accepting only callers holding one of ``roles``."""

    def role_dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        if not identity.has_role(*roles):
            raise ForbiddenError("You are not authorized")
        return identity

    return role_dependency
