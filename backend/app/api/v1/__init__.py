"""
API v1 Package
===============

Version 1 API controllers.
"""
from .driver_controller import router as driver_router
from .review_controller import router as review_router
from .cart_controller import router as cart_router
from .wishlist_controller import router as wishlist_router
from .order_controller import router as order_router
from .wholesale_controller import router as wholesale_router
from .dashboard_controller import router as dashboard_router

__all__ = [
    "driver_router",
    "review_router",
    "cart_router",
    "wishlist_router",
    "order_router",
    "wholesale_router",
    "dashboard_router",
]
