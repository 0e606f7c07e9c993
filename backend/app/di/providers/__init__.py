"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .infrastructure_provider import InfrastructureProvider
from .driver_provider import DriverProvider
from .order_provider import OrderProvider
from .cart_provider import CartProvider
from .wholesale_provider import WholesaleProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "InfrastructureProvider",
    "DriverProvider",
    "OrderProvider",
    "CartProvider",
    "WholesaleProvider",
]
