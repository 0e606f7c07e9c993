# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    CartProvider,
    DatabaseProvider,
    DriverProvider,
    InfrastructureProvider,
    OrderProvider,
    RepositoryProvider,
    WholesaleProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Storage, email and transactions (InfrastructureProvider) - depends on database
    4. Services (Driver, Order, Cart, Wholesale providers) - depend on all of the above
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → infrastructure → services
        """
        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register blob storage, notifier and transaction manager
        InfrastructureProvider.register(self)

        # Step 4: Register services (depends on repositories and infrastructure)
        DriverProvider.register(self)
        OrderProvider.register(self)
        CartProvider.register(self)
        WholesaleProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
