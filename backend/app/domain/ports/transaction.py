"""
Transaction Port
================

Scoped unit of work spanning several collections.
"""
from abc import ABC, abstractmethod
from typing import Any, ContextManager


class TransactionManager(ABC):
    """Opens store transactions."""

    @abstractmethod
    def transaction(self) -> ContextManager[Any]:
        """
        Open a transaction.

        Usage:
            with transactions.transaction() as session:
                users.create(user, session=session)
                applications.create(application, session=session)

        The block commits on normal exit. Any exception aborts the
        transaction, releases the session and propagates unchanged.
        """
        pass
