"""
Driver Application Repository Interface
=======================================

Abstract interface for driver application data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from app.domain.models.driver_application import ApplicationStatus, DriverApplication


class DriverApplicationRepository(ABC):
    """Abstract repository for driver application persistence operations."""

    @abstractmethod
    def create(self, application: DriverApplication, session: Any = None) -> DriverApplication:
        """
        Create a new application.

        Args:
            application: Application entity to create
            session: Optional transaction session

        Returns:
            Created application with its id assigned
        """
        pass

    @abstractmethod
    def update(self, application: DriverApplication, session: Any = None) -> DriverApplication:
        """
        Persist status, suspension and timestamps of an existing application.

        Raises:
            ValueError: If the application does not exist
        """
        pass

    @abstractmethod
    def find_by_id(self, application_id: str, session: Any = None) -> Optional[DriverApplication]:
        pass

    @abstractmethod
    def find_open_by_user_id(self, user_id: str, session: Any = None) -> Optional[DriverApplication]:
        """Find the user's pending or approved application, if any."""
        pass

    @abstractmethod
    def find_latest_by_user_id(self, user_id: str) -> Optional[DriverApplication]:
        """Find the user's most recently created application."""
        pass

    @abstractmethod
    def find_page(
        self,
        status: Optional[ApplicationStatus],
        search: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[DriverApplication], int]:
        """
        Find one page of applications, newest first.

        Args:
            status: Only applications in this status
            search: Case-insensitive substring matched against first name or email
            skip: Number of matching applications to skip
            limit: Maximum number of applications to return

        Returns:
            (applications on this page, total number of matches)
        """
        pass

    @abstractmethod
    def delete(self, application_id: str, session: Any = None) -> bool:
        pass
