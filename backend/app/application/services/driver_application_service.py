"""
Driver Application Service
==========================

Application service that coordinates the driver onboarding workflow.
This service orchestrates multiple use cases.
"""
from typing import List, Optional

from app.core.exceptions import NotFoundError
from app.domain.models.driver_application import (
    ApplicantProfile,
    ApplicationStatus,
    DriverApplication,
    UploadedDocument,
)
from app.domain.models.identity import Identity, Submission
from app.domain.ports.blob_storage import BlobStorage
from app.domain.ports.notifier import Notifier
from app.domain.ports.transaction import TransactionManager
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.use_cases.driver import (
    DeleteDriverApplicationUseCase,
    ListDriverApplicationsUseCase,
    RegisterDriverUseCase,
    SubmitDriverApplicationUseCase,
    ToggleSuspensionUseCase,
    UpdateApplicationStatusUseCase,
)
from app.application.use_cases.driver.views import (
    DeletionResult,
    DriverApplicationView,
    RegistrationResult,
)
from app.utils.pagination import Page


class DriverApplicationService:
    """
    Application service for driver applications.

    This service coordinates multiple use cases and provides
    a high-level interface for driver onboarding and administration.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        application_repository: DriverApplicationRepository,
        storage: BlobStorage,
        notifier: Notifier,
        transactions: TransactionManager,
        documents_folder: str = "drivers/documents",
        default_page_size: int = 10,
    ):
        """
        Initialize service with repositories and ports.

        Args:
            user_repository: Repository for user accounts
            application_repository: Repository for driver applications
            storage: Blob storage for document files
            notifier: Email sender for decision notifications
            transactions: Store transaction manager
            documents_folder: Storage folder for uploaded documents
            default_page_size: Page size when none is requested
        """
        self._users = user_repository
        self._applications = application_repository
        self._submit_use_case = SubmitDriverApplicationUseCase(
            user_repository, application_repository, storage, documents_folder
        )
        self._register_use_case = RegisterDriverUseCase(
            user_repository, application_repository, storage, transactions, documents_folder
        )
        self._update_status_use_case = UpdateApplicationStatusUseCase(
            user_repository, application_repository, transactions, notifier
        )
        self._toggle_suspension_use_case = ToggleSuspensionUseCase(application_repository)
        self._delete_use_case = DeleteDriverApplicationUseCase(
            user_repository, application_repository, storage
        )
        self._list_use_case = ListDriverApplicationsUseCase(
            user_repository, application_repository, default_page_size
        )

    def submit(
        self,
        identity: Identity,
        profile: ApplicantProfile,
        documents: List[UploadedDocument],
    ) -> DriverApplication:
        """
        Submit an application for an existing account.

        Args:
            identity: Authenticated caller
            profile: Applicant details
            documents: Uploaded document files

        Returns:
            The created pending application
        """
        return self._submit_use_case.execute(identity, profile, documents)

    def register(self, submission: Submission, documents: List[UploadedDocument]) -> RegistrationResult:
        """
        Submit an application, registering a guest account when needed.

        Either every store write happens or none does; uploaded files of a
        failed attempt are removed again.
        """
        return self._register_use_case.execute(submission, documents)

    def update_status(self, application_id: str, status: ApplicationStatus) -> DriverApplication:
        return self._update_status_use_case.execute(application_id, status)

    def toggle_suspension(self, application_id: str, days: Optional[int] = None) -> DriverApplication:
        return self._toggle_suspension_use_case.execute(application_id, days)

    def get_single(self, application_id: str) -> DriverApplicationView:
        """
        Get one application with its owner.

        Raises:
            NotFoundError: Unknown application
        """
        application = self._applications.find_by_id(application_id)
        if not application:
            raise NotFoundError("Driver application not found")
        return DriverApplicationView(
            application=application,
            owner=self._users.find_by_id(application.user_id),
        )

    def get_mine(self, identity: Identity) -> Optional[DriverApplicationView]:
        """Get the caller's most recent application, if any."""
        user = self._users.find_by_email(identity.email)
        if not user:
            raise NotFoundError("User not found")

        application = self._applications.find_latest_by_user_id(user.id)
        if not application:
            return None
        return DriverApplicationView(application=application, owner=user)

    def list_applications(
        self,
        status: Optional[ApplicationStatus] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Page[DriverApplicationView]:
        """
        List applications, newest first.

        Args:
            status: Only applications in this status
            search: Case-insensitive substring of first name or email
            page: 1-based page number
            limit: Page size

        Returns:
            One page of applications with pagination meta
        """
        return self._list_use_case.execute(status=status, search=search, page=page, limit=limit)

    def delete(self, application_id: str) -> DeletionResult:
        return self._delete_use_case.execute(application_id)
