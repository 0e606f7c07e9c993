"""
Submit Driver Application Use Case
==================================

An existing account applies to become a driver.
"""
import logging
from typing import List

from app.core.exceptions import BadRequestError, NotFoundError
from app.domain.models.driver_application import (
    ApplicantProfile,
    DriverApplication,
    UploadedDocument,
)
from app.domain.models.identity import Identity
from app.domain.ports.blob_storage import BlobStorage
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.use_cases.driver.eligibility import ensure_can_apply

logger = logging.getLogger(__name__)


class SubmitDriverApplicationUseCase:
    """
    Use case for an authenticated user submitting a driver application.

    Files are uploaded one after another before the record is created.
    Uploaded files are not removed if record creation fails; use
    RegisterDriverUseCase where that matters.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        application_repository: DriverApplicationRepository,
        storage: BlobStorage,
        documents_folder: str,
    ):
        self._users = user_repository
        self._applications = application_repository
        self._storage = storage
        self._folder = documents_folder

    def execute(
        self,
        identity: Identity,
        profile: ApplicantProfile,
        documents: List[UploadedDocument],
    ) -> DriverApplication:
        """
        Execute the submit use case.

        Args:
            identity: Authenticated caller
            profile: Applicant details
            documents: Document files, at least one

        Returns:
            The created pending application

        Raises:
            NotFoundError: No account for the caller's email
            BadRequestError: Ineligible state or no documents
            ForbiddenError: Supplier account
        """
        user = self._users.find_by_email(identity.email)
        if not user:
            raise NotFoundError("Account does not exist")

        ensure_can_apply(user, self._applications)

        if not documents:
            raise BadRequestError("Documents required")

        stored = [self._storage.upload(document, self._folder) for document in documents]

        application = self._applications.create(
            DriverApplication(user_id=user.id, profile=profile, document_url=stored)
        )
        logger.info(f"Driver application {application.id} submitted by user {user.id}")
        return application
