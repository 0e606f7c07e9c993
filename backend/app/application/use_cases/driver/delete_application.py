"""
Delete Driver Application Use Case
==================================

Cascading removal of an application, its owner account and its documents.
"""
import logging

from app.core.exceptions import NotFoundError
from app.domain.ports.blob_storage import BlobStorage
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.use_cases.driver.compensation import discard_uploaded_files
from app.application.use_cases.driver.views import DeletionResult

logger = logging.getLogger(__name__)


class DeleteDriverApplicationUseCase:
    """
    Use case for deleting a driver application.

    The owning user account is removed first, then the stored documents
    (best-effort), then the application record itself.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        application_repository: DriverApplicationRepository,
        storage: BlobStorage,
    ):
        self._users = user_repository
        self._applications = application_repository
        self._storage = storage

    def execute(self, application_id: str) -> DeletionResult:
        """
        Execute the deletion.

        Raises:
            NotFoundError: Unknown application
        """
        application = self._applications.find_by_id(application_id)
        if not application:
            raise NotFoundError("Driver application not found")

        if not self._users.delete(application.user_id):
            logger.warning(f"Owner {application.user_id} of driver application {application.id} was already gone")

        discard_uploaded_files(self._storage, application.document_url)
        self._applications.delete(application.id)

        logger.info(f"Driver application {application.id} deleted with owner {application.user_id}")
        return DeletionResult(success=True, message="Driver application deleted successfully")
