from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.ports.blob_storage import BlobStorage
from ...domain.ports.notifier import Notifier
from ...domain.ports.transaction import TransactionManager
from ...domain.repositories.driver_application_repository import DriverApplicationRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.driver_application_service import DriverApplicationService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DriverProvider:
    """Driver service provider - registers the driver onboarding service"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register driver application service.
        Service is created with repositories and ports from container.
        """
        settings = get_settings()
        container.register_singleton(
            DriverApplicationService,
            DriverApplicationService(
                user_repository=container.get(UserRepository),
                application_repository=container.get(DriverApplicationRepository),
                storage=container.get(BlobStorage),
                notifier=container.get(Notifier),
                transactions=container.get(TransactionManager),
                documents_folder=settings.driver_documents_folder,
                default_page_size=settings.default_page_size,
            ),
        )
