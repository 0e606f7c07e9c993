import logging
from typing import Optional

from app.core.exceptions import NotFoundError
from app.domain.models.driver_application import DriverApplication
from app.domain.repositories.driver_application_repository import DriverApplicationRepository

logger = logging.getLogger(__name__)


class ToggleSuspensionUseCase:
    """Suspend an active driver or lift an existing suspension."""

    def __init__(self, application_repository: DriverApplicationRepository):
        self._applications = application_repository

    def execute(self, application_id: str, days: Optional[int] = None) -> DriverApplication:
        application = self._applications.find_by_id(application_id)
        if not application:
            raise NotFoundError("Driver application not found")

        application.toggle_suspension(days)
        application = self._applications.update(application)

        state = "suspended" if application.is_suspended else "unsuspended"
        logger.info(f"Driver application {application.id} {state}")
        return application
