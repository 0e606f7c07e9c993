"""
Update Driver Application Status Use Case
=========================================

Administrator decision on a pending application.
"""
import logging

from app.core.exceptions import BadRequestError, NotFoundError
from app.domain.models.driver_application import ApplicationStatus, DriverApplication
from app.domain.models.user import UserRole
from app.domain.ports.notifier import EmailMessage, Notifier
from app.domain.ports.transaction import TransactionManager
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.emails import driver_approved_email, driver_rejected_email

logger = logging.getLogger(__name__)

DECISION_STATUSES = (ApplicationStatus.APPROVED, ApplicationStatus.REJECTED)


class UpdateApplicationStatusUseCase:
    """
    Use case for approving or rejecting a driver application.

    Approval sets the status and promotes the owner to driver in a single
    transaction. The applicant is emailed only after the commit, and a
    failed email never undoes the decision.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        application_repository: DriverApplicationRepository,
        transactions: TransactionManager,
        notifier: Notifier,
    ):
        self._users = user_repository
        self._applications = application_repository
        self._transactions = transactions
        self._notifier = notifier

    def execute(self, application_id: str, status: ApplicationStatus) -> DriverApplication:
        """
        Execute the status update.

        Args:
            application_id: Application to decide on
            status: approved or rejected

        Returns:
            The updated application

        Raises:
            NotFoundError: Unknown application, or its owner no longer exists
            BadRequestError: Invalid target status or no change
        """
        if status not in DECISION_STATUSES:
            raise BadRequestError(f"Invalid status: {status.value}")

        with self._transactions.transaction() as session:
            application = self._applications.find_by_id(application_id, session=session)
            if not application:
                raise NotFoundError("Driver application not found")

            try:
                application.change_status(status)
            except ValueError as e:
                raise BadRequestError(str(e))

            application = self._applications.update(application, session=session)

            if status == ApplicationStatus.APPROVED:
                user = self._users.find_by_id(application.user_id, session=session)
                if not user:
                    raise NotFoundError("User not found")
                user.promote_to(UserRole.DRIVER)
                self._users.update(user, session=session)

        logger.info(f"Driver application {application.id} {status.value}")

        if status == ApplicationStatus.APPROVED:
            self._notify_quietly(driver_approved_email(application))
        else:
            self._notify_quietly(driver_rejected_email(application))

        return application

    def _notify_quietly(self, message: EmailMessage) -> None:
        """Send a post-commit email; failures are logged only."""
        try:
            sent = self._notifier.send(message)
        except Exception as e:
            logger.warning(f"Failed to send '{message.subject}' to {message.to}: {e}")
            return
        if not sent:
            logger.warning(f"Email '{message.subject}' to {message.to} was not delivered")
