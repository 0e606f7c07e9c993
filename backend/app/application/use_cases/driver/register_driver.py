"""
Register Driver Use Case
========================

Single entry point for driver sign-up, either from an existing account or
from a guest who registers an account at the same time.

The account (for guests) and the application are written in one store
transaction. Document files live in blob storage, outside that transaction,
so when anything fails the files uploaded so far are deleted again before
the original error is re-raised.
"""
import logging
from typing import Any, List

from werkzeug.security import generate_password_hash

from app.core.exceptions import BadRequestError, ConflictError, NotFoundError
from app.domain.models.driver_application import DriverApplication, StoredFile, UploadedDocument
from app.domain.models.identity import Guest, LoggedIn, Submission
from app.domain.models.user import User, UserRole
from app.domain.ports.blob_storage import BlobStorage
from app.domain.ports.transaction import TransactionManager
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.use_cases.driver.compensation import discard_uploaded_files
from app.application.use_cases.driver.eligibility import ensure_can_apply
from app.application.use_cases.driver.views import RegistrationResult

logger = logging.getLogger(__name__)


class RegisterDriverUseCase:
    """Use case for all-or-nothing driver registration."""

    def __init__(
        self,
        user_repository: UserRepository,
        application_repository: DriverApplicationRepository,
        storage: BlobStorage,
        transactions: TransactionManager,
        documents_folder: str,
    ):
        self._users = user_repository
        self._applications = application_repository
        self._storage = storage
        self._transactions = transactions
        self._folder = documents_folder

    def execute(self, submission: Submission, documents: List[UploadedDocument]) -> RegistrationResult:
        """
        Execute the registration.

        Args:
            submission: LoggedIn for an authenticated caller, Guest for a new account
            documents: Document files, at least one

        Returns:
            Ids of the applicant account and the created application
        """
        uploaded: List[StoredFile] = []
        try:
            with self._transactions.transaction() as session:
                user_id = self._resolve_applicant(submission, session)

                if not documents:
                    raise BadRequestError("Documents are required")

                for document in documents:
                    uploaded.append(self._storage.upload(document, self._folder))

                application = self._applications.create(
                    DriverApplication(
                        user_id=user_id,
                        profile=submission.profile,
                        document_url=list(uploaded),
                    ),
                    session=session,
                )
        except Exception:
            if uploaded:
                logger.warning(f"Driver registration failed, removing {len(uploaded)} uploaded file(s)")
                discard_uploaded_files(self._storage, uploaded)
            raise

        logger.info(f"Driver application {application.id} registered for user {user_id}")
        return RegistrationResult(user_id=user_id, driver_id=application.id)

    def _resolve_applicant(self, submission: Submission, session: Any) -> str:
        if isinstance(submission, LoggedIn):
            return self._resolve_existing(submission, session)
        if isinstance(submission, Guest):
            return self._register_guest(submission, session)
        raise TypeError(f"Unsupported submission: {type(submission).__name__}")

    def _resolve_existing(self, submission: LoggedIn, session: Any) -> str:
        user = self._users.find_by_email(submission.identity.email, session=session)
        if not user:
            raise NotFoundError("User not found")

        ensure_can_apply(user, self._applications, session=session)
        return user.id

    def _register_guest(self, submission: Guest, session: Any) -> str:
        if not submission.password:
            raise BadRequestError("Password is required")

        profile = submission.profile
        if self._users.find_by_email_or_phone(profile.email, profile.phone, session=session):
            raise ConflictError("Email or Phone already exists")

        user = self._users.create(
            User(
                email=profile.email,
                first_name=profile.first_name,
                last_name=profile.last_name,
                phone=profile.phone,
                password=generate_password_hash(submission.password),
                role=UserRole.CUSTOMER,
                is_verified=False,
            ),
            session=session,
        )
        logger.info(f"Registered guest account {user.id} for driver application")
        return user.id
