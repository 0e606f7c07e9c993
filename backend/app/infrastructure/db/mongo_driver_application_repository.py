"""
MongoDB Driver Application Repository
=====================================

Concrete implementation of DriverApplicationRepository using MongoDB.
"""
import re
from typing import Any, List, Optional, Tuple

from pymongo import DESCENDING, ReturnDocument

from app.core.config import get_settings
from app.domain.constants.driver_application_fields import DriverApplicationFields as F
from app.domain.models.driver_application import (
    OPEN_STATUSES,
    ApplicantProfile,
    ApplicationStatus,
    DriverApplication,
    StoredFile,
)
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from app.infrastructure.db.object_ids import to_object_id, to_str_id
from app.utils.datetime_utils import now


class MongoDriverApplicationRepository(DriverApplicationRepository):
    """
    MongoDB implementation of DriverApplicationRepository.

    The applicant profile is stored flat on the document, next to the
    reference to the owning user.
    """

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(
            get_settings().driver_applications_collection
        )

    def _to_entity(self, doc: dict) -> DriverApplication:
        """Convert MongoDB document to DriverApplication entity."""
        profile = ApplicantProfile(
            first_name=doc.get(F.FIRST_NAME, ""),
            last_name=doc.get(F.LAST_NAME, ""),
            email=doc.get(F.EMAIL, ""),
            phone=doc.get(F.PHONE, ""),
            address=doc.get(F.ADDRESS, ""),
            city=doc.get(F.CITY, ""),
            state=doc.get(F.STATE, ""),
            zip_code=doc.get(F.ZIP_CODE, ""),
            license_expiry_date=doc.get(F.LICENSE_EXPIRY_DATE, ""),
            years_of_experience=doc.get(F.YEARS_OF_EXPERIENCE, 0),
        )
        documents = [
            StoredFile(public_id=item[F.DOCUMENT_PUBLIC_ID], url=item[F.DOCUMENT_URL_VALUE])
            for item in doc.get(F.DOCUMENT_URL, [])
        ]
        return DriverApplication(
            id=to_str_id(doc.get(F.MONGO_ID)),
            user_id=to_str_id(doc.get(F.USER_ID)),
            profile=profile,
            document_url=documents,
            status=ApplicationStatus(doc.get(F.STATUS, ApplicationStatus.PENDING.value)),
            is_suspended=doc.get(F.IS_SUSPENDED, False),
            suspended_until=doc.get(F.SUSPENDED_UNTIL),
            created_at=doc.get(F.CREATED_AT, now()),
            updated_at=doc.get(F.UPDATED_AT, now()),
        )

    def _to_document(self, application: DriverApplication) -> dict:
        """Convert DriverApplication entity to MongoDB document."""
        profile = application.profile
        return {
            F.USER_ID: to_object_id(application.user_id),
            F.FIRST_NAME: profile.first_name,
            F.LAST_NAME: profile.last_name,
            F.EMAIL: profile.email,
            F.PHONE: profile.phone,
            F.ADDRESS: profile.address,
            F.CITY: profile.city,
            F.STATE: profile.state,
            F.ZIP_CODE: profile.zip_code,
            F.LICENSE_EXPIRY_DATE: profile.license_expiry_date,
            F.YEARS_OF_EXPERIENCE: profile.years_of_experience,
            F.DOCUMENT_URL: [
                {F.DOCUMENT_PUBLIC_ID: stored.public_id, F.DOCUMENT_URL_VALUE: stored.url}
                for stored in application.document_url
            ],
            F.STATUS: application.status.value,
            F.IS_SUSPENDED: application.is_suspended,
            F.SUSPENDED_UNTIL: application.suspended_until,
            F.CREATED_AT: application.created_at,
            F.UPDATED_AT: application.updated_at,
        }

    def _build_filter(self, status: Optional[ApplicationStatus], search: Optional[str]) -> dict:
        query: dict = {}
        if status:
            query[F.STATUS] = status.value
        if search:
            pattern = re.escape(search)
            query["$or"] = [
                {F.FIRST_NAME: {"$regex": pattern, "$options": "i"}},
                {F.EMAIL: {"$regex": pattern, "$options": "i"}},
            ]
        return query

    def create(self, application: DriverApplication, session: Any = None) -> DriverApplication:
        """Create a new application."""
        application.created_at = now()
        application.updated_at = now()

        result = self._collection.insert_one(self._to_document(application), session=session)
        application.id = str(result.inserted_id)
        return application

    def update(self, application: DriverApplication, session: Any = None) -> DriverApplication:
        """Persist review status and suspension state."""
        application.updated_at = now()

        result = self._collection.find_one_and_update(
            {F.MONGO_ID: to_object_id(application.id)},
            {
                "$set": {
                    F.STATUS: application.status.value,
                    F.IS_SUSPENDED: application.is_suspended,
                    F.SUSPENDED_UNTIL: application.suspended_until,
                    F.UPDATED_AT: application.updated_at,
                }
            },
            return_document=ReturnDocument.AFTER,
            session=session,
        )

        if not result:
            raise ValueError(f"Driver application '{application.id}' not found")

        return self._to_entity(result)

    def find_by_id(self, application_id: str, session: Any = None) -> Optional[DriverApplication]:
        """Find an application by id."""
        oid = to_object_id(application_id)
        if oid is None:
            return None
        doc = self._collection.find_one({F.MONGO_ID: oid}, session=session)
        return self._to_entity(doc) if doc else None

    def find_open_by_user_id(self, user_id: str, session: Any = None) -> Optional[DriverApplication]:
        """Find the user's pending or approved application."""
        doc = self._collection.find_one(
            {
                F.USER_ID: to_object_id(user_id),
                F.STATUS: {"$in": [status.value for status in OPEN_STATUSES]},
            },
            session=session,
        )
        return self._to_entity(doc) if doc else None

    def find_latest_by_user_id(self, user_id: str) -> Optional[DriverApplication]:
        """Find the user's most recent application."""
        doc = self._collection.find_one(
            {F.USER_ID: to_object_id(user_id)},
            sort=[(F.CREATED_AT, DESCENDING)],
        )
        return self._to_entity(doc) if doc else None

    def find_page(
        self,
        status: Optional[ApplicationStatus],
        search: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[DriverApplication], int]:
        """Find one page of applications, newest first."""
        query = self._build_filter(status, search)
        docs = (
            self._collection.find(query)
            .sort(F.CREATED_AT, DESCENDING)
            .skip(skip)
            .limit(limit)
        )
        total = self._collection.count_documents(query)
        return [self._to_entity(doc) for doc in docs], total

    def delete(self, application_id: str, session: Any = None) -> bool:
        """Delete an application."""
        oid = to_object_id(application_id)
        if oid is None:
            return False
        result = self._collection.delete_one({F.MONGO_ID: oid}, session=session)
        return result.deleted_count > 0
