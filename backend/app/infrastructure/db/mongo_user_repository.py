"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
from typing import Any, Dict, Iterable, Optional

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.config import get_settings
from app.core.exceptions import ConflictError
from app.domain.constants.user_fields import UserFields
from app.domain.models.user import User, UserRole
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from app.infrastructure.db.object_ids import to_object_id, to_object_ids, to_str_id
from app.utils.datetime_utils import now


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Handles all user persistence operations using MongoDB.
    """

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().users_collection)
        self._collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=to_str_id(doc.get(UserFields.MONGO_ID)),
            email=doc[UserFields.EMAIL],
            first_name=doc.get(UserFields.FIRST_NAME, ""),
            last_name=doc.get(UserFields.LAST_NAME, ""),
            phone=doc.get(UserFields.PHONE),
            password=doc.get(UserFields.PASSWORD),
            role=UserRole(doc.get(UserFields.ROLE, UserRole.CUSTOMER.value)),
            is_verified=doc.get(UserFields.IS_VERIFIED, False),
            is_suspended=doc.get(UserFields.IS_SUSPENDED, False),
            image=doc.get(UserFields.IMAGE),
            created_at=doc.get(UserFields.CREATED_AT, now()),
            updated_at=doc.get(UserFields.UPDATED_AT, now()),
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document."""
        return {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.EMAIL: user.email,
            UserFields.PHONE: user.phone,
            UserFields.PASSWORD: user.password,
            UserFields.ROLE: user.role.value,
            UserFields.IS_VERIFIED: user.is_verified,
            UserFields.IS_SUSPENDED: user.is_suspended,
            UserFields.IMAGE: user.image,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }

    def create(self, user: User, session: Any = None) -> User:
        """Create a new user."""
        user.created_at = now()
        user.updated_at = now()

        try:
            result = self._collection.insert_one(self._to_document(user), session=session)
        except DuplicateKeyError:
            raise ConflictError("Email already exists")
        user.id = str(result.inserted_id)
        return user

    def update(self, user: User, session: Any = None) -> User:
        """Update an existing user."""
        user.updated_at = now()

        doc = self._to_document(user)
        result = self._collection.find_one_and_update(
            {UserFields.MONGO_ID: to_object_id(user.id)},
            {"$set": {k: v for k, v in doc.items() if k != UserFields.CREATED_AT}},
            return_document=ReturnDocument.AFTER,
            session=session,
        )

        if not result:
            raise ValueError(f"User '{user.id}' not found")

        return self._to_entity(result)

    def find_by_id(self, user_id: str, session: Any = None) -> Optional[User]:
        """Find a user by id."""
        oid = to_object_id(user_id)
        if oid is None:
            return None
        doc = self._collection.find_one({UserFields.MONGO_ID: oid}, session=session)
        return self._to_entity(doc) if doc else None

    def find_by_email(self, email: str, session: Any = None) -> Optional[User]:
        """Find a user by email."""
        doc = self._collection.find_one({UserFields.EMAIL: email}, session=session)
        return self._to_entity(doc) if doc else None

    def find_by_email_or_phone(
        self,
        email: str,
        phone: Optional[str],
        session: Any = None,
    ) -> Optional[User]:
        """Find any user owning either the email or the phone number."""
        conditions = [{UserFields.EMAIL: email}]
        if phone:
            conditions.append({UserFields.PHONE: phone})
        doc = self._collection.find_one({"$or": conditions}, session=session)
        return self._to_entity(doc) if doc else None

    def find_many_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Resolve several users at once."""
        oids = to_object_ids(set(user_ids))
        if not oids:
            return {}
        docs = self._collection.find({UserFields.MONGO_ID: {"$in": oids}})
        users = (self._to_entity(doc) for doc in docs)
        return {user.id: user for user in users}

    def delete(self, user_id: str, session: Any = None) -> bool:
        """Delete a user account."""
        oid = to_object_id(user_id)
        if oid is None:
            return False
        result = self._collection.delete_one({UserFields.MONGO_ID: oid}, session=session)
        return result.deleted_count > 0

    def count_active_by_role(self, role: UserRole) -> int:
        """Count non-suspended users holding a role."""
        return self._collection.count_documents(
            {UserFields.ROLE: role.value, UserFields.IS_SUSPENDED: False}
        )
