"""
MongoDB Review Repository
=========================
"""
from typing import Any, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from app.core.config import get_settings
from app.core.exceptions import BadRequestError
from app.domain.constants.review_fields import ReviewFields
from app.domain.models.review import Review
from app.domain.repositories.review_repository import ReviewRepository
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from app.infrastructure.db.object_ids import to_object_id
from app.utils.datetime_utils import now


class MongoReviewRepository(ReviewRepository):
    """MongoDB implementation of ReviewRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().reviews_collection)
        self._collection.create_index(
            [
                (ReviewFields.USER_ID, ASCENDING),
                (ReviewFields.ORDER_ID, ASCENDING),
                (ReviewFields.PRODUCT_ID, ASCENDING),
            ],
            unique=True,
        )

    def _to_document(self, review: Review) -> dict:
        return {
            ReviewFields.USER_ID: to_object_id(review.user_id),
            ReviewFields.ORDER_ID: to_object_id(review.order_id),
            ReviewFields.PRODUCT_ID: to_object_id(review.product_id),
            ReviewFields.RATING: review.rating,
            ReviewFields.COMMENT: review.comment,
            ReviewFields.STATUS: review.status.value,
            ReviewFields.CREATED_AT: review.created_at,
            ReviewFields.UPDATED_AT: review.updated_at,
        }

    def create(self, review: Review, session: Any = None) -> Review:
        review.created_at = now()
        review.updated_at = now()

        try:
            result = self._collection.insert_one(self._to_document(review), session=session)
        except DuplicateKeyError:
            raise BadRequestError("You already reviewed this product")
        review.id = str(result.inserted_id)
        return review

    def exists_for(self, user_id: str, order_id: str, product_id: str) -> bool:
        count = self._collection.count_documents(
            {
                ReviewFields.USER_ID: to_object_id(user_id),
                ReviewFields.ORDER_ID: to_object_id(order_id),
                ReviewFields.PRODUCT_ID: to_object_id(product_id),
            },
            limit=1,
        )
        return count > 0
