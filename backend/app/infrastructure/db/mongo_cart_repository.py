"""
MongoDB Cart and Wishlist Repositories
======================================

One document per (user, product) line.
"""
from typing import List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.config import get_settings
from app.core.exceptions import ConflictError
from app.domain.constants.cart_fields import CartFields, WishlistFields
from app.domain.models.cart import CartItem, WishlistItem
from app.domain.repositories.cart_repository import CartRepository, WishlistRepository
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from app.infrastructure.db.object_ids import to_object_id, to_str_id
from app.utils.datetime_utils import now


class MongoCartRepository(CartRepository):
    """MongoDB implementation of CartRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().carts_collection)
        self._collection.create_index(
            [(CartFields.USER_ID, ASCENDING), (CartFields.PRODUCT_ID, ASCENDING)],
            unique=True,
        )

    def _to_entity(self, doc: dict) -> CartItem:
        return CartItem(
            id=to_str_id(doc.get(CartFields.MONGO_ID)),
            user_id=to_str_id(doc.get(CartFields.USER_ID)),
            product_id=to_str_id(doc.get(CartFields.PRODUCT_ID)),
            quantity=doc.get(CartFields.QUANTITY, 1),
            created_at=doc.get(CartFields.CREATED_AT, now()),
            updated_at=doc.get(CartFields.UPDATED_AT, now()),
        )

    def create(self, item: CartItem) -> CartItem:
        item.created_at = now()
        item.updated_at = now()

        try:
            result = self._collection.insert_one(
                {
                    CartFields.USER_ID: to_object_id(item.user_id),
                    CartFields.PRODUCT_ID: to_object_id(item.product_id),
                    CartFields.QUANTITY: item.quantity,
                    CartFields.CREATED_AT: item.created_at,
                    CartFields.UPDATED_AT: item.updated_at,
                }
            )
        except DuplicateKeyError:
            raise ConflictError("Product is already in your cart")
        item.id = str(result.inserted_id)
        return item

    def update(self, item: CartItem) -> CartItem:
        item.updated_at = now()

        result = self._collection.find_one_and_update(
            {CartFields.MONGO_ID: to_object_id(item.id)},
            {"$set": {CartFields.QUANTITY: item.quantity, CartFields.UPDATED_AT: item.updated_at}},
            return_document=ReturnDocument.AFTER,
        )

        if not result:
            raise ValueError(f"Cart item '{item.id}' not found")

        return self._to_entity(result)

    def find_line(self, user_id: str, product_id: str) -> Optional[CartItem]:
        doc = self._collection.find_one(
            {
                CartFields.USER_ID: to_object_id(user_id),
                CartFields.PRODUCT_ID: to_object_id(product_id),
            }
        )
        return self._to_entity(doc) if doc else None

    def find_page(self, user_id: str, skip: int, limit: int) -> Tuple[List[CartItem], int]:
        query = {CartFields.USER_ID: to_object_id(user_id)}
        docs = (
            self._collection.find(query)
            .sort(CartFields.CREATED_AT, DESCENDING)
            .skip(skip)
            .limit(limit)
        )
        total = self._collection.count_documents(query)
        return [self._to_entity(doc) for doc in docs], total

    def delete(self, item_id: str) -> bool:
        oid = to_object_id(item_id)
        if oid is None:
            return False
        return self._collection.delete_one({CartFields.MONGO_ID: oid}).deleted_count > 0


class MongoWishlistRepository(WishlistRepository):
    """MongoDB implementation of WishlistRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().wishlists_collection)
        self._collection.create_index(
            [(WishlistFields.USER_ID, ASCENDING), (WishlistFields.PRODUCT_ID, ASCENDING)],
            unique=True,
        )

    def _to_entity(self, doc: dict) -> WishlistItem:
        return WishlistItem(
            id=to_str_id(doc.get(WishlistFields.MONGO_ID)),
            user_id=to_str_id(doc.get(WishlistFields.USER_ID)),
            product_id=to_str_id(doc.get(WishlistFields.PRODUCT_ID)),
            created_at=doc.get(WishlistFields.CREATED_AT, now()),
        )

    def create(self, item: WishlistItem) -> WishlistItem:
        item.created_at = now()
        try:
            result = self._collection.insert_one(
                {
                    WishlistFields.USER_ID: to_object_id(item.user_id),
                    WishlistFields.PRODUCT_ID: to_object_id(item.product_id),
                    WishlistFields.CREATED_AT: item.created_at,
                }
            )
        except DuplicateKeyError:
            raise ConflictError("Product already in wishlist")
        item.id = str(result.inserted_id)
        return item

    def find_line(self, user_id: str, product_id: str) -> Optional[WishlistItem]:
        doc = self._collection.find_one(
            {
                WishlistFields.USER_ID: to_object_id(user_id),
                WishlistFields.PRODUCT_ID: to_object_id(product_id),
            }
        )
        return self._to_entity(doc) if doc else None

    def find_by_user_id(self, user_id: str) -> List[WishlistItem]:
        docs = self._collection.find(
            {WishlistFields.USER_ID: to_object_id(user_id)}
        ).sort(WishlistFields.CREATED_AT, DESCENDING)
        return [self._to_entity(doc) for doc in docs]
