"""
MongoDB Catalog and Counter Repositories
========================================

Products are read-only here. Counters are unique by name and are seeded and
incremented in one atomic upsert.
"""
from typing import Any, Dict, Iterable, Optional

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.config import get_settings
from app.domain.constants.catalog_fields import CounterFields, ProductFields
from app.domain.models.product import Product
from app.domain.repositories.catalog_repository import CounterRepository, ProductRepository
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from app.infrastructure.db.object_ids import to_object_id, to_object_ids, to_str_id


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().products_collection)

    def _to_entity(self, doc: dict) -> Product:
        return Product(
            id=to_str_id(doc.get(ProductFields.MONGO_ID)),
            name=doc.get(ProductFields.NAME, ""),
            price=doc.get(ProductFields.PRICE, 0.0),
            image=doc.get(ProductFields.IMAGE),
            supplier_id=to_str_id(doc.get(ProductFields.SUPPLIER_ID)),
            category_id=to_str_id(doc.get(ProductFields.CATEGORY_ID)),
        )

    def find_by_id(self, product_id: str) -> Optional[Product]:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        doc = self._collection.find_one({ProductFields.MONGO_ID: oid})
        return self._to_entity(doc) if doc else None

    def find_many_by_ids(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        oids = to_object_ids(set(product_ids))
        if not oids:
            return {}
        docs = self._collection.find({ProductFields.MONGO_ID: {"$in": oids}})
        products = (self._to_entity(doc) for doc in docs)
        return {product.id: product for product in products}


class MongoCounterRepository(CounterRepository):
    """MongoDB implementation of CounterRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().counters_collection)
        self._collection.create_index([(CounterFields.NAME, ASCENDING)], unique=True)

    def next_value(self, name: str, session: Any = None) -> int:
        """Atomically increment the named sequence."""
        try:
            return self._increment(name, session)
        except DuplicateKeyError:
            # Lost the race to seed the counter; the document exists now
            return self._increment(name, session)

    def _increment(self, name: str, session: Any) -> int:
        # Pipeline update so a missing counter is seeded and incremented in one operation
        doc = self._collection.find_one_and_update(
            {CounterFields.NAME: name},
            [
                {
                    "$set": {
                        CounterFields.SEQ: {
                            "$add": [{"$ifNull": [f"${CounterFields.SEQ}", CounterFields.START_SEQ]}, 1]
                        }
                    }
                }
            ],
            upsert=True,
            return_document=ReturnDocument.AFTER,
            session=session,
        )
        return doc[CounterFields.SEQ]
