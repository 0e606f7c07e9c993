"""
MongoDB Order Repository
========================

Concrete implementation of OrderRepository using MongoDB.
Sales figures are computed with aggregation pipelines.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pymongo import DESCENDING

from app.core.config import get_settings
from app.domain.constants.catalog_fields import CategoryFields, ProductFields
from app.domain.constants.order_fields import OrderFields as F
from app.domain.models.order import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    PaymentType,
)
from app.domain.repositories.order_repository import OrderRepository
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from app.infrastructure.db.object_ids import to_object_id, to_str_id
from app.utils.datetime_utils import now


# Online orders count once paid, cash-on-delivery orders once delivered
REVENUE_MATCH = {
    "$or": [
        {F.PAYMENT_TYPE: PaymentType.ONLINE.value, F.PAYMENT_STATUS: PaymentStatus.PAID.value},
        {F.PAYMENT_TYPE: PaymentType.COD.value, F.ORDER_STATUS: OrderStatus.DELIVERED.value},
    ]
}


class MongoOrderRepository(OrderRepository):
    """MongoDB implementation of OrderRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        settings = get_settings()
        self._collection = self._client.get_collection(settings.orders_collection)
        self._products_collection_name = settings.products_collection
        self._categories_collection_name = settings.categories_collection
        self._timezone = settings.timezone

    def _to_entity(self, doc: dict) -> Order:
        """Convert MongoDB document to Order entity."""
        items = [
            OrderItem(
                product_id=to_str_id(item.get(F.ITEM_PRODUCT_ID)),
                supplier_id=to_str_id(item.get(F.ITEM_SUPPLIER_ID)),
                quantity=item.get(F.ITEM_QUANTITY, 0),
                price=item.get(F.ITEM_PRICE, 0.0),
            )
            for item in doc.get(F.ITEMS, [])
        ]
        return Order(
            id=to_str_id(doc.get(F.MONGO_ID)),
            order_number=doc.get(F.ORDER_NUMBER),
            user_id=to_str_id(doc.get(F.USER_ID)),
            items=items,
            total_price=doc.get(F.TOTAL_PRICE, 0.0),
            payment_type=PaymentType(doc.get(F.PAYMENT_TYPE, PaymentType.COD.value)),
            payment_status=PaymentStatus(doc.get(F.PAYMENT_STATUS, PaymentStatus.PENDING.value)),
            order_status=OrderStatus(doc.get(F.ORDER_STATUS, OrderStatus.PENDING.value)),
            shipping_address=doc.get(F.SHIPPING_ADDRESS),
            created_at=doc.get(F.CREATED_AT, now()),
            updated_at=doc.get(F.UPDATED_AT, now()),
        )

    def _to_document(self, order: Order) -> dict:
        """Convert Order entity to MongoDB document."""
        return {
            F.ORDER_NUMBER: order.order_number,
            F.USER_ID: to_object_id(order.user_id),
            F.ITEMS: [
                {
                    F.ITEM_PRODUCT_ID: to_object_id(item.product_id),
                    F.ITEM_SUPPLIER_ID: to_object_id(item.supplier_id),
                    F.ITEM_QUANTITY: item.quantity,
                    F.ITEM_PRICE: item.price,
                }
                for item in order.items
            ],
            F.TOTAL_PRICE: order.total_price,
            F.PAYMENT_TYPE: order.payment_type.value,
            F.PAYMENT_STATUS: order.payment_status.value,
            F.ORDER_STATUS: order.order_status.value,
            F.SHIPPING_ADDRESS: order.shipping_address,
            F.CREATED_AT: order.created_at,
            F.UPDATED_AT: order.updated_at,
        }

    def _find_many(self, query: dict) -> List[Order]:
        docs = self._collection.find(query).sort(F.CREATED_AT, DESCENDING)
        return [self._to_entity(doc) for doc in docs]

    def create(self, order: Order, session: Any = None) -> Order:
        """Create a new order."""
        order.created_at = now()
        order.updated_at = now()

        result = self._collection.insert_one(self._to_document(order), session=session)
        order.id = str(result.inserted_id)
        return order

    def find_by_id(self, order_id: str) -> Optional[Order]:
        oid = to_object_id(order_id)
        if oid is None:
            return None
        doc = self._collection.find_one({F.MONGO_ID: oid})
        return self._to_entity(doc) if doc else None

    def find_delivered_for_user(self, order_id: str, user_id: str) -> Optional[Order]:
        oid = to_object_id(order_id)
        if oid is None:
            return None
        doc = self._collection.find_one(
            {
                F.MONGO_ID: oid,
                F.USER_ID: to_object_id(user_id),
                F.ORDER_STATUS: OrderStatus.DELIVERED.value,
            }
        )
        return self._to_entity(doc) if doc else None

    def find_by_user_id(self, user_id: str) -> List[Order]:
        return self._find_many({F.USER_ID: to_object_id(user_id)})

    def find_by_supplier_id(self, supplier_id: str) -> List[Order]:
        return self._find_many({f"{F.ITEMS}.{F.ITEM_SUPPLIER_ID}": to_object_id(supplier_id)})

    def find_all(self) -> List[Order]:
        return self._find_many({})

    def count_all(self) -> int:
        return self._collection.count_documents({})

    def total_revenue(self) -> float:
        """Sum of totals over revenue-eligible orders."""
        result = list(
            self._collection.aggregate(
                [
                    {"$match": REVENUE_MATCH},
                    {"$group": {"_id": None, "totalRevenue": {"$sum": f"${F.TOTAL_PRICE}"}}},
                ]
            )
        )
        return result[0]["totalRevenue"] if result else 0

    def monthly_totals(self, metric: str, start: datetime, end: datetime) -> Dict[int, float]:
        """Aggregate orders in [start, end] by calendar month."""
        match: dict = {F.CREATED_AT: {"$gte": start, "$lte": end}}
        if metric == "revenue":
            match.update(REVENUE_MATCH)
            value = {"$sum": f"${F.TOTAL_PRICE}"}
        else:
            value = {"$sum": 1}

        pipeline = [
            {"$match": match},
            {
                "$group": {
                    "_id": {"$month": {"date": f"${F.CREATED_AT}", "timezone": self._timezone}},
                    "value": value,
                }
            },
            {"$sort": {"_id": 1}},
        ]
        return {doc["_id"]: doc["value"] for doc in self._collection.aggregate(pipeline)}

    def order_lines_by_region(self) -> List[Tuple[str, int]]:
        """Count order lines per category region."""
        pipeline = [
            {"$unwind": f"${F.ITEMS}"},
            {
                "$lookup": {
                    "from": self._products_collection_name,
                    "localField": f"{F.ITEMS}.{F.ITEM_PRODUCT_ID}",
                    "foreignField": ProductFields.MONGO_ID,
                    "as": "product",
                }
            },
            {"$unwind": "$product"},
            {
                "$lookup": {
                    "from": self._categories_collection_name,
                    "localField": f"product.{ProductFields.CATEGORY_ID}",
                    "foreignField": CategoryFields.MONGO_ID,
                    "as": "category",
                }
            },
            {"$unwind": "$category"},
            {"$group": {"_id": f"$category.{CategoryFields.REGION}", "totalOrders": {"$sum": 1}}},
            {"$sort": {"totalOrders": -1}},
        ]
        return [(doc["_id"], doc["totalOrders"]) for doc in self._collection.aggregate(pipeline)]
