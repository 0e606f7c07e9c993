"""
MongoDB Wholesale Repository
============================

Concrete implementation of WholesaleRepository using MongoDB.
"""
from typing import List, Optional

from pymongo import DESCENDING

from app.core.config import get_settings
from app.domain.constants.wholesale_fields import WholesaleFields as F
from app.domain.models.wholesale import CaseItem, Pallet, PalletLine, Wholesale, WholesaleType
from app.domain.repositories.wholesale_repository import WholesaleRepository
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from app.infrastructure.db.object_ids import to_object_id, to_str_id
from app.utils.datetime_utils import now


class MongoWholesaleRepository(WholesaleRepository):
    """MongoDB implementation of WholesaleRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().wholesales_collection)

    def _to_entity(self, doc: dict) -> Wholesale:
        """Convert MongoDB document to Wholesale entity."""
        case_items = [
            CaseItem(
                product_id=to_str_id(item[F.PRODUCT_ID]),
                case_quantity=item[F.CASE_QUANTITY],
                units_per_case=item[F.UNITS_PER_CASE],
                base_case_price=item[F.BASE_CASE_PRICE],
                selling_case_price=item[F.SELLING_CASE_PRICE],
                discount_percent=item.get(F.DISCOUNT_PERCENT),
                is_active=item.get(F.IS_ACTIVE, True),
            )
            for item in doc.get(F.CASE_ITEMS, [])
        ]
        pallets = [
            Pallet(
                pallet_name=pallet[F.PALLET_NAME],
                items=[
                    PalletLine(product_id=to_str_id(line[F.PRODUCT_ID]), case_quantity=line[F.CASE_QUANTITY])
                    for line in pallet.get(F.ITEMS, [])
                ],
                pallet_price=pallet[F.PALLET_PRICE],
                total_cases=pallet.get(F.TOTAL_CASES, 0),
                estimated_weight=pallet.get(F.ESTIMATED_WEIGHT),
                is_mixed=pallet.get(F.IS_MIXED, False),
                is_active=pallet.get(F.IS_ACTIVE, True),
            )
            for pallet in doc.get(F.PALLET_ITEMS, [])
        ]
        return Wholesale(
            id=to_str_id(doc.get(F.MONGO_ID)),
            type=WholesaleType(doc[F.TYPE]),
            case_items=case_items,
            pallet_items=pallets,
            fast_moving_items=[to_str_id(item[F.PRODUCT_ID]) for item in doc.get(F.FAST_MOVING_ITEMS, [])],
            is_active=doc.get(F.IS_ACTIVE, True),
            created_at=doc.get(F.CREATED_AT, now()),
            updated_at=doc.get(F.UPDATED_AT, now()),
        )

    def _to_document(self, wholesale: Wholesale) -> dict:
        """Convert Wholesale entity to MongoDB document."""
        return {
            F.TYPE: wholesale.type.value,
            F.CASE_ITEMS: [
                {
                    F.PRODUCT_ID: to_object_id(item.product_id),
                    F.CASE_QUANTITY: item.case_quantity,
                    F.UNITS_PER_CASE: item.units_per_case,
                    F.BASE_CASE_PRICE: item.base_case_price,
                    F.SELLING_CASE_PRICE: item.selling_case_price,
                    F.DISCOUNT_PERCENT: item.discount_percent,
                    F.IS_ACTIVE: item.is_active,
                }
                for item in wholesale.case_items
            ],
            F.PALLET_ITEMS: [
                {
                    F.PALLET_NAME: pallet.pallet_name,
                    F.ITEMS: [
                        {F.PRODUCT_ID: to_object_id(line.product_id), F.CASE_QUANTITY: line.case_quantity}
                        for line in pallet.items
                    ],
                    F.TOTAL_CASES: pallet.total_cases,
                    F.PALLET_PRICE: pallet.pallet_price,
                    F.ESTIMATED_WEIGHT: pallet.estimated_weight,
                    F.IS_MIXED: pallet.is_mixed,
                    F.IS_ACTIVE: pallet.is_active,
                }
                for pallet in wholesale.pallet_items
            ],
            F.FAST_MOVING_ITEMS: [
                {F.PRODUCT_ID: to_object_id(product_id)} for product_id in wholesale.fast_moving_items
            ],
            F.IS_ACTIVE: wholesale.is_active,
            F.CREATED_AT: wholesale.created_at,
            F.UPDATED_AT: wholesale.updated_at,
        }

    def create(self, wholesale: Wholesale) -> Wholesale:
        wholesale.created_at = now()
        wholesale.updated_at = now()

        result = self._collection.insert_one(self._to_document(wholesale))
        wholesale.id = str(result.inserted_id)
        return wholesale

    def find_by_id(self, wholesale_id: str) -> Optional[Wholesale]:
        oid = to_object_id(wholesale_id)
        if oid is None:
            return None
        doc = self._collection.find_one({F.MONGO_ID: oid})
        return self._to_entity(doc) if doc else None

    def find_all(self, wholesale_type: Optional[WholesaleType] = None) -> List[Wholesale]:
        query = {F.TYPE: wholesale_type.value} if wholesale_type else {}
        docs = self._collection.find(query).sort(F.CREATED_AT, DESCENDING)
        return [self._to_entity(doc) for doc in docs]
