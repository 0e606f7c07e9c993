from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import BadRequestError, ConflictError
from app.domain.models.cart import CartItem, WishlistItem
from app.domain.models.driver_application import (
    ApplicantProfile,
    ApplicationStatus,
    DriverApplication,
    StoredFile,
)
from app.domain.models.review import Review
from app.domain.models.user import User, UserRole
from app.infrastructure.db.mongo_cart_repository import MongoCartRepository, MongoWishlistRepository
from app.infrastructure.db.mongo_catalog_repository import MongoCounterRepository, MongoProductRepository
from app.infrastructure.db.mongo_driver_application_repository import MongoDriverApplicationRepository
from app.infrastructure.db.mongo_order_repository import MongoOrderRepository
from app.infrastructure.db.mongo_review_repository import MongoReviewRepository
from app.infrastructure.db.mongo_user_repository import MongoUserRepository


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def client(collection):
    client = MagicMock()
    client.get_collection.return_value = collection
    return client


def application_doc(**overrides):
    doc = {
        "_id": ObjectId(),
        "userId": ObjectId(),
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@example.com",
        "phone": "+15550100",
        "zipCode": "62701",
        "licenseExpiryDate": "2028-05-31",
        "yearsOfExperience": 4,
        "documentUrl": [{"public_id": "drivers/documents/a.jpg", "url": "https://cdn.test/a.jpg"}],
        "status": "approved",
        "isSuspended": True,
        "suspendedUntil": datetime(2026, 6, 1, tzinfo=timezone.utc),
        "createdAt": datetime(2026, 5, 1, tzinfo=timezone.utc),
        "updatedAt": datetime(2026, 5, 2, tzinfo=timezone.utc),
    }
    doc.update(overrides)
    return doc


class TestMongoDriverApplicationRepository:

    def test_document_maps_to_entity(self, client, collection):
        doc = application_doc()
        collection.find_one.return_value = doc
        repository = MongoDriverApplicationRepository(client)

        application = repository.find_by_id(str(doc["_id"]))

        assert application.id == str(doc["_id"])
        assert application.user_id == str(doc["userId"])
        assert application.profile.zip_code == "62701"
        assert application.profile.years_of_experience == 4
        assert application.document_url == [StoredFile("drivers/documents/a.jpg", "https://cdn.test/a.jpg")]
        assert application.status == ApplicationStatus.APPROVED
        assert application.is_suspended is True

    def test_create_writes_camel_case_fields_in_session(self, client, collection):
        inserted = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted)
        repository = MongoDriverApplicationRepository(client)
        user_id = str(ObjectId())
        application = DriverApplication(
            user_id=user_id,
            profile=ApplicantProfile("Jane", "Doe", "jane@example.com", "+15550100", zip_code="62701"),
            document_url=[StoredFile("k", "https://cdn.test/k")],
        )

        created = repository.create(application, session="session")

        assert created.id == str(inserted)
        document = collection.insert_one.call_args.args[0]
        assert document["userId"] == ObjectId(user_id)
        assert document["zipCode"] == "62701"
        assert document["status"] == "pending"
        assert document["documentUrl"] == [{"public_id": "k", "url": "https://cdn.test/k"}]
        assert collection.insert_one.call_args.kwargs["session"] == "session"

    def test_find_by_invalid_id_skips_query(self, client, collection):
        repository = MongoDriverApplicationRepository(client)

        assert repository.find_by_id("not-an-id") is None
        collection.find_one.assert_not_called()

    def test_find_page_escapes_search_text(self, client, collection):
        cursor = collection.find.return_value.sort.return_value.skip.return_value.limit
        cursor.return_value = [application_doc(status="pending")]
        collection.count_documents.return_value = 11
        repository = MongoDriverApplicationRepository(client)

        applications, total = repository.find_page(ApplicationStatus.PENDING, "j.doe+", skip=10, limit=10)

        query = collection.find.call_args.args[0]
        assert query["status"] == "pending"
        assert query["$or"] == [
            {"firstName": {"$regex": r"j\.doe\+", "$options": "i"}},
            {"email": {"$regex": r"j\.doe\+", "$options": "i"}},
        ]
        collection.find.return_value.sort.assert_called_once_with("createdAt", DESCENDING)
        collection.find.return_value.sort.return_value.skip.assert_called_once_with(10)
        assert total == 11
        assert len(applications) == 1

    def test_update_sets_review_and_suspension_fields(self, client, collection):
        doc = application_doc()
        collection.find_one_and_update.return_value = doc
        repository = MongoDriverApplicationRepository(client)
        application = repository._to_entity(doc)

        repository.update(application, session="session")

        update = collection.find_one_and_update.call_args.args[1]["$set"]
        assert set(update) == {"status", "isSuspended", "suspendedUntil", "updatedAt"}
        assert collection.find_one_and_update.call_args.kwargs["session"] == "session"

    def test_update_missing_document(self, client, collection):
        collection.find_one_and_update.return_value = None
        repository = MongoDriverApplicationRepository(client)

        with pytest.raises(ValueError):
            repository.update(repository._to_entity(application_doc()))


class TestMongoUserRepository:

    def test_email_or_phone_query(self, client, collection):
        collection.find_one.return_value = None
        repository = MongoUserRepository(client)

        repository.find_by_email_or_phone("jane@example.com", "+15550100", session="s")
        repository.find_by_email_or_phone("jane@example.com", None)

        with_phone, without_phone = [call.args[0] for call in collection.find_one.call_args_list]
        assert with_phone == {"$or": [{"email": "jane@example.com"}, {"phone": "+15550100"}]}
        assert without_phone == {"$or": [{"email": "jane@example.com"}]}

    def test_update_keeps_created_at(self, client, collection):
        user_id = ObjectId()
        collection.find_one_and_update.return_value = {"_id": user_id, "email": "jane@example.com", "role": "driver"}
        repository = MongoUserRepository(client)

        updated = repository.update(User(email="jane@example.com", role=UserRole.DRIVER, id=str(user_id)))

        assert "createdAt" not in collection.find_one_and_update.call_args.args[1]["$set"]
        assert updated.role == UserRole.DRIVER

    def test_find_many_by_ids_drops_invalid_ids(self, client, collection):
        valid = ObjectId()
        collection.find.return_value = [{"_id": valid, "email": "a@example.com"}]
        repository = MongoUserRepository(client)

        users = repository.find_many_by_ids([str(valid), "bogus"])

        assert collection.find.call_args.args[0] == {"_id": {"$in": [valid]}}
        assert list(users) == [str(valid)]

    def test_count_active_by_role(self, client, collection):
        collection.count_documents.return_value = 3
        repository = MongoUserRepository(client)

        assert repository.count_active_by_role(UserRole.SUPPLIER) == 3
        collection.count_documents.assert_called_once_with({"role": "supplier", "isSuspended": False})


class TestMongoCounterRepository:

    def test_next_value_is_one_atomic_upsert(self, client, collection):
        collection.find_one_and_update.return_value = {"name": "order", "seq": 1001}
        repository = MongoCounterRepository(client)

        assert repository.next_value("order") == 1001

        args, kwargs = collection.find_one_and_update.call_args
        assert args[0] == {"name": "order"}
        assert args[1] == [{"$set": {"seq": {"$add": [{"$ifNull": ["$seq", 1000]}, 1]}}}]
        assert kwargs["upsert"] is True


class TestMongoProductRepository:

    def test_find_many_by_ids(self, client, collection):
        product_id = ObjectId()
        supplier_id = ObjectId()
        collection.find.return_value = [
            {"_id": product_id, "name": "Apples", "price": 2.5, "supplierId": supplier_id}
        ]
        repository = MongoProductRepository(client)

        products = repository.find_many_by_ids([str(product_id)])

        assert products[str(product_id)].supplier_id == str(supplier_id)


class TestMongoOrderRepository:

    def test_total_revenue(self, client, collection):
        collection.aggregate.return_value = iter([{"_id": None, "totalRevenue": 42.5}])
        repository = MongoOrderRepository(client)

        assert repository.total_revenue() == 42.5
        match = collection.aggregate.call_args.args[0][0]["$match"]
        assert {"paymentType": "online", "paymentStatus": "paid"} in match["$or"]
        assert {"paymentType": "cod", "orderStatus": "delivered"} in match["$or"]

    def test_total_revenue_without_orders(self, client, collection):
        collection.aggregate.return_value = iter([])
        repository = MongoOrderRepository(client)

        assert repository.total_revenue() == 0

    def test_monthly_totals(self, client, collection):
        collection.aggregate.return_value = iter([{"_id": 2, "value": 3}, {"_id": 7, "value": 1}])
        repository = MongoOrderRepository(client)
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        end = datetime(2026, 12, 31, 23, 59, tzinfo=timezone.utc)

        totals = repository.monthly_totals("order", start, end)

        assert totals == {2: 3, 7: 1}
        match = collection.aggregate.call_args.args[0][0]["$match"]
        assert match == {"createdAt": {"$gte": start, "$lte": end}}

    def test_supplier_filter_matches_nested_items(self, client, collection):
        collection.find.return_value.sort.return_value = []
        repository = MongoOrderRepository(client)
        supplier_id = ObjectId()

        repository.find_by_supplier_id(str(supplier_id))

        assert collection.find.call_args.args[0] == {"items.supplierId": supplier_id}

    def test_order_lines_by_region(self, client, collection):
        collection.aggregate.return_value = iter([{"_id": "North", "totalOrders": 5}])
        repository = MongoOrderRepository(client)

        assert repository.order_lines_by_region() == [("North", 5)]


class TestUniqueIndexes:

    @pytest.mark.parametrize(
        "repository_class, keys",
        [
            (MongoUserRepository, [("email", ASCENDING)]),
            (MongoCounterRepository, [("name", ASCENDING)]),
            (MongoReviewRepository, [("userId", ASCENDING), ("orderId", ASCENDING), ("productId", ASCENDING)]),
            (MongoCartRepository, [("userId", ASCENDING), ("productId", ASCENDING)]),
            (MongoWishlistRepository, [("userId", ASCENDING), ("productId", ASCENDING)]),
        ],
    )
    def test_index_created_with_repository(self, client, collection, repository_class, keys):
        repository_class(client)

        collection.create_index.assert_called_once_with(keys, unique=True)

    def test_duplicate_email(self, client, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repository = MongoUserRepository(client)

        with pytest.raises(ConflictError):
            repository.create(User(email="jane@example.com"), session="session")

    def test_duplicate_review(self, client, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repository = MongoReviewRepository(client)
        review = Review(user_id=str(ObjectId()), order_id=str(ObjectId()), product_id=str(ObjectId()), rating=5)

        with pytest.raises(BadRequestError, match="already reviewed"):
            repository.create(review)

    def test_duplicate_cart_line(self, client, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repository = MongoCartRepository(client)

        with pytest.raises(ConflictError):
            repository.create(CartItem(user_id=str(ObjectId()), product_id=str(ObjectId())))

    def test_duplicate_wishlist_entry(self, client, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repository = MongoWishlistRepository(client)

        with pytest.raises(ConflictError, match="already in wishlist"):
            repository.create(WishlistItem(user_id=str(ObjectId()), product_id=str(ObjectId())))

    def test_counter_retries_after_losing_seed_race(self, client, collection):
        collection.find_one_and_update.side_effect = [
            DuplicateKeyError("E11000 duplicate key"),
            {"name": "order", "seq": 1002},
        ]
        repository = MongoCounterRepository(client)

        assert repository.next_value("order") == 1002
        assert collection.find_one_and_update.call_count == 2
