import os

import pytest

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("TIMEZONE", "UTC")

from app.domain.models.driver_application import ApplicantProfile, UploadedDocument  # noqa: E402
from app.domain.models.product import Product  # noqa: E402
from app.domain.models.user import User, UserRole  # noqa: E402
from app.application.services.driver_application_service import DriverApplicationService  # noqa: E402
from tests.fakes import (  # noqa: E402
    FakeBlobStorage,
    FakeCartRepository,
    FakeCounterRepository,
    FakeDriverApplicationRepository,
    FakeNotifier,
    FakeOrderRepository,
    FakeProductRepository,
    FakeReviewRepository,
    FakeTransactionManager,
    FakeUserRepository,
    FakeWholesaleRepository,
    FakeWishlistRepository,
)


@pytest.fixture
def users():
    return FakeUserRepository()


@pytest.fixture
def applications():
    return FakeDriverApplicationRepository()


@pytest.fixture
def storage():
    return FakeBlobStorage()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def transactions(users, applications):
    return FakeTransactionManager(users, applications)


@pytest.fixture
def orders():
    return FakeOrderRepository()


@pytest.fixture
def products():
    return FakeProductRepository()


@pytest.fixture
def counters():
    return FakeCounterRepository()


@pytest.fixture
def reviews():
    return FakeReviewRepository()


@pytest.fixture
def carts():
    return FakeCartRepository()


@pytest.fixture
def wishlists():
    return FakeWishlistRepository()


@pytest.fixture
def wholesales():
    return FakeWholesaleRepository()


@pytest.fixture
def driver_service(users, applications, storage, notifier, transactions):
    return DriverApplicationService(
        user_repository=users,
        application_repository=applications,
        storage=storage,
        notifier=notifier,
        transactions=transactions,
        documents_folder="drivers/documents",
        default_page_size=10,
    )


@pytest.fixture
def make_user(users):
    """Store a user and return it."""

    def _make_user(email="jane@example.com", role=UserRole.CUSTOMER, phone=None, **fields):
        fields.setdefault("first_name", "Jane")
        return users.create(User(email=email, role=role, phone=phone, **fields))

    return _make_user


@pytest.fixture
def make_product(products):

    def _make_product(name="Apples", price=2.5, supplier_id=None, category_id=None):
        return products.add(
            Product(id=None, name=name, price=price, supplier_id=supplier_id, category_id=category_id)
        )

    return _make_product


@pytest.fixture
def profile():
    return ApplicantProfile(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        phone="+15550100",
        address="1 Main St",
        city="Springfield",
        state="IL",
        zip_code="62701",
        license_expiry_date="2028-05-31",
        years_of_experience=4,
    )


@pytest.fixture
def documents():
    return [
        UploadedDocument(filename="license.jpg", content=b"front", content_type="image/jpeg"),
        UploadedDocument(filename="insurance.pdf", content=b"policy", content_type="application/pdf"),
    ]
