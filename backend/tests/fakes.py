"""
In-memory doubles for repositories and ports.

Repositories store deep copies so that only explicit create/update calls
change persisted state, as with a real document store.
"""
import copy
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from bson import ObjectId

from app.domain.models.cart import CartItem, WishlistItem
from app.domain.models.driver_application import (
    OPEN_STATUSES,
    ApplicationStatus,
    DriverApplication,
    StoredFile,
    UploadedDocument,
)
from app.domain.models.identity import Identity
from app.domain.models.order import Order
from app.domain.models.product import Product
from app.domain.models.review import Review
from app.domain.models.user import User, UserRole
from app.domain.models.wholesale import Wholesale, WholesaleType
from app.domain.ports.blob_storage import BlobStorage
from app.domain.ports.notifier import EmailMessage, Notifier
from app.domain.ports.transaction import TransactionManager
from app.domain.repositories.cart_repository import CartRepository, WishlistRepository
from app.domain.repositories.catalog_repository import CounterRepository, ProductRepository
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.domain.repositories.order_repository import OrderRepository
from app.domain.repositories.review_repository import ReviewRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.repositories.wholesale_repository import WholesaleRepository
from app.domain.constants.catalog_fields import CounterFields


def new_id() -> str:
    return str(ObjectId())


class InMemoryRepository:
    """Shared storage plus failure injection for the fakes below."""

    def __init__(self) -> None:
        self.items: Dict[str, Any] = {}
        self.fail_on: Dict[str, Exception] = {}
        self.sessions: List[Any] = []

    def _check(self, operation: str, session: Any = None) -> None:
        self.sessions.append(session)
        error = self.fail_on.get(operation)
        if error is not None:
            raise error

    def _insert(self, entity: Any) -> Any:
        entity.id = entity.id or new_id()
        self.items[entity.id] = copy.deepcopy(entity)
        return copy.deepcopy(entity)

    def _get(self, entity_id: Optional[str]) -> Any:
        entity = self.items.get(entity_id)
        return copy.deepcopy(entity) if entity else None

    def _all(self) -> List[Any]:
        return [copy.deepcopy(entity) for entity in self.items.values()]

    def _newest_first(self, entities: Iterable[Any]) -> List[Any]:
        return sorted(entities, key=lambda entity: entity.created_at, reverse=True)


class FakeUserRepository(InMemoryRepository, UserRepository):

    def create(self, user: User, session: Any = None) -> User:
        self._check("create", session)
        return self._insert(user)

    def update(self, user: User, session: Any = None) -> User:
        self._check("update", session)
        if user.id not in self.items:
            raise ValueError(f"User '{user.id}' not found")
        self.items[user.id] = copy.deepcopy(user)
        return copy.deepcopy(user)

    def find_by_id(self, user_id: str, session: Any = None) -> Optional[User]:
        return self._get(user_id)

    def find_by_email(self, email: str, session: Any = None) -> Optional[User]:
        return next((user for user in self._all() if user.email == email), None)

    def find_by_email_or_phone(self, email: str, phone: Optional[str], session: Any = None) -> Optional[User]:
        return next(
            (user for user in self._all() if user.email == email or (phone and user.phone == phone)),
            None,
        )

    def find_many_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        return {user_id: self._get(user_id) for user_id in set(user_ids) if user_id in self.items}

    def delete(self, user_id: str, session: Any = None) -> bool:
        self._check("delete", session)
        return self.items.pop(user_id, None) is not None

    def count_active_by_role(self, role: UserRole) -> int:
        return sum(1 for user in self._all() if user.role == role and not user.is_suspended)


class FakeDriverApplicationRepository(InMemoryRepository, DriverApplicationRepository):

    def create(self, application: DriverApplication, session: Any = None) -> DriverApplication:
        self._check("create", session)
        return self._insert(application)

    def update(self, application: DriverApplication, session: Any = None) -> DriverApplication:
        self._check("update", session)
        self.items[application.id] = copy.deepcopy(application)
        return copy.deepcopy(application)

    def find_by_id(self, application_id: str, session: Any = None) -> Optional[DriverApplication]:
        return self._get(application_id)

    def find_open_by_user_id(self, user_id: str, session: Any = None) -> Optional[DriverApplication]:
        return next(
            (app for app in self._all() if app.user_id == user_id and app.status in OPEN_STATUSES),
            None,
        )

    def find_latest_by_user_id(self, user_id: str) -> Optional[DriverApplication]:
        owned = self._newest_first(app for app in self._all() if app.user_id == user_id)
        return owned[0] if owned else None

    def find_page(
        self,
        status: Optional[ApplicationStatus],
        search: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[DriverApplication], int]:
        matches = [app for app in self._all() if status is None or app.status == status]
        if search:
            needle = search.lower()
            matches = [
                app for app in matches
                if needle in app.profile.first_name.lower() or needle in app.profile.email.lower()
            ]
        matches = self._newest_first(matches)
        return matches[skip:skip + limit], len(matches)

    def delete(self, application_id: str, session: Any = None) -> bool:
        self._check("delete", session)
        return self.items.pop(application_id, None) is not None


class FakeOrderRepository(InMemoryRepository, OrderRepository):

    def __init__(self, regions: Optional[Dict[str, str]] = None) -> None:
        super().__init__()
        # product id -> category region
        self.regions = regions or {}

    def create(self, order: Order, session: Any = None) -> Order:
        self._check("create", session)
        return self._insert(order)

    def find_by_id(self, order_id: str) -> Optional[Order]:
        return self._get(order_id)

    def find_delivered_for_user(self, order_id: str, user_id: str) -> Optional[Order]:
        order = self._get(order_id)
        if order and order.user_id == user_id and order.is_delivered():
            return order
        return None

    def find_by_user_id(self, user_id: str) -> List[Order]:
        return self._newest_first(order for order in self._all() if order.user_id == user_id)

    def find_by_supplier_id(self, supplier_id: str) -> List[Order]:
        return self._newest_first(
            order for order in self._all()
            if any(item.supplier_id == supplier_id for item in order.items)
        )

    def find_all(self) -> List[Order]:
        return self._newest_first(self._all())

    def count_all(self) -> int:
        return len(self.items)

    def total_revenue(self) -> float:
        return sum(order.total_price for order in self._all() if order.counts_as_revenue())

    def monthly_totals(self, metric: str, start: datetime, end: datetime) -> Dict[int, float]:
        totals: Dict[int, float] = {}
        for order in self._all():
            if not start <= order.created_at <= end:
                continue
            if metric == "revenue":
                if not order.counts_as_revenue():
                    continue
                value = order.total_price
            else:
                value = 1
            month = order.created_at.month
            totals[month] = totals.get(month, 0) + value
        return totals

    def order_lines_by_region(self) -> List[Tuple[str, int]]:
        counts: Dict[str, int] = {}
        for order in self._all():
            for item in order.items:
                region = self.regions.get(item.product_id)
                if region is not None:
                    counts[region] = counts.get(region, 0) + 1
        return sorted(counts.items(), key=lambda pair: pair[1], reverse=True)


class FakeReviewRepository(InMemoryRepository, ReviewRepository):

    def create(self, review: Review, session: Any = None) -> Review:
        self._check("create", session)
        return self._insert(review)

    def exists_for(self, user_id: str, order_id: str, product_id: str) -> bool:
        return any(
            review.user_id == user_id and review.order_id == order_id and review.product_id == product_id
            for review in self._all()
        )


class FakeCartRepository(InMemoryRepository, CartRepository):

    def create(self, item: CartItem) -> CartItem:
        return self._insert(item)

    def update(self, item: CartItem) -> CartItem:
        self.items[item.id] = copy.deepcopy(item)
        return copy.deepcopy(item)

    def find_line(self, user_id: str, product_id: str) -> Optional[CartItem]:
        return next(
            (item for item in self._all() if item.user_id == user_id and item.product_id == product_id),
            None,
        )

    def find_page(self, user_id: str, skip: int, limit: int) -> Tuple[List[CartItem], int]:
        lines = self._newest_first(item for item in self._all() if item.user_id == user_id)
        return lines[skip:skip + limit], len(lines)

    def delete(self, item_id: str) -> bool:
        return self.items.pop(item_id, None) is not None


class FakeWishlistRepository(InMemoryRepository, WishlistRepository):

    def create(self, item: WishlistItem) -> WishlistItem:
        return self._insert(item)

    def find_line(self, user_id: str, product_id: str) -> Optional[WishlistItem]:
        return next(
            (item for item in self._all() if item.user_id == user_id and item.product_id == product_id),
            None,
        )

    def find_by_user_id(self, user_id: str) -> List[WishlistItem]:
        return self._newest_first(item for item in self._all() if item.user_id == user_id)


class FakeProductRepository(InMemoryRepository, ProductRepository):

    def add(self, product: Product) -> Product:
        return self._insert(product)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        return self._get(product_id)

    def find_many_by_ids(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        return {product_id: self._get(product_id) for product_id in set(product_ids) if product_id in self.items}


class FakeCounterRepository(CounterRepository):

    def __init__(self) -> None:
        self.sequences: Dict[str, int] = {}

    def next_value(self, name: str, session: Any = None) -> int:
        self.sequences[name] = self.sequences.get(name, CounterFields.START_SEQ) + 1
        return self.sequences[name]


class FakeWholesaleRepository(InMemoryRepository, WholesaleRepository):

    def create(self, wholesale: Wholesale) -> Wholesale:
        return self._insert(wholesale)

    def find_by_id(self, wholesale_id: str) -> Optional[Wholesale]:
        return self._get(wholesale_id)

    def find_all(self, wholesale_type: Optional[WholesaleType] = None) -> List[Wholesale]:
        return self._newest_first(
            item for item in self._all() if wholesale_type is None or item.type == wholesale_type
        )


class FakeBlobStorage(BlobStorage):
    """Records uploads and deletions; failures are injected per call."""

    def __init__(self) -> None:
        self.objects: Dict[str, UploadedDocument] = {}
        self.deleted: List[str] = []
        self.upload_count = 0
        self.fail_upload_at: Optional[int] = None
        self.failing_deletes: Dict[str, Optional[Exception]] = {}

    def upload(self, document: UploadedDocument, folder: str) -> StoredFile:
        self.upload_count += 1
        if self.fail_upload_at == self.upload_count:
            raise RuntimeError("storage unavailable")
        public_id = f"{folder}/{self.upload_count}-{document.filename}"
        self.objects[public_id] = document
        return StoredFile(public_id=public_id, url=f"https://files.test/{public_id}")

    def delete(self, public_id: str) -> bool:
        if public_id in self.failing_deletes:
            error = self.failing_deletes[public_id]
            if error is not None:
                raise error
            return False
        self.deleted.append(public_id)
        self.objects.pop(public_id, None)
        return True


class FakeNotifier(Notifier):

    def __init__(self) -> None:
        self.sent: List[EmailMessage] = []
        self.error: Optional[Exception] = None
        self.deliver = True

    def send(self, message: EmailMessage) -> bool:
        if self.error is not None:
            raise self.error
        if self.deliver:
            self.sent.append(message)
        return self.deliver


class FakeTransactionManager(TransactionManager):
    """Snapshots every registered repository and restores it when the block raises."""

    SESSION = "fake-session"

    def __init__(self, *repositories: InMemoryRepository) -> None:
        self._repositories = repositories
        self.committed = 0
        self.aborted = 0

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        snapshots = [copy.deepcopy(repository.items) for repository in self._repositories]
        try:
            yield self.SESSION
        except Exception:
            for repository, snapshot in zip(self._repositories, snapshots):
                repository.items = snapshot
            self.aborted += 1
            raise
        self.committed += 1


def identity_for(user: User) -> Identity:
    return Identity(email=user.email, role=user.role)
