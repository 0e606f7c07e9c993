import pytest
from bson import ObjectId

from app.core.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from app.domain.models.identity import Identity
from app.domain.models.order import Order, OrderItem, OrderStatus, PaymentStatus, PaymentType
from app.domain.models.review import ReviewStatus
from app.domain.models.user import UserRole
from app.application.services.cart_service import CartService
from app.application.services.order_service import OrderService, RequestedItem
from app.application.services.review_service import ReviewService
from app.application.services.wishlist_service import WishlistService
from tests.fakes import identity_for


@pytest.fixture
def review_service(users, orders, reviews):
    return ReviewService(user_repository=users, order_repository=orders, review_repository=reviews)


@pytest.fixture
def cart_service(users, products, carts):
    return CartService(user_repository=users, product_repository=products, cart_repository=carts, default_page_size=2)


@pytest.fixture
def wishlist_service(users, products, wishlists):
    return WishlistService(user_repository=users, product_repository=products, wishlist_repository=wishlists)


@pytest.fixture
def order_service(users, products, orders, counters):
    return OrderService(
        user_repository=users,
        product_repository=products,
        order_repository=orders,
        counter_repository=counters,
    )


@pytest.fixture
def customer(make_user):
    return make_user(email="buyer@example.com")


@pytest.fixture
def place_order(orders):

    def _place_order(user, product, status=OrderStatus.DELIVERED):
        return orders.create(
            Order(
                user_id=user.id,
                items=[OrderItem(product_id=product.id, quantity=1, price=product.price)],
                total_price=product.price,
                payment_type=PaymentType.COD,
                order_status=status,
            )
        )

    return _place_order


class TestReviewService:

    def test_creates_pending_review(self, review_service, customer, make_product, place_order):
        product = make_product()
        order = place_order(customer, product)

        review = review_service.create(identity_for(customer), order.id, product.id, rating=5, comment="Great")

        assert review.id is not None
        assert review.status == ReviewStatus.PENDING
        assert review.user_id == customer.id

    def test_undelivered_order(self, review_service, customer, make_product, place_order):
        product = make_product()
        order = place_order(customer, product, status=OrderStatus.SHIPPED)

        with pytest.raises(BadRequestError, match="You cannot review this product"):
            review_service.create(identity_for(customer), order.id, product.id, rating=4)

    def test_someone_elses_order(self, review_service, customer, make_user, make_product, place_order):
        product = make_product()
        order = place_order(make_user(email="other@example.com"), product)

        with pytest.raises(BadRequestError, match="You cannot review this product"):
            review_service.create(identity_for(customer), order.id, product.id, rating=4)

    def test_duplicate_review(self, review_service, customer, make_product, place_order):
        product = make_product()
        order = place_order(customer, product)
        review_service.create(identity_for(customer), order.id, product.id, rating=5)

        with pytest.raises(BadRequestError, match="already reviewed"):
            review_service.create(identity_for(customer), order.id, product.id, rating=3)

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, review_service, customer, make_product, place_order, rating):
        product = make_product()
        order = place_order(customer, product)

        with pytest.raises(BadRequestError, match="Rating"):
            review_service.create(identity_for(customer), order.id, product.id, rating=rating)

    def test_unknown_user(self, review_service):
        with pytest.raises(NotFoundError):
            review_service.create(Identity("nobody@example.com", UserRole.CUSTOMER), str(ObjectId()), str(ObjectId()), 5)


class TestCartService:

    def test_add_creates_then_increments(self, cart_service, customer, make_product, carts):
        product = make_product()

        cart_service.add(identity_for(customer), product.id, 2)
        item = cart_service.add(identity_for(customer), product.id, 3)

        assert item.quantity == 5
        assert len(carts.items) == 1

    def test_add_unknown_product(self, cart_service, customer):
        with pytest.raises(NotFoundError, match="Product not found"):
            cart_service.add(identity_for(customer), str(ObjectId()))

    def test_get_mine_paginates_with_products(self, cart_service, customer, make_product):
        apples = make_product(name="Apples", price=2.5)
        cart_service.add(identity_for(customer), apples.id, 2)
        for name in ("Pears", "Plums"):
            cart_service.add(identity_for(customer), make_product(name=name).id)

        page = cart_service.get_mine(identity_for(customer))

        assert page.meta.total == 3
        assert page.meta.limit == 2
        assert page.meta.total_page == 2
        assert len(page.data) == 2

        lines = cart_service.get_mine(identity_for(customer), page=2).data
        assert len(lines) == 1

        all_lines = cart_service.get_mine(identity_for(customer), limit=10).data
        apples_line = next(line for line in all_lines if line.item.product_id == apples.id)
        assert apples_line.product.name == "Apples"
        assert apples_line.subtotal == 5.0

    def test_increase_and_decrease(self, cart_service, customer, make_product):
        product = make_product()
        cart_service.add(identity_for(customer), product.id, 2)

        assert cart_service.increase(identity_for(customer), product.id, 3).quantity == 5
        assert cart_service.decrease(identity_for(customer), product.id, 4).quantity == 1

    def test_decrease_below_one(self, cart_service, customer, make_product, carts):
        product = make_product()
        cart_service.add(identity_for(customer), product.id, 1)

        with pytest.raises(BadRequestError, match="less than 1"):
            cart_service.decrease(identity_for(customer), product.id, 1)
        assert carts.find_line(customer.id, product.id).quantity == 1

    def test_missing_line(self, cart_service, customer, make_product):
        product = make_product()

        with pytest.raises(NotFoundError):
            cart_service.increase(identity_for(customer), product.id)
        with pytest.raises(NotFoundError):
            cart_service.remove(identity_for(customer), product.id)

    def test_remove(self, cart_service, customer, make_product, carts):
        product = make_product()
        cart_service.add(identity_for(customer), product.id)

        assert cart_service.remove(identity_for(customer), product.id) is True
        assert carts.items == {}


class TestWishlistService:

    def test_add_and_list(self, wishlist_service, customer, make_product):
        product = make_product(name="Honey")

        wishlist_service.add(identity_for(customer), product.id)
        entries = wishlist_service.get_mine(identity_for(customer))

        assert [entry.product.name for entry in entries] == ["Honey"]

    def test_duplicate(self, wishlist_service, customer, make_product):
        product = make_product()
        wishlist_service.add(identity_for(customer), product.id)

        with pytest.raises(ConflictError):
            wishlist_service.add(identity_for(customer), product.id)

    def test_unknown_product(self, wishlist_service, customer):
        with pytest.raises(NotFoundError):
            wishlist_service.add(identity_for(customer), str(ObjectId()))


class TestOrderService:

    def test_create_prices_from_catalog(self, order_service, customer, make_product, make_user):
        supplier = make_user(email="farm@example.com", role=UserRole.SUPPLIER)
        apples = make_product(price=1.1, supplier_id=supplier.id)
        pears = make_product(name="Pears", price=2.2)

        order = order_service.create(
            identity_for(customer),
            [RequestedItem(apples.id, 3), RequestedItem(pears.id, 1)],
            PaymentType.ONLINE,
            shipping_address="1 Main St",
        )

        assert order.total_price == 5.5
        assert order.items[0].supplier_id == supplier.id
        assert order.payment_status == PaymentStatus.PENDING
        assert order.order_status == OrderStatus.PENDING

    def test_order_numbers_are_sequential(self, order_service, customer, make_product):
        product = make_product()

        first = order_service.create(identity_for(customer), [RequestedItem(product.id, 1)], PaymentType.COD)
        second = order_service.create(identity_for(customer), [RequestedItem(product.id, 1)], PaymentType.COD)

        assert first.order_number == "ORD-1001"
        assert second.order_number == "ORD-1002"

    def test_empty_order(self, order_service, customer):
        with pytest.raises(BadRequestError):
            order_service.create(identity_for(customer), [], PaymentType.COD)

    def test_unknown_product(self, order_service, customer, counters):
        with pytest.raises(NotFoundError):
            order_service.create(identity_for(customer), [RequestedItem(str(ObjectId()), 1)], PaymentType.COD)
        assert counters.sequences == {}

    def test_supplier_orders(self, order_service, customer, make_user, make_product):
        supplier = make_user(email="farm@example.com", role=UserRole.SUPPLIER)
        theirs = make_product(supplier_id=supplier.id)
        other = make_product(name="Other", supplier_id=str(ObjectId()))
        order_service.create(identity_for(customer), [RequestedItem(theirs.id, 1)], PaymentType.COD)
        order_service.create(identity_for(customer), [RequestedItem(other.id, 1)], PaymentType.COD)

        supplier_orders = order_service.get_for_supplier(identity_for(supplier))

        assert len(supplier_orders) == 1
        assert supplier_orders[0].items[0].product_id == theirs.id

    def test_supplier_view_requires_supplier(self, order_service, customer):
        with pytest.raises(ForbiddenError):
            order_service.get_for_supplier(identity_for(customer))

    def test_get_mine_and_all(self, order_service, customer, make_user, make_product):
        product = make_product()
        other = make_user(email="other@example.com")
        order_service.create(identity_for(customer), [RequestedItem(product.id, 1)], PaymentType.COD)
        order_service.create(identity_for(other), [RequestedItem(product.id, 2)], PaymentType.COD)

        assert len(order_service.get_mine(identity_for(customer))) == 1
        assert len(order_service.get_all()) == 2
