from datetime import timedelta

import pytest

from app.domain.models.cart import CartItem
from app.domain.models.driver_application import ApplicantProfile, ApplicationStatus, DriverApplication
from app.domain.models.wholesale import Pallet, PalletLine, Wholesale, WholesaleType
from app.utils.datetime_utils import now


@pytest.fixture
def application():
    return DriverApplication(user_id="u1", profile=ApplicantProfile("Jane", "Doe", "jane@example.com", "+15550100"))


class TestDriverApplication:

    def test_new_application_is_open(self, application):
        assert application.status == ApplicationStatus.PENDING
        assert application.is_open()

    def test_rejected_application_is_closed(self, application):
        application.change_status(ApplicationStatus.REJECTED)

        assert not application.is_open()

    def test_same_status_is_refused(self, application):
        with pytest.raises(ValueError):
            application.change_status(ApplicationStatus.PENDING)

    def test_suspension_with_duration(self, application):
        application.toggle_suspension(days=3)

        assert application.is_suspended
        remaining = application.suspended_until - now()
        assert timedelta(days=2, hours=23) < remaining <= timedelta(days=3)

    def test_lifting_suspension_clears_end_date(self, application):
        application.toggle_suspension(days=3)
        application.toggle_suspension(days=3)

        assert not application.is_suspended
        assert application.suspended_until is None

    def test_open_ended_suspension(self, application):
        application.toggle_suspension()

        assert application.is_suspended
        assert application.suspended_until is None


class TestCartItem:

    def test_increase(self):
        item = CartItem(user_id="u1", product_id="p1", quantity=2)

        item.increase(3)

        assert item.quantity == 5

    def test_decrease_keeps_one_unit(self):
        item = CartItem(user_id="u1", product_id="p1", quantity=2)

        item.decrease(1)
        with pytest.raises(ValueError):
            item.decrease(1)
        assert item.quantity == 1

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_quantity_must_be_positive(self, quantity):
        item = CartItem(user_id="u1", product_id="p1")

        with pytest.raises(ValueError):
            item.increase(quantity)


class TestWholesale:

    def test_pallet_recompute(self):
        pallet = Pallet("Mixed", [PalletLine("p1", 4), PalletLine("p2", 6)], pallet_price=120.0)

        pallet.recompute()

        assert pallet.total_cases == 10
        assert pallet.is_mixed

    def test_single_product_pallet_is_not_mixed(self):
        pallet = Pallet("Apples", [PalletLine("p1", 4), PalletLine("p1", 2)], pallet_price=60.0, is_mixed=True)

        pallet.recompute()

        assert pallet.total_cases == 6
        assert not pallet.is_mixed

    def test_product_ids(self):
        wholesale = Wholesale(
            type=WholesaleType.PALLET,
            pallet_items=[Pallet("Mixed", [PalletLine("p1", 1), PalletLine("p2", 1)], pallet_price=10.0)],
            fast_moving_items=["p3"],
        )

        assert wholesale.product_ids() == ["p1", "p2", "p3"]
