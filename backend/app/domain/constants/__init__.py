from .user_fields import UserFields
from .driver_application_fields import DriverApplicationFields
from .order_fields import OrderFields
from .review_fields import ReviewFields
from .cart_fields import CartFields, WishlistFields
from .wholesale_fields import WholesaleFields
from .catalog_fields import ProductFields, CategoryFields, CounterFields

__all__ = [
    "UserFields",
    "DriverApplicationFields",
    "OrderFields",
    "ReviewFields",
    "CartFields",
    "WishlistFields",
    "WholesaleFields",
    "ProductFields",
    "CategoryFields",
    "CounterFields",
]
