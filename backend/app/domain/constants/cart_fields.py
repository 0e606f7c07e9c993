"""Constants for cart and wishlist line field names"""


class CartFields:
    """Field name constants for CartItem model"""
    USER_ID = "userId"
    PRODUCT_ID = "productId"
    QUANTITY = "quantity"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"


class WishlistFields:
    """Field name constants for WishlistItem model"""
    USER_ID = "userId"
    PRODUCT_ID = "productId"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"
