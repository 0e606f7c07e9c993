"""Constants for Review model field names"""


class ReviewFields:
    """Field name constants for Review model"""
    USER_ID = "userId"
    ORDER_ID = "orderId"
    PRODUCT_ID = "productId"
    RATING = "rating"
    COMMENT = "comment"
    STATUS = "status"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
