"""Constants for Order model field names"""


class OrderFields:
    """Field name constants for Order model"""
    ORDER_NUMBER = "orderNumber"
    USER_ID = "userId"
    ITEMS = "items"
    TOTAL_PRICE = "totalPrice"
    PAYMENT_TYPE = "paymentType"
    PAYMENT_STATUS = "paymentStatus"
    ORDER_STATUS = "orderStatus"
    SHIPPING_ADDRESS = "shippingAddress"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # Order line
    ITEM_PRODUCT_ID = "productId"
    ITEM_SUPPLIER_ID = "supplierId"
    ITEM_QUANTITY = "quantity"
    ITEM_PRICE = "price"

    # MongoDB specific
    MONGO_ID = "_id"
