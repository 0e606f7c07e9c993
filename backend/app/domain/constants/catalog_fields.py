"""Constants for Product, Category and Counter field names"""


class ProductFields:
    """Field name constants for Product model"""
    NAME = "name"
    PRICE = "price"
    IMAGE = "image"
    SUPPLIER_ID = "supplierId"
    CATEGORY_ID = "categoryId"

    # MongoDB specific
    MONGO_ID = "_id"


class CategoryFields:
    """Field name constants for Category model"""
    NAME = "name"
    REGION = "region"

    # MongoDB specific
    MONGO_ID = "_id"


class CounterFields:
    """Field name constants for Counter model"""
    NAME = "name"
    SEQ = "seq"

    # First value handed out is START_SEQ + 1
    START_SEQ = 1000
