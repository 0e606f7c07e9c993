"""Constants for Wholesale model field names"""


class WholesaleFields:
    """Field name constants for Wholesale model"""
    TYPE = "type"
    CASE_ITEMS = "caseItems"
    PALLET_ITEMS = "palletItems"
    FAST_MOVING_ITEMS = "fastMovingItems"
    IS_ACTIVE = "isActive"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # Case item
    PRODUCT_ID = "productId"
    CASE_QUANTITY = "caseQuantity"
    UNITS_PER_CASE = "unitsPerCase"
    BASE_CASE_PRICE = "baseCasePrice"
    SELLING_CASE_PRICE = "sellingCasePrice"
    DISCOUNT_PERCENT = "discountPercent"

    # Pallet
    PALLET_NAME = "palletName"
    ITEMS = "items"
    TOTAL_CASES = "totalCases"
    PALLET_PRICE = "palletPrice"
    ESTIMATED_WEIGHT = "estimatedWeight"
    IS_MIXED = "isMixed"

    # MongoDB specific
    MONGO_ID = "_id"
