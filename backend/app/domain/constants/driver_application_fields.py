"""Constants for DriverApplication model field names"""


class DriverApplicationFields:
    """Field name constants for DriverApplication model"""
    USER_ID = "userId"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE = "phone"
    ADDRESS = "address"
    CITY = "city"
    STATE = "state"
    ZIP_CODE = "zipCode"
    LICENSE_EXPIRY_DATE = "licenseExpiryDate"
    YEARS_OF_EXPERIENCE = "yearsOfExperience"
    DOCUMENT_URL = "documentUrl"
    STATUS = "status"
    IS_SUSPENDED = "isSuspended"
    SUSPENDED_UNTIL = "suspendedUntil"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # Embedded document reference
    DOCUMENT_PUBLIC_ID = "public_id"
    DOCUMENT_URL_VALUE = "url"

    # MongoDB specific
    MONGO_ID = "_id"
