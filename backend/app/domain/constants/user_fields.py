"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE = "phone"
    PASSWORD = "password"
    ROLE = "role"
    IS_VERIFIED = "isVerified"
    IS_SUSPENDED = "isSuspended"
    IMAGE = "image"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"

    # Fields exposed when a user is embedded in another resource
    PUBLIC = (FIRST_NAME, LAST_NAME, EMAIL, IMAGE)
