# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # General
        self.app_name: Final[str] = os.getenv("APP_NAME", "Marketplace API")
        self.debug: Final[bool] = _as_bool(os.getenv("DEBUG", "false"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "America/New_York", "Asia/Kolkata")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "marketplace")

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.driver_applications_collection: Final[str] = os.getenv(
            "DRIVER_APPLICATIONS_COLLECTION",
            "driver_applications"
        )
        self.orders_collection: Final[str] = os.getenv("ORDERS_COLLECTION", "orders")
        self.reviews_collection: Final[str] = os.getenv("REVIEWS_COLLECTION", "reviews")
        self.counters_collection: Final[str] = os.getenv("COUNTERS_COLLECTION", "counters")
        self.carts_collection: Final[str] = os.getenv("CARTS_COLLECTION", "carts")
        self.wishlists_collection: Final[str] = os.getenv("WISHLISTS_COLLECTION", "wishlists")
        self.wholesales_collection: Final[str] = os.getenv("WHOLESALES_COLLECTION", "wholesales")
        self.products_collection: Final[str] = os.getenv("PRODUCTS_COLLECTION", "products")
        self.categories_collection: Final[str] = os.getenv("CATEGORIES_COLLECTION", "categories")

        # Authentication (tokens are issued elsewhere, we only verify them)
        self.jwt_secret: Final[str] = os.getenv("JWT_SECRET", "change-me")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")

        # Blob Storage (S3 compatible)
        self.s3_bucket: Final[str] = os.getenv("S3_BUCKET", "marketplace-documents")
        self.s3_region: Final[str] = os.getenv("S3_REGION", "us-east-1")
        self.s3_endpoint_url: Final[Optional[str]] = os.getenv("S3_ENDPOINT_URL") or None
        self.s3_public_base_url: Final[Optional[str]] = os.getenv("S3_PUBLIC_BASE_URL") or None
        self.aws_access_key_id: Final[Optional[str]] = os.getenv("AWS_ACCESS_KEY_ID") or None
        self.aws_secret_access_key: Final[Optional[str]] = os.getenv("AWS_SECRET_ACCESS_KEY") or None
        self.driver_documents_folder: Final[str] = os.getenv(
            "DRIVER_DOCUMENTS_FOLDER",
            "drivers/documents"
        )

        # Email (SMTP)
        self.smtp_host: Final[str] = os.getenv("SMTP_HOST", "localhost")
        self.smtp_port: Final[int] = int(os.getenv("SMTP_PORT", "587"))
        self.smtp_username: Final[Optional[str]] = os.getenv("SMTP_USERNAME") or None
        self.smtp_password: Final[Optional[str]] = os.getenv("SMTP_PASSWORD") or None
        self.smtp_use_tls: Final[bool] = _as_bool(os.getenv("SMTP_USE_TLS", "true"))
        self.smtp_timeout_seconds: Final[int] = int(os.getenv("SMTP_TIMEOUT_SECONDS", "10"))
        self.mail_from: Final[str] = os.getenv("MAIL_FROM", "no-reply@marketplace.local")

        # Pagination
        self.default_page_size: Final[int] = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
