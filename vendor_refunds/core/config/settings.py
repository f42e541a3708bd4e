"""
Application settings and configuration management
"""

from decimal import Decimal
from typing import Dict
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from vendor_refunds.shared.constants.app import (
    PROJECT_NAME,
    VERSION,
    ENVIRONMENT_DEVELOPMENT,
    DEFAULT_PORT,
    DEFAULT_MAX_REFUND_QUANTITY,
    DEFAULT_MAX_UNIT_PRICE,
)
from vendor_refunds.shared.constants.currency import DEFAULT_CURRENCY_EXPONENT
from vendor_refunds.shared.constants.shopify import (
    DEFAULT_SHOPIFY_API_VERSION,
    DEFAULT_LINE_ITEMS_LIMIT,
    DEFAULT_ORDERS_PAGE_SIZE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from vendor_refunds.core.exceptions import ConfigurationError


class VendorSettings(BaseSettings):
    """Vendor assignment and refund sanity settings"""

    # Staff email -> vendor name, supplied as JSON in the environment
    VENDOR_STAFF_MAPPING: Dict[str, str] = Field(
        default_factory=dict, env="VENDOR_STAFF_MAPPING"
    )

    MAX_REFUND_QUANTITY: int = Field(
        default=DEFAULT_MAX_REFUND_QUANTITY, env="MAX_REFUND_QUANTITY"
    )
    MAX_UNIT_PRICE: Decimal = Field(
        default=Decimal(DEFAULT_MAX_UNIT_PRICE), env="MAX_UNIT_PRICE"
    )
    DEFAULT_CURRENCY_EXPONENT: int = Field(
        default=DEFAULT_CURRENCY_EXPONENT, env="DEFAULT_CURRENCY_EXPONENT"
    )

    @field_validator("VENDOR_STAFF_MAPPING")
    @classmethod
    def validate_vendor_staff_mapping(cls, v):
        if not v:
            return {}
        return v

    @field_validator("MAX_REFUND_QUANTITY")
    @classmethod
    def validate_max_refund_quantity(cls, v):
        if v < 1:
            raise ValueError("MAX_REFUND_QUANTITY must be at least 1")
        return v


class ShopifySettings(BaseSettings):
    """Shopify configuration settings"""

    SHOPIFY_SHOP_DOMAIN: str = Field(default="", env="SHOPIFY_SHOP_DOMAIN")
    SHOPIFY_ACCESS_TOKEN: str = Field(default="", env="SHOPIFY_ACCESS_TOKEN")
    SHOPIFY_API_VERSION: str = Field(
        default=DEFAULT_SHOPIFY_API_VERSION, env="SHOPIFY_API_VERSION"
    )

    # Query shape
    SHOPIFY_LINE_ITEMS_LIMIT: int = Field(
        default=DEFAULT_LINE_ITEMS_LIMIT, env="SHOPIFY_LINE_ITEMS_LIMIT"
    )
    SHOPIFY_ORDERS_PAGE_SIZE: int = Field(
        default=DEFAULT_ORDERS_PAGE_SIZE, env="SHOPIFY_ORDERS_PAGE_SIZE"
    )
    SHOPIFY_REQUEST_TIMEOUT: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS, env="SHOPIFY_REQUEST_TIMEOUT"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings"""

    LOG_LEVEL: str = Field(default="INFO", env="LOG_LEVEL")
    LOG_FORMAT: str = Field(default="console", env="LOG_FORMAT")
    LOG_DIR: str = Field(default="logs", env="LOG_DIR")
    LOG_TO_FILE: bool = Field(default=False, env="LOG_TO_FILE")


class Settings(BaseSettings):
    """Main application settings"""

    # App Configuration
    PROJECT_NAME: str = PROJECT_NAME
    VERSION: str = VERSION
    DEBUG: bool = Field(default=False, env="DEBUG")
    HOST: str = Field(default="0.0.0.0", env="HOST")
    PORT: int = Field(default=DEFAULT_PORT, env="PORT")
    ENVIRONMENT: str = Field(default=ENVIRONMENT_DEVELOPMENT, env="ENVIRONMENT")

    # Sub-settings
    vendors: VendorSettings = VendorSettings()
    shopify: ShopifySettings = ShopifySettings()
    logging: LoggingSettings = LoggingSettings()

    class Config:
        env_file = [".env.local", ".env"]  # Try .env.local first, then .env
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "allow"

    def validate_configuration(self) -> None:
        """Validate the complete configuration"""
        if self.logging.LOG_FORMAT not in ("console", "json"):
            raise ConfigurationError(
                f"Unsupported log format: {self.logging.LOG_FORMAT}",
                config_key="LOG_FORMAT",
            )
        for email, vendor in self.vendors.VENDOR_STAFF_MAPPING.items():
            if not email.strip() or not vendor.strip():
                raise ConfigurationError(
                    "Vendor staff mapping entries need a non-empty email and vendor",
                    config_key="VENDOR_STAFF_MAPPING",
                    details={"email": email},
                )


# Create settings instance
settings = Settings()

# Validate configuration on import
try:
    settings.validate_configuration()
except ConfigurationError as e:
    print(f"Configuration Error: {e}")
    raise
