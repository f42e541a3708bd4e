"""
Tests for application settings
"""

import pytest

from vendor_refunds.core.config.settings import (
    LoggingSettings,
    Settings,
    VendorSettings,
)
from vendor_refunds.core.exceptions import ConfigurationError


class TestSettings:
    def test_staff_mapping_from_environment(self, monkeypatch):
        monkeypatch.setenv("VENDOR_STAFF_MAPPING", '{"vendor1@example.com": "Nike"}')
        assert VendorSettings().VENDOR_STAFF_MAPPING == {"vendor1@example.com": "Nike"}

    def test_max_refund_quantity_must_be_positive(self):
        with pytest.raises(ValueError):
            VendorSettings(MAX_REFUND_QUANTITY=0)

    def test_unknown_log_format_is_rejected(self):
        settings = Settings(logging=LoggingSettings(LOG_FORMAT="xml"))
        with pytest.raises(ConfigurationError) as exc_info:
            settings.validate_configuration()
        assert exc_info.value.error_code == "CONFIG_ERROR"

    def test_blank_vendor_is_rejected(self):
        settings = Settings(vendors=VendorSettings(VENDOR_STAFF_MAPPING={"a@example.com": " "}))
        with pytest.raises(ConfigurationError):
            settings.validate_configuration()

    def test_defaults_are_valid(self):
        Settings(vendors=VendorSettings(), logging=LoggingSettings()).validate_configuration()
