# Settings package
from core.settings.app import AppSettings, get_app_settings
from core.settings.sections import (
    ApiSettings,
    CheckoutSettings,
    DatabaseSettings,
    SecuritySettings,
)

__all__ = [
    "get_app_settings",
    "AppSettings",
    "ApiSettings",
    "CheckoutSettings",
    "DatabaseSettings",
    "SecuritySettings",
]
