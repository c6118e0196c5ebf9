# core/settings/app.py
from functools import lru_cache

# Sections
from core.settings.sections.api import ApiSettings
from core.settings.sections.checkout import CheckoutSettings
from core.settings.sections.database import DatabaseSettings
from core.settings.sections.security import SecuritySettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        # Load each settings class ONLY when AppSettings is instantiated
        self.database = DatabaseSettings()
        self.api = ApiSettings()
        self.checkout = CheckoutSettings()
        self.security = SecuritySettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
