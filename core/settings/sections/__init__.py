"""Settings sections, one BaseSettings class per concern."""

from .api import ApiSettings
from .checkout import CheckoutSettings
from .database import DatabaseSettings
from .security import SecuritySettings

__all__ = [
    "ApiSettings",
    "CheckoutSettings",
    "DatabaseSettings",
    "SecuritySettings",
]
