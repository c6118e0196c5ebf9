"""Tests for settings loading from the environment."""

from core.domain.enums import OrderStatus, PaymentStatus
from core.settings import AppSettings
from core.settings.sections import CheckoutSettings, DatabaseSettings, SecuritySettings


def test_defaults():
    settings = AppSettings()

    assert settings.database.pool_size == 10
    assert settings.checkout.currency == "KRW"
    assert settings.checkout.initial_order_status == OrderStatus.PAID
    assert settings.checkout.payment_status == PaymentStatus.SUCCESS
    assert settings.security.bcrypt_rounds == 10


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DB_URL", "postgresql+asyncpg://shop:secret@db/shop")
    monkeypatch.setenv("DB_POOL_SIZE", "20")
    monkeypatch.setenv("CHECKOUT_TRANSACTION_ID_PREFIX", "TX_")
    monkeypatch.setenv("SECURITY_BCRYPT_ROUNDS", "4")

    database = DatabaseSettings()

    assert database.pool_size == 20
    assert not database.is_sqlite
    assert CheckoutSettings().transaction_id_prefix == "TX_"
    assert SecuritySettings().bcrypt_rounds == 4


def test_sqlite_detection():
    assert DatabaseSettings(url="sqlite+aiosqlite:///./x.db").is_sqlite
