from pydantic_settings import BaseSettings

from core.domain.enums import OrderStatus, PaymentStatus


class CheckoutSettings(BaseSettings):
    """
    Order placement settings.
    Loaded automatically from .env with prefix CHECKOUT_*

    Payment is synchronous and always succeeds: no gateway is integrated,
    so orders start out as paid and payments as successful.
    """

    currency: str = "KRW"
    initial_order_status: OrderStatus = OrderStatus.PAID
    payment_status: PaymentStatus = PaymentStatus.SUCCESS
    transaction_id_prefix: str = "PG_"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "CHECKOUT_",
        "extra": "ignore",
    }
