"""Payment entity."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import PaymentStatus
from ..value_objects import Money, TransactionId


@dataclass
class Payment:
    """Payment recorded for exactly one order; amount equals the order total."""
    order_id: int
    payment_method: Optional[str]
    amount: Money
    transaction_id: TransactionId
    status: PaymentStatus = PaymentStatus.SUCCESS
    payment_date: datetime = field(default_factory=datetime.utcnow)
    payment_id: Optional[int] = None
