"""Domain value objects - pure Python immutable types."""

import random
import time
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Prices in the catalog are whole won amounts, but the type keeps
    full Decimal precision so totals are exact.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "KRW"

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def zero(cls, currency: str = "KRW") -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, quantity: int) -> 'Money':
        """Multiply by an item quantity."""
        if not isinstance(quantity, int):
            return NotImplemented
        return Money(amount=self.amount * quantity, currency=self.currency)


@dataclass(frozen=True)
class RequestedItem:
    """One (product, quantity) pairing within an order request."""

    product_id: int
    quantity: int

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(
                f"Quantity must be a positive integer, got: {self.quantity}"
            )


@dataclass(frozen=True)
class TransactionId:
    """
    Payment transaction identifier.

    Format: <prefix><epoch millis><5 random digits>, e.g. PG_171234567890104217.

    No payment gateway is integrated, so the token is generated locally.
    It is unique enough for this scope but carries no collision guarantee
    and is not cryptographically random.
    """

    value: str

    @classmethod
    def generate(cls, prefix: str = "PG_") -> "TransactionId":
        """Generate a new time-based TransactionId."""
        millis = int(time.time() * 1000)
        suffix = f"{random.randint(0, 99999):05d}"
        return cls(value=f"{prefix}{millis}{suffix}")

    def __str__(self) -> str:
        return self.value
