from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..exception import ValidationError
from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValidationError(f"Invalid amount: {self.amount}")
        if self.amount < 0:
            raise ValidationError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, factor: int) -> Money:
        """金額を整数倍する（泊数 × 1泊料金など）"""
        return Money(amount=self.amount * factor, currency=self.currency)
