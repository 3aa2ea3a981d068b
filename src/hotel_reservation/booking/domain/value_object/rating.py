from dataclasses import dataclass
from typing import ClassVar

from hotel_reservation.shared.domain.exception import ValidationError


@dataclass(frozen=True)
class Rating:
    """ホテルの評価（0〜5）"""

    MIN: ClassVar[float] = 0.0
    MAX: ClassVar[float] = 5.0

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValidationError(f"Rating must be a number: {self.value!r}")
        if not self.MIN <= self.value <= self.MAX:
            raise ValidationError(
                f"Rating must be between {self.MIN:g} and {self.MAX:g}: {self.value}"
            )

    def __float__(self) -> float:
        return float(self.value)
