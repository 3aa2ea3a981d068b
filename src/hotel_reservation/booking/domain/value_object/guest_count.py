from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationError


@dataclass(frozen=True)
class GuestCount:
    """宿泊人数（1名以上）"""

    value: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Guest count must be an integer: {self.value!r}")
        if self.value < 1:
            raise ValidationError("Guest count must be at least 1")

    def __int__(self) -> int:
        return self.value
