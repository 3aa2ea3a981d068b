from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationError


@dataclass(frozen=True)
class HotelName:
    """ホテル名"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value.strip()) == 0:
            raise ValidationError("Hotel name cannot be empty")

    def __str__(self) -> str:
        return self.value
