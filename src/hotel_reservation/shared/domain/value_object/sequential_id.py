from dataclasses import dataclass

from ..exception import ValidationError


@dataclass(frozen=True)
class SequentialId:
    """連番で採番されるID

    サブクラスごとに別の型として扱う（HotelId(1) != RoomId(1)）。
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Id must be an integer: {self.value!r}")
        if self.value < 1:
            raise ValidationError(f"Id must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value
