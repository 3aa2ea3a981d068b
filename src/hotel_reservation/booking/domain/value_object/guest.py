import re
from dataclasses import dataclass
from typing import ClassVar

from hotel_reservation.shared.domain.exception import ValidationError


@dataclass(frozen=True)
class Guest:
    """宿泊者（予約に埋め込まれる値オブジェクト）"""

    EMAIL_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    id: int
    name: str
    email: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or len(self.name.strip()) == 0:
            raise ValidationError("Guest name cannot be empty")
        if not isinstance(self.email, str) or not self.EMAIL_PATTERN.match(self.email):
            raise ValidationError(f"Invalid email address: {self.email!r}")
