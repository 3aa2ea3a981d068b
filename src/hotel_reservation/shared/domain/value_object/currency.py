from dataclasses import dataclass
from typing import ClassVar

from ..exception import ValidationError


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: COP, EUR, JPY, USD
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"COP", "EUR", "JPY", "USD"})

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise ValidationError(f"Currency code must be a string: {self.code!r}")
        normalized = self.code.upper()
        if normalized not in self.SUPPORTED:
            raise ValidationError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code
