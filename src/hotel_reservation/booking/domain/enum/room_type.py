from __future__ import annotations

from enum import Enum

from hotel_reservation.shared.domain.exception import ValidationError


class RoomType(str, Enum):
    """客室タイプ"""

    SINGLE = "single"
    DOUBLE = "double"
    SUITE = "suite"
    FAMILY = "family"

    @classmethod
    def parse(cls, value: RoomType | str) -> RoomType:
        """文字列または RoomType を RoomType に変換する"""
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(f"Unknown room type: {value!r}") from e
