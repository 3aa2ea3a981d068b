from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hotel_reservation.booking.domain.entity.room import Room


@dataclass(frozen=True)
class RoomStats:
    """客室の空き状況サマリ（ダッシュボード表示用）"""

    total: int
    available: int
    occupied: int
    availability_percentage: int

    @classmethod
    def from_rooms(cls, rooms: Iterable[Room]) -> RoomStats:
        """客室一覧から集計する"""
        rooms = list(rooms)
        total = len(rooms)
        available = sum(1 for room in rooms if room.available)
        if total == 0:
            percentage = 0
        else:
            percentage = int(
                (Decimal(available) * 100 / Decimal(total)).quantize(
                    Decimal("1"), rounding=ROUND_HALF_UP
                )
            )
        return cls(
            total=total,
            available=available,
            occupied=total - available,
            availability_percentage=percentage,
        )
