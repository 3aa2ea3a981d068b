from __future__ import annotations

from dataclasses import dataclass

from hotel_reservation.booking.domain.repository import (
    BookingRepository,
    HotelRepository,
    IdSequence,
    RoomRepository,
)
from hotel_reservation.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)
from hotel_reservation.booking.infrastructure.in_memory_hotel_repository import (
    InMemoryHotelRepository,
)
from hotel_reservation.booking.infrastructure.in_memory_id_sequence import (
    InMemoryIdSequence,
)
from hotel_reservation.booking.infrastructure.in_memory_room_repository import (
    InMemoryRoomRepository,
)


@dataclass(frozen=True)
class ReservationStore:
    """エンジンが所有する状態一式（3つのレポジトリ + 共通の採番）"""

    hotels: HotelRepository
    rooms: RoomRepository
    bookings: BookingRepository
    id_sequence: IdSequence

    @classmethod
    def in_memory(cls) -> ReservationStore:
        """空のインメモリストアを生成する"""
        return cls(
            hotels=InMemoryHotelRepository(),
            rooms=InMemoryRoomRepository(),
            bookings=InMemoryBookingRepository(),
            id_sequence=InMemoryIdSequence(),
        )
