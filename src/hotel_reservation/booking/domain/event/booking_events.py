from dataclasses import dataclass

from hotel_reservation.booking.domain.enum import BookingStatus
from hotel_reservation.booking.domain.value_object import BookingId, RoomId


@dataclass(frozen=True)
class BookingCreated:
    """予約が作成された"""

    booking_id: BookingId
    room_id: RoomId
    status: BookingStatus


@dataclass(frozen=True)
class BookingStatusChanged:
    """予約ステータスが遷移した"""

    booking_id: BookingId
    room_id: RoomId
    previous_status: BookingStatus
    new_status: BookingStatus
