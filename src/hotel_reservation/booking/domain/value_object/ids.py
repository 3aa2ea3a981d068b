from dataclasses import dataclass

from hotel_reservation.shared.domain import SequentialId


@dataclass(frozen=True)
class HotelId(SequentialId):
    """ホテルID"""


@dataclass(frozen=True)
class RoomId(SequentialId):
    """客室ID"""


@dataclass(frozen=True)
class BookingId(SequentialId):
    """予約ID"""
