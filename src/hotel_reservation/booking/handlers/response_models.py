from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from hotel_reservation.booking.domain.entity import Booking, Hotel, Room
from hotel_reservation.booking.domain.value_object import RoomStats

T = TypeVar("T")


class HotelData(BaseModel):
    """ホテルデータのレスポンスモデル"""

    hotel_id: int
    name: str
    city: str
    rating: float | None


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    room_id: int
    hotel_id: int
    number: str
    room_type: str
    price_per_night: str
    currency: str
    available: bool


class GuestData(BaseModel):
    guest_id: int
    name: str
    email: str


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int
    room_id: int
    guest: GuestData
    check_in_date: str
    check_out_date: str
    nights: int
    guest_count: int
    status: str


class RoomStatsData(BaseModel):
    """客室空き状況のレスポンスモデル"""

    total: int
    available: int
    occupied: int
    availability_percentage: int


class SuccessResponse(BaseModel, Generic[T]):
    """成功レスポンスモデル"""

    status: str = "success"
    data: T


class ListResponse(BaseModel, Generic[T]):
    """一覧取得の成功レスポンスモデル"""

    status: str = "success"
    data: list[T]
    count: int


def to_hotel_data(hotel: Hotel) -> HotelData:
    return HotelData(
        hotel_id=hotel.id.value,
        name=str(hotel.name),
        city=hotel.city,
        rating=float(hotel.rating) if hotel.rating is not None else None,
    )


def to_room_data(room: Room) -> RoomData:
    return RoomData(
        room_id=room.id.value,
        hotel_id=room.hotel_id.value,
        number=room.number,
        room_type=room.room_type.value,
        price_per_night=str(room.price_per_night.amount),
        currency=str(room.price_per_night.currency),
        available=room.available,
    )


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=booking.id.value,
        room_id=booking.room_id.value,
        guest=GuestData(
            guest_id=booking.guest.id,
            name=booking.guest.name,
            email=booking.guest.email,
        ),
        check_in_date=booking.check_in,
        check_out_date=booking.check_out,
        nights=booking.nights(),
        guest_count=booking.guest_count.value,
        status=booking.status.value,
    )


def to_room_stats_data(stats: RoomStats) -> RoomStatsData:
    return RoomStatsData(
        total=stats.total,
        available=stats.available,
        occupied=stats.occupied,
        availability_percentage=stats.availability_percentage,
    )


def success(data: BaseModel) -> dict:
    """単一リソースの成功レスポンス辞書を生成する"""
    return SuccessResponse[type(data)](data=data).model_dump()


def success_list(items: list[BaseModel], item_type: type[BaseModel]) -> dict:
    """一覧の成功レスポンス辞書を生成する"""
    return ListResponse[item_type](data=items, count=len(items)).model_dump()
