from decimal import Decimal

from hotel_reservation.booking.domain.entity import Booking, Hotel, Room
from hotel_reservation.booking.domain.enum import BookingStatus, RoomType
from hotel_reservation.booking.domain.event import BookingCreated
from hotel_reservation.booking.domain.repository import IdSequence
from hotel_reservation.booking.domain.value_object import (
    BookingId,
    Guest,
    GuestCount,
    HotelId,
    HotelName,
    Rating,
    RoomId,
    StayPeriod,
)
from hotel_reservation.shared.domain import Currency, Money
from hotel_reservation.shared.domain.exception import ValidationError


class ReservationFactory:
    """ホテル・客室・予約エンティティを生成するFactory

    値オブジェクトの検証がすべて通ってから ID を採番する。
    検証に失敗した場合は ID を消費しない。
    """

    def __init__(self, id_sequence: IdSequence) -> None:
        self._id_sequence = id_sequence

    def create_hotel(self, name: str, city: str, rating: float | None = None) -> Hotel:
        """新規ホテルのエンティティを作成する"""
        hotel_name = HotelName(name)
        city = _require_text(city, "City")
        hotel_rating = Rating(rating) if rating is not None else None

        return Hotel(
            id=HotelId(self._id_sequence.next()),
            name=hotel_name,
            city=city,
            rating=hotel_rating,
        )

    def create_room(
        self,
        hotel_id: HotelId,
        number: str,
        room_type: RoomType,
        price_amount: Decimal,
        currency_code: str,
        available: bool = True,
    ) -> Room:
        """新規客室のエンティティを作成する"""
        number = _require_text(number, "Room number")
        price = Money(amount=price_amount, currency=Currency(currency_code))

        return Room(
            id=RoomId(self._id_sequence.next()),
            hotel_id=hotel_id,
            number=number,
            room_type=room_type,
            price_per_night=price,
            available=bool(available),
        )

    def create_booking(
        self,
        room_id: RoomId,
        guest: Guest,
        stay_period: StayPeriod,
        status: BookingStatus = BookingStatus.PENDING,
        guest_count: int = 1,
    ) -> Booking:
        """新規予約のエンティティを作成する"""
        if not isinstance(guest, Guest):
            raise ValidationError(f"Invalid guest: {guest!r}")
        count = GuestCount(guest_count)

        booking = Booking(
            id=BookingId(self._id_sequence.next()),
            room_id=room_id,
            guest=guest,
            stay_period=stay_period,
            status=status,
            guest_count=count,
        )
        booking.add_domain_event(
            BookingCreated(booking_id=booking.id, room_id=room_id, status=status)
        )
        return booking


def _require_text(value: str, field_name: str) -> str:
    if not isinstance(value, str) or len(value.strip()) == 0:
        raise ValidationError(f"{field_name} cannot be empty")
    return value
