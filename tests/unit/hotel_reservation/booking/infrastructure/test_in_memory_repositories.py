from decimal import Decimal

import pytest

from hotel_reservation.booking.domain.entity import Booking, Hotel, Room
from hotel_reservation.booking.domain.enum import BookingStatus, RoomType
from hotel_reservation.booking.domain.value_object import (
    BookingId,
    HotelId,
    HotelName,
    RoomId,
    StayPeriod,
)
from hotel_reservation.booking.infrastructure import (
    InMemoryBookingRepository,
    InMemoryHotelRepository,
    InMemoryRoomRepository,
    InMemoryTable,
)
from hotel_reservation.booking.infrastructure.in_memory_table import (
    ConditionalCheckFailedError,
)
from hotel_reservation.shared.domain import Currency, Money
from hotel_reservation.shared.domain.exception import (
    DuplicateResourceException,
    NotFoundError,
)


def _room(room_id: int, hotel_id: int = 1, available: bool = True) -> Room:
    return Room(
        id=RoomId(room_id),
        hotel_id=HotelId(hotel_id),
        number=str(100 + room_id),
        room_type=RoomType.DOUBLE,
        price_per_night=Money(Decimal("220000"), Currency("COP")),
        available=available,
    )


class TestInMemoryTable:
    def test_put_existing_key_fails(self):
        table = InMemoryTable(key_name="id")
        table.put_item({"id": 1})
        with pytest.raises(ConditionalCheckFailedError):
            table.put_item({"id": 1})

    def test_update_missing_key_fails(self):
        table = InMemoryTable(key_name="id")
        with pytest.raises(ConditionalCheckFailedError):
            table.update_item({"id": 1})

    def test_returned_items_are_copies(self):
        table = InMemoryTable(key_name="id")
        table.put_item({"id": 1, "value": "a"})

        table.get_item(1)["value"] = "b"
        table.scan()[0]["value"] = "c"

        assert table.get_item(1) == {"id": 1, "value": "a"}


class TestInMemoryHotelRepository:
    def test_save_and_find(self):
        repository = InMemoryHotelRepository()
        repository.save(Hotel(id=HotelId(1), name=HotelName("Hotel Caribe"), city="Cartagena"))

        hotel = repository.find_by_id(HotelId(1))

        assert hotel is not None
        assert str(hotel.name) == "Hotel Caribe"
        assert hotel.rating is None
        assert repository.find_by_id(HotelId(2)) is None

    def test_duplicate_save_raises_error(self):
        repository = InMemoryHotelRepository()
        hotel = Hotel(id=HotelId(1), name=HotelName("Hotel Caribe"), city="Cartagena")
        repository.save(hotel)
        with pytest.raises(DuplicateResourceException):
            repository.save(hotel)


class TestInMemoryRoomRepository:
    def test_find_available_filters_by_hotel_and_availability(self):
        repository = InMemoryRoomRepository()
        repository.save(_room(1, hotel_id=1))
        repository.save(_room(2, hotel_id=1, available=False))
        repository.save(_room(3, hotel_id=9))
        repository.save(_room(4, hotel_id=1))

        assert [r.id for r in repository.find_available()] == [RoomId(1), RoomId(3), RoomId(4)]
        assert [r.id for r in repository.find_available(HotelId(1))] == [RoomId(1), RoomId(4)]
        assert [r.id for r in repository.find_all(HotelId(1))] == [RoomId(1), RoomId(2), RoomId(4)]

    def test_mutating_found_entity_does_not_change_storage(self):
        repository = InMemoryRoomRepository()
        repository.save(_room(1))

        room = repository.find_by_id(RoomId(1))
        room.occupy()

        assert repository.find_by_id(RoomId(1)).available is True

    def test_update_persists_availability(self):
        repository = InMemoryRoomRepository()
        repository.save(_room(1))
        room = repository.find_by_id(RoomId(1))
        room.occupy()

        repository.update(room)

        stored = repository.find_by_id(RoomId(1))
        assert stored.available is False
        assert stored.price_per_night == Money(Decimal("220000"), Currency("COP"))
        assert stored.held_by_booking is True

    def test_update_unknown_room_raises_error(self):
        with pytest.raises(NotFoundError):
            InMemoryRoomRepository().update(_room(1))


class TestInMemoryBookingRepository:
    def test_find_by_status_and_room(self, create_guest):
        repository = InMemoryBookingRepository()
        for booking_id, room_id, status in [
            (1, 10, BookingStatus.PENDING),
            (2, 10, BookingStatus.CANCELLED),
            (3, 11, BookingStatus.CANCELLED),
        ]:
            repository.save(
                Booking(
                    id=BookingId(booking_id),
                    room_id=RoomId(room_id),
                    guest=create_guest(),
                    stay_period=StayPeriod(check_in="2025-03-05", check_out="2025-03-10"),
                    status=status,
                )
            )

        cancelled = repository.find_by_status(BookingStatus.CANCELLED)
        on_room = repository.find_by_room_id(RoomId(10))

        assert [b.id for b in cancelled] == [BookingId(2), BookingId(3)]
        assert [b.id for b in on_room] == [BookingId(1), BookingId(2)]
        assert on_room[0].guest == create_guest()
