from decimal import Decimal

from hotel_reservation.booking.domain.entity import Room
from hotel_reservation.booking.domain.enum import RoomType
from hotel_reservation.booking.domain.repository import RoomRepository
from hotel_reservation.booking.domain.value_object import HotelId, RoomId
from hotel_reservation.booking.infrastructure.in_memory_table import (
    ConditionalCheckFailedError,
    InMemoryTable,
)
from hotel_reservation.shared.domain import Currency, Money
from hotel_reservation.shared.domain.exception import (
    DuplicateResourceException,
    NotFoundError,
)


class InMemoryRoomRepository(RoomRepository):
    """インメモリテーブルを使用した RoomRepository の具象実装"""

    def __init__(self, table: InMemoryTable | None = None) -> None:
        self.table = table or InMemoryTable(key_name="room_id")

    def save(self, room: Room) -> None:
        """客室を保存する"""
        try:
            self.table.put_item(self._to_item(room))
        except ConditionalCheckFailedError as e:
            raise DuplicateResourceException(f"Room already exists: {room.id}") from e

    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索"""
        item = self.table.get_item(room_id.value)
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self, hotel_id: HotelId | None = None) -> list[Room]:
        items = self.table.scan(
            lambda item: hotel_id is None or item["hotel_id"] == hotel_id.value
        )
        return [self._to_entity(item) for item in items]

    def find_available(self, hotel_id: HotelId | None = None) -> list[Room]:
        items = self.table.scan(
            lambda item: item["available"]
            and (hotel_id is None or item["hotel_id"] == hotel_id.value)
        )
        return [self._to_entity(item) for item in items]

    def update(self, room: Room) -> None:
        """客室の状態を更新する"""
        try:
            self.table.update_item(self._to_item(room))
        except ConditionalCheckFailedError as e:
            raise NotFoundError(f"Room not found: {room.id}") from e

    def _to_item(self, room: Room) -> dict:
        return {
            "room_id": room.id.value,
            "hotel_id": room.hotel_id.value,
            "number": room.number,
            "room_type": room.room_type.value,
            "price_amount": str(room.price_per_night.amount),
            "price_currency": str(room.price_per_night.currency),
            "available": room.available,
            "held_by_booking": room.held_by_booking,
        }

    def _to_entity(self, item: dict) -> Room:
        """保存アイテムをドメインエンティティに変換する"""
        return Room(
            id=RoomId(item["room_id"]),
            hotel_id=HotelId(item["hotel_id"]),
            number=item["number"],
            room_type=RoomType(item["room_type"]),
            price_per_night=Money(
                amount=Decimal(item["price_amount"]),
                currency=Currency(item["price_currency"]),
            ),
            available=item["available"],
            held_by_booking=item["held_by_booking"],
        )
