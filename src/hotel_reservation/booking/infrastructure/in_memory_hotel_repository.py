from hotel_reservation.booking.domain.entity import Hotel
from hotel_reservation.booking.domain.repository import HotelRepository
from hotel_reservation.booking.domain.value_object import HotelId, HotelName, Rating
from hotel_reservation.booking.infrastructure.in_memory_table import (
    ConditionalCheckFailedError,
    InMemoryTable,
)
from hotel_reservation.shared.domain.exception import DuplicateResourceException


class InMemoryHotelRepository(HotelRepository):
    """インメモリテーブルを使用した HotelRepository の具象実装"""

    def __init__(self, table: InMemoryTable | None = None) -> None:
        self.table = table or InMemoryTable(key_name="hotel_id")

    def save(self, hotel: Hotel) -> None:
        """ホテルを保存する"""
        item = {
            "hotel_id": hotel.id.value,
            "name": str(hotel.name),
            "city": hotel.city,
            "rating": float(hotel.rating) if hotel.rating is not None else None,
        }
        try:
            self.table.put_item(item)
        except ConditionalCheckFailedError as e:
            raise DuplicateResourceException(
                f"Hotel already exists: {hotel.id}"
            ) from e

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索"""
        item = self.table.get_item(hotel_id.value)
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Hotel]:
        return [self._to_entity(item) for item in self.table.scan()]

    def _to_entity(self, item: dict) -> Hotel:
        """保存アイテムをドメインエンティティに変換する"""
        rating = item["rating"]
        return Hotel(
            id=HotelId(item["hotel_id"]),
            name=HotelName(item["name"]),
            city=item["city"],
            rating=Rating(rating) if rating is not None else None,
        )
