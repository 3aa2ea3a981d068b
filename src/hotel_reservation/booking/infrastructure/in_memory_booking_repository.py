from hotel_reservation.booking.domain.entity import Booking
from hotel_reservation.booking.domain.enum import BookingStatus
from hotel_reservation.booking.domain.repository import BookingRepository
from hotel_reservation.booking.domain.value_object import (
    BookingId,
    Guest,
    GuestCount,
    RoomId,
    StayPeriod,
)
from hotel_reservation.booking.infrastructure.in_memory_table import (
    ConditionalCheckFailedError,
    InMemoryTable,
)
from hotel_reservation.shared.domain.exception import (
    DuplicateResourceException,
    NotFoundError,
)


class InMemoryBookingRepository(BookingRepository):
    """インメモリテーブルを使用した BookingRepository の具象実装"""

    def __init__(self, table: InMemoryTable | None = None) -> None:
        self.table = table or InMemoryTable(key_name="booking_id")

    def save(self, booking: Booking) -> None:
        """予約を保存する"""
        try:
            self.table.put_item(self._to_item(booking))
        except ConditionalCheckFailedError as e:
            raise DuplicateResourceException(
                f"Booking already exists: {booking.id}"
            ) from e

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        item = self.table.get_item(booking_id.value)
        if not item:
            return None
        return self._to_entity(item)

    def find_by_status(self, status: BookingStatus) -> list[Booking]:
        items = self.table.scan(lambda item: item["status"] == status.value)
        return [self._to_entity(item) for item in items]

    def find_by_room_id(self, room_id: RoomId) -> list[Booking]:
        items = self.table.scan(lambda item: item["room_id"] == room_id.value)
        return [self._to_entity(item) for item in items]

    def update(self, booking: Booking) -> None:
        """予約のステータスを更新する"""
        try:
            self.table.update_item(self._to_item(booking))
        except ConditionalCheckFailedError as e:
            raise NotFoundError(f"Booking not found: {booking.id}") from e

    def _to_item(self, booking: Booking) -> dict:
        return {
            "booking_id": booking.id.value,
            "room_id": booking.room_id.value,
            "guest_id": booking.guest.id,
            "guest_name": booking.guest.name,
            "guest_email": booking.guest.email,
            "check_in_date": booking.check_in,
            "check_out_date": booking.check_out,
            "guest_count": booking.guest_count.value,
            "status": booking.status.value,
        }

    def _to_entity(self, item: dict) -> Booking:
        """保存アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(item["booking_id"]),
            room_id=RoomId(item["room_id"]),
            guest=Guest(
                id=item["guest_id"],
                name=item["guest_name"],
                email=item["guest_email"],
            ),
            stay_period=StayPeriod(
                check_in=item["check_in_date"],
                check_out=item["check_out_date"],
            ),
            guest_count=GuestCount(item["guest_count"]),
            status=BookingStatus(item["status"]),
        )
