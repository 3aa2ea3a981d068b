from abc import abstractmethod

from hotel_reservation.booking.domain.entity.booking import Booking
from hotel_reservation.booking.domain.enum import BookingStatus
from hotel_reservation.booking.domain.value_object import BookingId, RoomId
from hotel_reservation.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: BookingStatus) -> list[Booking]:
        """ステータスで絞り込む（登録順）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_room_id(self, room_id: RoomId) -> list[Booking]:
        """客室IDで絞り込む（登録順）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """予約を更新する"""
        raise NotImplementedError
