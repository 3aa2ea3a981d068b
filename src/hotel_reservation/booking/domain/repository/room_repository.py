from abc import abstractmethod

from hotel_reservation.booking.domain.entity.room import Room
from hotel_reservation.booking.domain.value_object import HotelId, RoomId
from hotel_reservation.shared.domain import Repository


class RoomRepository(Repository[Room, RoomId]):
    """客室レポジトリのインターフェース"""

    @abstractmethod
    def save(self, room: Room) -> None:
        """客室を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self, hotel_id: HotelId | None = None) -> list[Room]:
        """登録順に取得する（hotel_id 指定時はそのホテルのみ）"""
        raise NotImplementedError

    @abstractmethod
    def find_available(self, hotel_id: HotelId | None = None) -> list[Room]:
        """予約可能な客室を登録順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, room: Room) -> None:
        """客室を更新する"""
        raise NotImplementedError
