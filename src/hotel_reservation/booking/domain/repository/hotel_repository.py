from abc import abstractmethod

from hotel_reservation.booking.domain.entity.hotel import Hotel
from hotel_reservation.booking.domain.value_object import HotelId
from hotel_reservation.shared.domain import Repository


class HotelRepository(Repository[Hotel, HotelId]):
    """ホテルレポジトリのインターフェース"""

    @abstractmethod
    def save(self, hotel: Hotel) -> None:
        """ホテルを保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Hotel]:
        """登録順に全件取得する"""
        raise NotImplementedError
