from hotel_reservation.booking.domain.enum import RoomType
from hotel_reservation.booking.domain.value_object import HotelId, RoomId
from hotel_reservation.shared.domain import AggregateRoot, Money


class Room(AggregateRoot[RoomId]):
    """客室エンティティ

    available は登録時の指定と予約による確保の両方を表す。
    予約が確保した場合のみ held_by_booking が立ち、解放時に予約可能へ戻す。
    """

    def __init__(
        self,
        id: RoomId,
        hotel_id: HotelId,
        number: str,
        room_type: RoomType,
        price_per_night: Money,
        available: bool = True,
        held_by_booking: bool = False,
    ) -> None:
        super().__init__(id)
        self._hotel_id = hotel_id
        self._number = number
        self._room_type = room_type
        self._price_per_night = price_per_night
        self._available = available
        self._held_by_booking = held_by_booking

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def number(self) -> str:
        return self._number

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def price_per_night(self) -> Money:
        return self._price_per_night

    @property
    def available(self) -> bool:
        return self._available

    @property
    def held_by_booking(self) -> bool:
        return self._held_by_booking

    def occupy(self) -> None:
        """予約で客室を確保し、予約不可にする"""
        if self._available:
            self._held_by_booking = True
        self._available = False

    def release(self) -> None:
        """予約による確保を解放する（登録時から予約不可の客室はそのまま）"""
        if not self._held_by_booking:
            return
        self._held_by_booking = False
        self._available = True
