from hotel_reservation.booking.domain.value_object import HotelId, HotelName, Rating
from hotel_reservation.shared.domain import AggregateRoot


class Hotel(AggregateRoot[HotelId]):
    """ホテルエンティティ"""

    def __init__(
        self,
        id: HotelId,
        name: HotelName,
        city: str,
        rating: Rating | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._city = city
        self._rating = rating

    @property
    def name(self) -> HotelName:
        return self._name

    @property
    def city(self) -> str:
        return self._city

    @property
    def rating(self) -> Rating | None:
        return self._rating
