from hotel_reservation.booking.domain.enum import BookingStatus
from hotel_reservation.booking.domain.event import BookingStatusChanged
from hotel_reservation.booking.domain.value_object import (
    BookingId,
    Guest,
    GuestCount,
    RoomId,
    StayPeriod,
)
from hotel_reservation.shared.domain import AggregateRoot, Money
from hotel_reservation.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """予約エンティティ"""

    def __init__(
        self,
        id: BookingId,
        room_id: RoomId,
        guest: Guest,
        stay_period: StayPeriod,
        status: BookingStatus = BookingStatus.PENDING,
        guest_count: GuestCount = GuestCount(),
    ) -> None:
        super().__init__(id)
        self._room_id = room_id
        self._guest = guest
        self._stay_period = stay_period
        self._status = status
        self._guest_count = guest_count

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @property
    def guest(self) -> Guest:
        return self._guest

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def check_in(self) -> str:
        return self._stay_period.check_in

    @property
    def check_out(self) -> str:
        return self._stay_period.check_out

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def guest_count(self) -> GuestCount:
        return self._guest_count

    def nights(self) -> int:
        return self._stay_period.nights()

    def total_price(self, price_per_night: Money) -> Money:
        """滞在期間全体の料金を計算する"""
        return price_per_night.multiply(self.nights())

    def transition_to(self, new_status: BookingStatus) -> None:
        """予約ステータスを遷移させる"""
        if not self._status.can_transition_to(new_status):
            raise BusinessRuleViolationException(
                f"Cannot transition booking {self.id} "
                f"from {self._status.value} to {new_status.value}"
            )
        previous_status = self._status
        self._status = new_status
        self.add_domain_event(
            BookingStatusChanged(
                booking_id=self.id,
                room_id=self._room_id,
                previous_status=previous_status,
                new_status=new_status,
            )
        )
