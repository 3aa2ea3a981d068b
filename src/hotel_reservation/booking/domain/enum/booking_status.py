from __future__ import annotations

from enum import Enum

from hotel_reservation.shared.domain.exception import ValidationError


class BookingStatus(str, Enum):
    """予約ステータス

    pending -> confirmed -> checked-in -> checked-out の順に進み、
    終端以外のどの状態からも cancelled に遷移できる。
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: BookingStatus | str) -> BookingStatus:
        """文字列または BookingStatus を BookingStatus に変換する"""
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(f"Unknown booking status: {value!r}") from e

    @property
    def is_occupying(self) -> bool:
        """客室を押さえている状態かどうか"""
        return self in (BookingStatus.CONFIRMED, BookingStatus.CHECKED_IN)

    def can_transition_to(self, target: BookingStatus) -> bool:
        return target in BOOKING_TRANSITIONS[self]


BOOKING_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset(
        {BookingStatus.CHECKED_IN, BookingStatus.CANCELLED}
    ),
    BookingStatus.CHECKED_IN: frozenset(
        {BookingStatus.CHECKED_OUT, BookingStatus.CANCELLED}
    ),
    BookingStatus.CHECKED_OUT: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}
