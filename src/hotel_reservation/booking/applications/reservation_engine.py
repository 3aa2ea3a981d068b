from dataclasses import asdict
from decimal import Decimal

from hotel_reservation.booking.domain.entity import Booking, Hotel, Room
from hotel_reservation.booking.domain.enum import BookingStatus, RoomType
from hotel_reservation.booking.domain.factory import ReservationFactory
from hotel_reservation.booking.domain.value_object import (
    BookingId,
    Guest,
    HotelId,
    RoomId,
    RoomStats,
    StayPeriod,
)
from hotel_reservation.booking.infrastructure.reservation_store import (
    ReservationStore,
)
from hotel_reservation.shared.domain import AggregateRoot
from hotel_reservation.shared.domain.exception import NotFoundError
from hotel_reservation.shared.utils import Settings, get_logger, to_decimal


class ReservationEngine:
    """予約ドメインエンジン

    ホテル・客室・予約の作成と照会を行うユースケースの窓口。
    状態はすべてコンストラクタで受け取った ReservationStore が保持する。

    - 各コマンドは検証をすべて終えてから書き込むため、失敗時は何も変更しない
    - 照会結果は保存データから組み立てたスナップショットで、後続の更新は反映されない
    """

    def __init__(
        self, store: ReservationStore, settings: Settings | None = None
    ) -> None:
        self._store = store
        self._settings = settings or Settings()
        self._factory = ReservationFactory(store.id_sequence)
        self._logger = get_logger(self._settings.service_name)

    def create_hotel(self, name: str, city: str, rating: float | None = None) -> Hotel:
        """ホテルを登録する"""
        hotel = self._factory.create_hotel(name=name, city=city, rating=rating)
        self._store.hotels.save(hotel)
        self._logger.info("Hotel created", extra={"hotel_id": hotel.id.value})
        return hotel

    def create_room(
        self,
        hotel_id: HotelId,
        number: str,
        room_type: RoomType | str,
        price_per_night: Decimal | int | float | str,
        available: bool = True,
        currency: str | None = None,
    ) -> Room:
        """客室を登録する

        STRICT_HOTEL_REFERENCE が有効な場合、存在しないホテルへの登録は NotFoundError
        """
        parsed_type = RoomType.parse(room_type)
        price_amount = to_decimal(price_per_night)
        if (
            self._settings.strict_hotel_reference
            and self._store.hotels.find_by_id(hotel_id) is None
        ):
            raise NotFoundError(f"Hotel not found: {hotel_id}")

        room = self._factory.create_room(
            hotel_id=hotel_id,
            number=number,
            room_type=parsed_type,
            price_amount=price_amount,
            currency_code=currency or self._settings.default_currency,
            available=available,
        )
        self._store.rooms.save(room)
        self._logger.info(
            "Room created",
            extra={"room_id": room.id.value, "hotel_id": hotel_id.value},
        )
        return room

    def create_booking(
        self,
        room_id: RoomId,
        guest: Guest,
        check_in: str,
        check_out: str,
        initial_status: BookingStatus | str = BookingStatus.PENDING,
        guest_count: int = 1,
    ) -> Booking:
        """予約を作成する

        確定(confirmed)状態で作成した場合のみ、対象客室を予約不可にする
        """
        stay_period = StayPeriod(check_in=check_in, check_out=check_out)
        status = BookingStatus.parse(initial_status)
        room = self._get_room(room_id)

        booking = self._factory.create_booking(
            room_id=room.id,
            guest=guest,
            stay_period=stay_period,
            status=status,
            guest_count=guest_count,
        )
        self._store.bookings.save(booking)

        if status == BookingStatus.CONFIRMED:
            room.occupy()
            self._store.rooms.update(room)

        self._publish_events(booking)
        return booking

    def list_hotels(self) -> list[Hotel]:
        """登録済みのホテルを登録順に返す"""
        return self._store.hotels.find_all()

    def list_available_rooms(self, hotel_id: HotelId | None = None) -> list[Room]:
        """予約可能な客室を返す（hotel_id 指定時はそのホテルのみ）"""
        return self._store.rooms.find_available(hotel_id)

    def filter_bookings_by_status(self, status: BookingStatus | str) -> list[Booking]:
        """指定ステータスの予約を登録順に返す"""
        return self._store.bookings.find_by_status(BookingStatus.parse(status))

    def get_booking(self, booking_id: BookingId) -> Booking:
        booking = self._store.bookings.find_by_id(booking_id)
        if booking is None:
            raise NotFoundError(f"Booking not found: {booking_id}")
        return booking

    def transition_booking(
        self, booking_id: BookingId, new_status: BookingStatus | str
    ) -> Booking:
        """予約ステータスを遷移させ、客室の空き状況を再計算する"""
        target = BookingStatus.parse(new_status)
        booking = self.get_booking(booking_id)
        previous_status = booking.status

        booking.transition_to(target)
        self._store.bookings.update(booking)
        self._sync_room_availability(booking, previous_status)

        self._publish_events(booking)
        return booking

    def room_stats(self, hotel_id: HotelId | None = None) -> RoomStats:
        """客室の空き状況を集計する"""
        return RoomStats.from_rooms(self._store.rooms.find_all(hotel_id))

    def _get_room(self, room_id: RoomId) -> Room:
        room = self._store.rooms.find_by_id(room_id)
        if room is None:
            raise NotFoundError(f"Room not found: {room_id}")
        return room

    def _sync_room_availability(
        self, booking: Booking, previous_status: BookingStatus
    ) -> None:
        room = self._get_room(booking.room_id)

        if booking.status.is_occupying:
            room.occupy()
        elif previous_status.is_occupying:
            still_held = any(
                other.status.is_occupying
                for other in self._store.bookings.find_by_room_id(room.id)
                if other.id != booking.id
            )
            if still_held:
                return
            room.release()
        else:
            return

        self._store.rooms.update(room)

    def _publish_events(self, aggregate: AggregateRoot) -> None:
        for event in aggregate.flush_domain_events():
            self._logger.info(type(event).__name__, extra=asdict(event))
