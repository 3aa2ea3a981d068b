from hotel_reservation.booking.domain.repository import IdSequence


class InMemoryIdSequence(IdSequence):
    """プロセス内で単調増加するIDを払い出す"""

    def __init__(self, start: int = 1) -> None:
        self._next_id = start

    def next(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value
