from .in_memory_booking_repository import (
    InMemoryBookingRepository as InMemoryBookingRepository,
)
from .in_memory_hotel_repository import (
    InMemoryHotelRepository as InMemoryHotelRepository,
)
from .in_memory_id_sequence import InMemoryIdSequence as InMemoryIdSequence
from .in_memory_room_repository import (
    InMemoryRoomRepository as InMemoryRoomRepository,
)
from .in_memory_table import InMemoryTable as InMemoryTable
from .reservation_store import ReservationStore as ReservationStore
