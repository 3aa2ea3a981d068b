from .booking_repository import BookingRepository as BookingRepository
from .hotel_repository import HotelRepository as HotelRepository
from .id_sequence import IdSequence as IdSequence
from .room_repository import RoomRepository as RoomRepository
