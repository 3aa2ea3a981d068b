from .booking_status import BookingStatus as BookingStatus
from .room_type import RoomType as RoomType
