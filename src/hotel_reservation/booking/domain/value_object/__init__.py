from .guest import Guest as Guest
from .guest_count import GuestCount as GuestCount
from .hotel_name import HotelName as HotelName
from .ids import BookingId as BookingId
from .ids import HotelId as HotelId
from .ids import RoomId as RoomId
from .rating import Rating as Rating
from .room_stats import RoomStats as RoomStats
from .stay_period import StayPeriod as StayPeriod
