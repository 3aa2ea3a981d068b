from .entity import Booking as Booking
from .entity import Hotel as Hotel
from .entity import Room as Room
from .enum import BookingStatus as BookingStatus
from .enum import RoomType as RoomType
from .factory import ReservationFactory as ReservationFactory
from .repository import BookingRepository as BookingRepository
from .repository import HotelRepository as HotelRepository
from .repository import IdSequence as IdSequence
from .repository import RoomRepository as RoomRepository
from .value_object import BookingId as BookingId
from .value_object import Guest as Guest
from .value_object import HotelId as HotelId
from .value_object import RoomId as RoomId
from .value_object import RoomStats as RoomStats
from .value_object import StayPeriod as StayPeriod
