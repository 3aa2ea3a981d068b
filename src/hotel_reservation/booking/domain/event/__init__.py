from .booking_events import BookingCreated as BookingCreated
from .booking_events import BookingStatusChanged as BookingStatusChanged
