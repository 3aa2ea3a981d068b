from .reservation_engine import ReservationEngine as ReservationEngine
