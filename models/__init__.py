from models.room import Room
from models.booking import BookingResult
from models.audit import ReservationEvent
