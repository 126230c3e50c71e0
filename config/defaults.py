"""Default configuration constants for the Hotel Room Reservation engine."""

# Grid shape (fixed: room ids and the 97-room inventory depend on it)
FLOOR_COUNT = 10
ROOMS_PER_FLOOR = 10
TOP_FLOOR_ROOMS = 7  # Floor 10 is shorter than the rest

# Booking policy bounds
MIN_ROOMS_PER_BOOKING = 1
MAX_ROOMS_PER_BOOKING = 5

# Travel-time weights (minutes)
MINUTES_PER_FLOOR = 2   # Vertical: lift/stairs
MINUTES_PER_ROOM = 1    # Horizontal: one adjacent room

# Position next to the lift/stairs, used to seed cross-floor bookings
ENTRY_POSITION = 1

# Random occupancy simulation
RANDOM_OCCUPANCY_PROBABILITY = 0.3

# Booking strategies
STRATEGY_SAME_FLOOR = "same_floor"
STRATEGY_MULTI_FLOOR = "multi_floor"

# Booking id format
BOOKING_ID_PREFIX = "BK"

# Tabular import/export columns
ROOM_COLUMNS = [
    "Room ID",
    "Floor",
    "Position",
    "Occupied",
]
