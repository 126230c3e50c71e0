"""Travel-time metric between rooms."""

from typing import List
from models.room import Room
from config.defaults import MINUTES_PER_FLOOR, MINUTES_PER_ROOM


def travel_time(room_a: Room, room_b: Room) -> int:
    """Minutes to walk between two rooms.

    Across floors the horizontal offset is still counted in full on top of the
    vertical leg; the lift is not modelled as a position.
    """
    horizontal = abs(room_a.position - room_b.position) * MINUTES_PER_ROOM
    if room_a.floor == room_b.floor:
        return horizontal
    vertical = abs(room_a.floor - room_b.floor) * MINUTES_PER_FLOOR
    return vertical + horizontal


def total_travel_time(rooms: List[Room]) -> int:
    """Aggregate cost of a sequence: every room measured against the last one.

    Order-dependent. [1, 2, 5] on one floor costs 4 + 3 = 7, while [5, 1, 2]
    costs 3 + 1 = 4.
    """
    if len(rooms) <= 1:
        return 0
    hub = rooms[-1]
    return sum(travel_time(room, hub) for room in rooms[:-1])
