"""Room grid generation and per-floor availability."""

from typing import Dict, List
from models.room import Room
from config.defaults import FLOOR_COUNT, ROOMS_PER_FLOOR, TOP_FLOOR_ROOMS


def rooms_on_floor(floor: int) -> int:
    """Number of rooms on a floor. The top floor is shorter than the rest."""
    return TOP_FLOOR_ROOMS if floor == FLOOR_COUNT else ROOMS_PER_FLOOR


def generate_rooms() -> List[Room]:
    """Build the full inventory: floors ascending, positions ascending, all available."""
    rooms = []
    for floor in range(1, FLOOR_COUNT + 1):
        for position in range(1, rooms_on_floor(floor) + 1):
            rooms.append(Room(floor=floor, position=position))
    return rooms


def available_by_floor(rooms: List[Room]) -> Dict[int, List[Room]]:
    """Map every floor to its unoccupied rooms in ascending position order.

    All floors are present as keys, including those with nothing free.
    """
    floor_map: Dict[int, List[Room]] = {floor: [] for floor in range(1, FLOOR_COUNT + 1)}
    for room in sorted(rooms, key=lambda r: (r.floor, r.position)):
        if room.is_occupied or room.floor not in floor_map:
            continue
        floor_map[room.floor].append(room)
    return floor_map
