"""Occupancy updates and per-floor occupancy stats.

Every helper returns a new room list; the rooms passed in are never mutated.
"""

import random
from dataclasses import replace
from typing import Iterable, List, Optional
from models.room import Room
from config.defaults import FLOOR_COUNT, RANDOM_OCCUPANCY_PROBABILITY


def mark_occupied(rooms: List[Room], room_ids: Iterable[str]) -> List[Room]:
    """Return a copy of `rooms` with the given room ids marked occupied."""
    booked = set(room_ids)
    return [
        replace(room, is_occupied=True) if room.room_id in booked else replace(room)
        for room in rooms
    ]


def randomize_occupancy(
    rooms: List[Room],
    probability: float = RANDOM_OCCUPANCY_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> List[Room]:
    """Occupy each room independently with the given probability."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Occupancy probability must be between 0 and 1, got {probability}")
    rng = rng or random.Random()
    return [replace(room, is_occupied=rng.random() < probability) for room in rooms]


def get_floor_occupancy(rooms: List[Room]) -> List[dict]:
    """Compute occupancy stats per floor."""
    occupied = {}
    present = {}
    for room in rooms:
        present[room.floor] = present.get(room.floor, 0) + 1
        if room.is_occupied:
            occupied[room.floor] = occupied.get(room.floor, 0) + 1

    results = []
    for floor in range(1, FLOOR_COUNT + 1):
        total = present.get(floor, 0)
        used = occupied.get(floor, 0)
        results.append({
            "floor": floor,
            "total_rooms": total,
            "occupied_rooms": used,
            "available_rooms": total - used,
            "occupancy_pct": used / total if total > 0 else 0,
        })
    return results
