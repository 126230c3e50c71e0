"""Room allocation logic: the core booking engine."""

import logging
from typing import Dict, List, Optional, Tuple
from models.room import Room
from models.booking import BookingResult
from engine.travel_time import total_travel_time
from engine.explainer import explain_same_floor_booking, explain_multi_floor_booking
from config.defaults import (
    MAX_ROOMS_PER_BOOKING, ENTRY_POSITION,
    STRATEGY_SAME_FLOOR, STRATEGY_MULTI_FLOOR,
)

logger = logging.getLogger(__name__)


def find_contiguous_rooms(rooms: List[Room], count: int) -> List[Room]:
    """Best run of `count` neighbouring free rooms on one floor.

    Neighbouring means adjacent in position order among the free rooms, so a
    run may skip over occupied positions. Returns [] when the floor is short.
    """
    sorted_rooms = sorted(rooms, key=lambda r: r.position)
    if len(sorted_rooms) < count:
        return []

    best_sequence: List[Room] = []
    best_time = float("inf")

    for start in range(len(sorted_rooms) - count + 1):
        sequence = sorted_rooms[start:start + count]
        time = total_travel_time(sequence)
        if time < best_time:  # Strict: the first of equal windows is kept
            best_time = time
            best_sequence = sequence

    return best_sequence


def _pick_seed(all_rooms: List[Room], lowest_floor: int) -> Tuple[Room, bool]:
    """Room next to the lift on the lowest available floor, else the first free room."""
    for room in all_rooms:
        if room.position == ENTRY_POSITION and room.floor == lowest_floor:
            return room, True
    return all_rooms[0], False


def find_multi_floor_booking(
    available_floors: List[Tuple[int, List[Room]]],
    count: int,
) -> Optional[BookingResult]:
    """Greedy booking across floors.

    `available_floors` holds (floor, rooms) pairs for floors with free rooms,
    floor-ascending with rooms position-ascending. That order decides ties.
    """
    all_rooms = [room for _, rooms in available_floors for room in rooms]
    if not all_rooms or len(all_rooms) < count:
        return None

    seed, seeded_at_entry = _pick_seed(all_rooms, available_floors[0][0])
    selected = [seed]
    remaining = [r for r in all_rooms if r is not seed]

    while len(selected) < count and remaining:
        best_room = None
        best_increase = float("inf")
        current_time = total_travel_time(selected)

        for candidate in remaining:
            increase = total_travel_time(selected + [candidate]) - current_time
            if increase < best_increase:
                best_increase = increase
                best_room = candidate

        if best_room is None:
            break
        selected.append(best_room)
        remaining = [r for r in remaining if r is not best_room]

    if len(selected) != count:
        return None

    total_time = total_travel_time(selected)
    explanation = explain_multi_floor_booking(
        floors_considered=[floor for floor, _ in available_floors],
        available_count=len(all_rooms),
        requested=count,
        seed=seed,
        seeded_at_entry=seeded_at_entry,
        selected=selected,
        total_travel_time=total_time,
    )

    return BookingResult(
        rooms=selected,
        total_travel_time=total_time,
        strategy=STRATEGY_MULTI_FLOOR,
        explanation_steps=explanation,
    )


def allocate(
    floor_mapping: Dict[int, List[Room]],
    count: int,
    rule_config: Optional[dict] = None,
) -> Optional[BookingResult]:
    """Pick rooms for a booking of `count` rooms, or None if it cannot be met.

    The lowest floor that can hold the whole booking wins, even if a higher
    floor would give a shorter travel time. Only when no floor can is the
    booking spread across floors.
    """
    cfg = rule_config or {}
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    if count > max_rooms:
        return None

    available_floors = sorted(
        (floor, rooms) for floor, rooms in floor_mapping.items() if rooms
    )
    if not available_floors:
        return None

    for floor, rooms in available_floors:
        if len(rooms) < count:
            continue
        sequence = find_contiguous_rooms(rooms, count)
        if len(sequence) != count:
            continue

        total_time = total_travel_time(sequence)
        logger.debug("Same-floor booking on floor %d: %s", floor, [r.room_id for r in sequence])
        explanation = explain_same_floor_booking(
            floor=floor,
            available_count=len(rooms),
            requested=count,
            windows_checked=len(rooms) - count + 1,
            selected=sequence,
            total_travel_time=total_time,
        )
        return BookingResult(
            rooms=sequence,
            total_travel_time=total_time,
            strategy=STRATEGY_SAME_FLOOR,
            explanation_steps=explanation,
        )

    result = find_multi_floor_booking(available_floors, count)
    if result is not None:
        logger.debug("Multi-floor booking: %s", result.room_ids)
    return result
