"""Generates human-readable explanations for booking results."""

from typing import List
from models.room import Room


def _ids(rooms: List[Room]) -> str:
    return ", ".join(r.room_id for r in rooms)


def explain_same_floor_booking(
    floor: int,
    available_count: int,
    requested: int,
    windows_checked: int,
    selected: List[Room],
    total_travel_time: int,
) -> List[str]:
    """Produce step-by-step explanation for a single-floor booking."""
    steps = []

    steps.append(
        f"Step 1 - Same floor: Floor {floor} is the lowest floor with "
        f"{available_count} free rooms for a request of {requested}"
    )

    steps.append(
        f"Step 2 - Window search: compared {windows_checked} run(s) of {requested} "
        f"neighbouring free rooms"
    )

    steps.append(
        f"Step 3 - Selected: {_ids(selected)} => total travel time {total_travel_time} min"
    )

    return steps


def explain_multi_floor_booking(
    floors_considered: List[int],
    available_count: int,
    requested: int,
    seed: Room,
    seeded_at_entry: bool,
    selected: List[Room],
    total_travel_time: int,
) -> List[str]:
    """Produce step-by-step explanation for a booking spread over several floors."""
    steps = []

    steps.append(
        f"Step 1 - No single floor has {requested} free rooms; "
        f"pooling {available_count} free rooms on floors "
        f"{', '.join(str(f) for f in floors_considered)}"
    )

    if seeded_at_entry:
        steps.append(
            f"Step 2 - Start: room {seed.room_id} next to the lift on floor {seed.floor}"
        )
    else:
        steps.append(
            f"Step 2 - Start: no room free next to the lift on floor {floors_considered[0]}, "
            f"using first free room {seed.room_id}"
        )

    steps.append(
        f"Step 3 - Greedy fill: added {_ids(selected[1:]) or 'nothing'} "
        f"one at a time, each with the smallest added travel time"
    )

    steps.append(
        f"Step 4 - Selected: {_ids(selected)} => total travel time {total_travel_time} min"
    )

    return steps
