"""In-memory reservation session: current rooms, last booking, and activity log."""

import logging
import random
from datetime import datetime
from typing import Dict, List, Optional

from models.room import Room
from models.booking import BookingResult
from models.audit import ReservationEvent
from engine.grid import generate_rooms, available_by_floor
from engine.allocation_engine import allocate
from engine.occupancy import mark_occupied, randomize_occupancy, get_floor_occupancy
from data.validator import validate_room_count
from config.defaults import (
    BOOKING_ID_PREFIX, MAX_ROOMS_PER_BOOKING, RANDOM_OCCUPANCY_PROBABILITY,
)

logger = logging.getLogger(__name__)


class ReservationSession:
    """Holds one guest-desk session. Nothing here outlives the object."""

    def __init__(self, rooms: Optional[List[Room]] = None, rule_config: Optional[dict] = None):
        self.rule_config = rule_config or {}
        self._rooms: List[Room] = list(rooms) if rooms is not None else generate_rooms()
        self._last_booking: Optional[BookingResult] = None
        self._events: List[ReservationEvent] = []
        self._booking_counter = 0

    # --- Getters ---

    @property
    def rooms(self) -> List[Room]:
        return list(self._rooms)

    @property
    def last_booking(self) -> Optional[BookingResult]:
        return self._last_booking

    @property
    def events(self) -> List[ReservationEvent]:
        return list(self._events)

    def available_by_floor(self) -> Dict[int, List[Room]]:
        return available_by_floor(self._rooms)

    def floor_summary(self) -> List[dict]:
        return get_floor_occupancy(self._rooms)

    # --- Actions ---

    def book(self, count) -> Optional[BookingResult]:
        """Book `count` rooms and mark them occupied.

        Raises ValueError for a count that is not a whole number in range.
        Returns None when the current rooms cannot satisfy the request.
        """
        max_rooms = self.rule_config.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)
        validation = validate_room_count(count, max_rooms)
        if not validation.is_valid:
            logger.warning("Rejected booking request: %s", "; ".join(validation.errors))
            raise ValueError("; ".join(validation.errors))
        count = int(str(count).strip())

        result = allocate(self.available_by_floor(), count, self.rule_config)
        if result is None:
            logger.warning("Not enough available rooms for a booking of %d", count)
            self._add_event("rejected", detail=f"Not enough available rooms for {count}")
            return None

        self._booking_counter += 1
        result.booking_id = f"{BOOKING_ID_PREFIX}-{self._booking_counter:04d}"
        self._rooms = mark_occupied(self._rooms, result.room_ids)
        self._last_booking = result

        logger.info(
            "Booking %s confirmed: rooms %s, total travel time %d min",
            result.booking_id, ", ".join(result.room_ids), result.total_travel_time,
        )
        self._add_event(
            "book",
            room_ids=result.room_ids,
            booking_id=result.booking_id,
            detail=f"{result.strategy}, {result.total_travel_time} min",
        )
        return result

    def randomize(self, probability: Optional[float] = None, seed: Optional[int] = None) -> List[Room]:
        """Replace occupancy with a random draw and forget the last booking."""
        if probability is None:
            probability = self.rule_config.get("random_occupancy_probability", RANDOM_OCCUPANCY_PROBABILITY)
        self._rooms = randomize_occupancy(self._rooms, probability, random.Random(seed))
        self._last_booking = None

        occupied = sum(1 for r in self._rooms if r.is_occupied)
        logger.info("Random occupancy applied: %d of %d rooms occupied", occupied, len(self._rooms))
        self._add_event("randomize", detail=f"{occupied} occupied at p={probability}")
        return self.rooms

    def reset(self) -> List[Room]:
        """Return every room to available and forget the last booking."""
        self._rooms = generate_rooms()
        self._last_booking = None
        logger.info("Room grid reset")
        self._add_event("reset")
        return self.rooms

    # --- Log ---

    def _add_event(
        self,
        action: str,
        room_ids: Optional[List[str]] = None,
        booking_id: Optional[str] = None,
        detail: str = "",
    ):
        self._events.append(ReservationEvent(
            timestamp=datetime.now(),
            action=action,
            room_ids=list(room_ids or []),
            booking_id=booking_id,
            detail=detail,
        ))
