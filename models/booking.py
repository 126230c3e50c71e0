from dataclasses import dataclass, field
from typing import List, Optional

from models.room import Room


@dataclass
class BookingResult:
    rooms: List[Room]               # Selection order, not necessarily by position
    total_travel_time: int          # Hub cost of `rooms` in minutes
    strategy: str = ""              # "same_floor" or "multi_floor"
    booking_id: Optional[str] = None  # Assigned once the booking is confirmed
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def room_ids(self) -> List[str]:
        return [r.room_id for r in self.rooms]
