from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class ReservationEvent:
    timestamp: datetime
    action: str              # "book", "rejected", "randomize", "reset"
    room_ids: List[str] = field(default_factory=list)
    booking_id: Optional[str] = None
    detail: str = ""
