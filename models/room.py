from dataclasses import dataclass


@dataclass
class Room:
    floor: int
    position: int           # 1-indexed, position 1 is next to the lift/stairs
    is_occupied: bool = False

    @property
    def room_id(self) -> str:
        return f"{self.floor}{self.position:02d}"
