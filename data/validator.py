"""Validation for booking requests and imported room snapshots."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from engine.grid import rooms_on_floor
from config.defaults import (
    FLOOR_COUNT, ROOM_COLUMNS,
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_room_count(value, max_rooms: int = MAX_ROOMS_PER_BOOKING) -> ValidationResult:
    """Check a requested room count is a whole number within the booking bounds."""
    result = ValidationResult()
    if isinstance(value, bool):
        count = None
    elif isinstance(value, int):
        count = value
    else:
        try:
            count = int(str(value).strip())
        except ValueError:
            count = None

    if count is None:
        result.is_valid = False
        result.errors.append(f"Room count must be a whole number, got {value!r}.")
    elif count < MIN_ROOMS_PER_BOOKING or count > max_rooms:
        result.is_valid = False
        result.errors.append(
            f"Room count must be between {MIN_ROOMS_PER_BOOKING} and {max_rooms}, got {count}."
        )
    return result


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_rooms(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ROOM_COLUMNS, "Room Snapshot")
    if not result.is_valid:
        return result

    floors = pd.to_numeric(df["Floor"], errors="coerce")
    positions = pd.to_numeric(df["Position"], errors="coerce")
    not_whole = floors.isna() | positions.isna() | (floors % 1 != 0) | (positions % 1 != 0)
    if not_whole.any():
        result.is_valid = False
        bad = df[not_whole]["Room ID"].astype(str).tolist()
        result.errors.append(f"Room Snapshot: Floor and Position must be whole numbers for rooms: {bad}")
        return result

    floors = floors.astype(int)
    positions = positions.astype(int)
    if (floors < 1).any() or (floors > FLOOR_COUNT).any():
        result.is_valid = False
        result.errors.append(f"Room Snapshot: Floor must be between 1 and {FLOOR_COUNT}.")
        return result

    max_positions = floors.map(rooms_on_floor)
    out_of_range = (positions < 1) | (positions > max_positions)
    if out_of_range.any():
        result.is_valid = False
        bad = df[out_of_range]["Room ID"].astype(str).tolist()
        result.errors.append(f"Room Snapshot: Position out of range for rooms: {bad}")

    dupes = pd.DataFrame({"Floor": floors, "Position": positions}).duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        dupe_rows = df[dupes][["Floor", "Position"]].drop_duplicates().to_dict("records")
        result.errors.append(f"Room Snapshot: Duplicate room entries: {dupe_rows}")

    expected_ids = floors.astype(str) + positions.map("{:02d}".format)
    mismatched = df["Room ID"].astype(str).str.strip() != expected_ids
    if mismatched.any():
        result.is_valid = False
        result.errors.append(
            f"Room Snapshot: Room ID does not match floor/position for: "
            f"{df[mismatched]['Room ID'].astype(str).tolist()}"
        )

    expected_total = sum(rooms_on_floor(f) for f in range(1, FLOOR_COUNT + 1))
    if result.is_valid and len(df) != expected_total:
        result.warnings.append(
            f"Room Snapshot: {len(df)} rooms found, full grid has {expected_total}. "
            "Missing rooms will be treated as unavailable."
        )

    return result
