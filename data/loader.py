"""Room snapshot import/export: CSV/XLSX to and from typed room lists."""

import pandas as pd
from typing import List
from models.room import Room
from config.defaults import ROOM_COLUMNS

_TRUE_VALUES = {"true", "yes", "y", "1", "occupied"}


def _parse_occupied(value) -> bool:
    if pd.isna(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def parse_rooms(df: pd.DataFrame) -> List[Room]:
    """Convert a rooms DataFrame into Room objects, ordered by floor then position.

    Ids are rebuilt from Floor and Position; the "Room ID" column is not read,
    so run `validate_rooms` first to catch ids that disagree. Blank "Occupied"
    cells are read as available.
    """
    rooms = []
    for _, row in df.iterrows():
        rooms.append(Room(
            floor=int(row["Floor"]),
            position=int(row["Position"]),
            is_occupied=_parse_occupied(row["Occupied"]),
        ))
    rooms.sort(key=lambda r: (r.floor, r.position))
    return rooms


def rooms_to_df(rooms: List[Room]) -> pd.DataFrame:
    """Flatten rooms into a DataFrame with the snapshot columns."""
    rows = [{
        "Room ID": r.room_id,
        "Floor": r.floor,
        "Position": r.position,
        "Occupied": r.is_occupied,
    } for r in rooms]
    return pd.DataFrame(rows, columns=ROOM_COLUMNS)


def load_file(uploaded_file) -> pd.DataFrame:
    """Load a CSV or XLSX file into a DataFrame.

    Accepts a path or a file-like object with a `name` attribute.
    """
    name = str(getattr(uploaded_file, "name", uploaded_file)).lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype={"Room ID": str})
    elif name.endswith(".xlsx"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype={"Room ID": str})
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX (legacy .xls is not read).")
