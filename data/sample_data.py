"""Generate sample room snapshots for the Hotel Room Reservation engine."""

import os
import random
import pandas as pd

from engine.grid import generate_rooms
from engine.occupancy import randomize_occupancy
from data.loader import rooms_to_df
from config.defaults import RANDOM_OCCUPANCY_PROBABILITY


def generate_rooms_df(seed: int = 42, probability: float = RANDOM_OCCUPANCY_PROBABILITY) -> pd.DataFrame:
    """Full 97-room grid with seeded random occupancy."""
    rooms = randomize_occupancy(generate_rooms(), probability, random.Random(seed))
    return rooms_to_df(rooms)


def generate_sample_csv(output_dir: str, seed: int = 42) -> str:
    """Write a sample snapshot CSV to the given directory and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "rooms.csv")
    generate_rooms_df(seed).to_csv(path, index=False)
    return path


def generate_sample_excel(output_dir: str, seed: int = 42) -> str:
    """Write a sample snapshot workbook to the given directory and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "rooms.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_rooms_df(seed).to_excel(writer, sheet_name="Rooms", index=False)
    return path


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
