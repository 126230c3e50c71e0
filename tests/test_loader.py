"""Tests for room snapshot import/export and validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from engine.grid import generate_rooms
from engine.occupancy import mark_occupied
from data.loader import parse_rooms, rooms_to_df, load_file
from data.validator import validate_rooms, validate_room_count
from data.sample_data import generate_rooms_df, generate_sample_csv, generate_sample_excel


def make_df():
    return rooms_to_df(mark_occupied(generate_rooms(), ["205", "1007"]))


class TestParseRooms:
    def test_snapshot_round_trip(self):
        rooms = parse_rooms(make_df())
        assert len(rooms) == 97
        assert [r.room_id for r in rooms if r.is_occupied] == ["205", "1007"]

    def test_text_occupied_values(self):
        df = pd.DataFrame({
            "Room ID": ["102", "101"],
            "Floor": [1, 1],
            "Position": [2, 1],
            "Occupied": ["yes", "no"],
        })
        rooms = parse_rooms(df)
        assert [r.room_id for r in rooms] == ["101", "102"]
        assert [r.is_occupied for r in rooms] == [False, True]


class TestLoadFile:
    def test_csv(self, tmp_path):
        path = tmp_path / "rooms.csv"
        make_df().to_csv(path, index=False)
        df = load_file(str(path))
        assert len(df) == 97
        assert df["Room ID"].iloc[0] == "101"

    def test_xlsx(self, tmp_path):
        path = generate_sample_excel(str(tmp_path), seed=5)
        df = load_file(path)
        rooms = parse_rooms(df)
        assert len(rooms) == 97
        assert "1003" in df["Room ID"].tolist()
        assert df["Room ID"].iloc[0] == "101"
        assert validate_rooms(df).is_valid

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            load_file("rooms.json")

    def test_legacy_xls_rejected(self):
        with pytest.raises(ValueError):
            load_file("rooms.xls")


class TestValidateRooms:
    def test_valid_snapshot(self):
        result = validate_rooms(make_df())
        assert result.is_valid
        assert result.warnings == []

    def test_missing_columns(self):
        result = validate_rooms(make_df().drop(columns=["Occupied"]))
        assert not result.is_valid
        assert "Occupied" in result.errors[0]

    def test_floor_out_of_range(self):
        df = make_df()
        df.loc[0, "Floor"] = 11
        assert not validate_rooms(df).is_valid

    def test_position_out_of_range_on_top_floor(self):
        df = make_df()
        df = pd.concat([df, pd.DataFrame([{"Room ID": "1008", "Floor": 10, "Position": 8, "Occupied": False}])],
                       ignore_index=True)
        result = validate_rooms(df)
        assert not result.is_valid
        assert any("1008" in e for e in result.errors)

    def test_duplicate_rooms(self):
        df = pd.concat([make_df(), make_df().head(1)], ignore_index=True)
        result = validate_rooms(df)
        assert not result.is_valid

    def test_blank_floor_cell(self, tmp_path):
        df = make_df()
        df["Floor"] = df["Floor"].astype(float)
        df.loc[3, "Floor"] = float("nan")
        path = tmp_path / "rooms.csv"
        df.to_csv(path, index=False)
        result = validate_rooms(load_file(str(path)))
        assert not result.is_valid
        assert "104" in result.errors[0]

    def test_blank_position_cell(self):
        df = make_df()
        df["Position"] = df["Position"].astype(float)
        df.loc[0, "Position"] = float("nan")
        result = validate_rooms(df)
        assert not result.is_valid

    def test_non_numeric_floor(self):
        df = make_df()
        df["Floor"] = df["Floor"].astype(object)
        df.loc[0, "Floor"] = "abc"
        result = validate_rooms(df)
        assert not result.is_valid
        assert "101" in result.errors[0]

    def test_mismatched_id(self):
        df = make_df()
        df.loc[0, "Room ID"] = "11"
        result = validate_rooms(df)
        assert not result.is_valid

    def test_partial_grid_warns(self):
        result = validate_rooms(make_df().head(20))
        assert result.is_valid
        assert len(result.warnings) == 1


class TestValidateRoomCount:
    def test_valid(self):
        assert validate_room_count(1).is_valid
        assert validate_room_count("5").is_valid

    def test_invalid(self):
        assert not validate_room_count(0).is_valid
        assert not validate_room_count(6).is_valid
        assert not validate_room_count("two").is_valid
        assert not validate_room_count(True).is_valid

    def test_custom_cap(self):
        assert not validate_room_count(4, max_rooms=3).is_valid


class TestSampleData:
    def test_seeded_sample(self):
        a = generate_rooms_df(seed=1)
        b = generate_rooms_df(seed=1)
        assert len(a) == 97
        assert a["Occupied"].tolist() == b["Occupied"].tolist()
        assert validate_rooms(a).is_valid

    def test_sample_csv(self, tmp_path):
        path = generate_sample_csv(str(tmp_path))
        assert os.path.exists(path)
        assert len(parse_rooms(load_file(path))) == 97


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
