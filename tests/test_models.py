from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import dataclasses

import pytest

from cath_readings.demo import DEMO_READINGS
from cath_readings.models import RANKS, SEASONS, DailyReadings, Reading


def test_unknown_season_is_rejected() -> None:
    with pytest.raises(ValueError):
        DailyReadings(date="2025-12-15", display_date="December 15, 2025", season="Winter")


def test_unknown_rank_is_rejected() -> None:
    with pytest.raises(ValueError):
        DailyReadings(date="2025-12-15", display_date="December 15, 2025", rank="Optional Memorial")


def test_defaults_are_enumerated_values() -> None:
    readings = DailyReadings(date="2025-12-15", display_date="December 15, 2025")
    assert readings.season == "Unknown" and readings.season in SEASONS
    assert readings.rank == "Ferial" and readings.rank in RANKS
    assert readings.readings == ()


def test_readings_list_is_stored_as_tuple() -> None:
    items = [Reading(name="Gospel", text="Amen.")]
    readings = DailyReadings(date="2025-12-15", display_date="December 15, 2025", readings=items)
    items.append(Reading(name="Extra"))
    assert readings.readings == (Reading(name="Gospel", text="Amen."),)


def test_records_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEMO_READINGS.title = "changed"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEMO_READINGS.readings[0].text = "changed"  # type: ignore[misc]


def test_dict_round_trip() -> None:
    data = DEMO_READINGS.to_dict()
    assert data["readings"][3]["reference_url"] == "https://bible.usccb.org/bible/matthew/21?23"
    assert DailyReadings.from_dict(data) == DEMO_READINGS


def test_from_dict_rejects_malformed_payloads() -> None:
    with pytest.raises(KeyError):
        DailyReadings.from_dict({"date": "2025-12-15"})
    with pytest.raises(TypeError):
        DailyReadings.from_dict(["not", "a", "mapping"])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        DailyReadings.from_dict({"date": "x", "display_date": "y", "readings": "Gospel"})
    with pytest.raises(ValueError):
        DailyReadings.from_dict({"date": "x", "display_date": "y", "season": "Summer"})
