from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import pytest

from cath_readings.classify import (
    RANK_RULES,
    SEASON_RULES,
    contains,
    extract_rank,
    extract_season,
    first_match,
)


@pytest.mark.parametrize(
    "title, season",
    [
        ("Monday of the Third Week of Advent", "Advent"),
        ("The Nativity of the Lord (Christmas)", "Christmas"),
        ("Friday after Ash Wednesday in Lent", "Lent"),
        ("Tuesday of the Octave of Easter", "Easter"),
        ("Pentecost Sunday", "Pentecost"),
        ("Wednesday of the Twelfth Week in Ordinary Time", "Ordinary Time"),
        ("Memorial of Saint Lucy, Virgin and Martyr", "Ordinary Time"),
        ("", "Unknown"),
    ],
)
def test_extract_season(title: str, season: str) -> None:
    assert extract_season(title) == season


def test_season_match_is_case_sensitive() -> None:
    assert extract_season("third week of advent") == "Ordinary Time"


def test_season_first_keyword_wins() -> None:
    # Advent comes before Christmas in the table
    assert extract_season("Advent weekday before Christmas") == "Advent"


@pytest.mark.parametrize(
    "title, rank",
    [
        ("Monday of the Third Week of Advent", "Ferial"),
        ("Solemnity of Christmas", "Solemnity"),
        ("The Epiphany of the Lord", "Solemnity"),
        ("The Solemnity of the Immaculate Conception", "Solemnity"),
        ("All Saints", "Solemnity"),
        ("Feast of the Holy Family", "Feast"),
        ("Memorial of Saint Lucy, Virgin and Martyr", "Memorial"),
        ("Optional Memorial of St. Damasus I, Pope", "Memorial"),
        ("Saint John of the Cross, Priest", "Memorial"),
        ("Wednesday of the Twelfth Week in Ordinary Time", "Ferial"),
        ("", "Ferial"),
    ],
)
def test_extract_rank(title: str, rank: str) -> None:
    assert extract_rank(title) == rank


def test_rank_tiers_follow_priority() -> None:
    # "Saints" keyword ranks above "feast"; "feast" above the saint heuristic
    assert extract_rank("Feast of All Saints") == "Solemnity"
    assert extract_rank("Feast of Saint Stephen, the First Martyr") == "Feast"


def test_rule_tables_are_ordered_data() -> None:
    assert [result for _, result in SEASON_RULES] == [
        "Advent",
        "Christmas",
        "Lent",
        "Easter",
        "Pentecost",
        "Ordinary Time",
    ]
    assert [result for _, result in RANK_RULES] == ["Solemnity", "Feast", "Memorial", "Memorial"]


def test_first_match_uses_default() -> None:
    rules = [(contains("x"), "X"), (contains("y"), "Y")]
    assert first_match("yx", rules, "none") == "X"
    assert first_match("zz", rules, "none") == "none"
