"""Season and rank classification of liturgical titles.

Both classifications are keyword heuristics over the free-text title, not
authoritative calendar data.  A feast that is also the memorial of a saint is
ranked by keyword priority alone.  The policy lives in two ordered rule
tables so it can be read, tested and extended on its own.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

from .models import (
    ADVENT,
    CHRISTMAS,
    EASTER,
    FEAST,
    FERIAL,
    LENT,
    MEMORIAL,
    ORDINARY_TIME,
    PENTECOST,
    SOLEMNITY,
    UNKNOWN,
)

Rule = Tuple[Callable[[str], bool], str]


def contains(*needles: str) -> Callable[[str], bool]:
    """Case-sensitive predicate: any of ``needles`` occurs in the text."""

    return lambda text: any(n in text for n in needles)


def contains_ci(*needles: str) -> Callable[[str], bool]:
    """Case-insensitive variant of :func:`contains`."""

    lowered = tuple(n.lower() for n in needles)
    return lambda text: any(n in text.lower() for n in lowered)


SEASON_RULES: Sequence[Rule] = (
    (contains("Advent"), ADVENT),
    (contains("Christmas"), CHRISTMAS),
    (contains("Lent"), LENT),
    (contains("Easter"), EASTER),
    (contains("Pentecost"), PENTECOST),
    (contains("Ordinary Time"), ORDINARY_TIME),
)

RANK_RULES: Sequence[Rule] = (
    (
        contains_ci(
            "solemnity",
            "christmas",
            "epiphany",
            "easter",
            "pentecost",
            "ascension",
            "assumption",
            "all saints",
            "immaculate conception",
        ),
        SOLEMNITY,
    ),
    (contains_ci("feast"), FEAST),
    (contains_ci("memorial"), MEMORIAL),
    # Saints named without an explicit rank are usually memorials
    (contains_ci("st. ", "saint "), MEMORIAL),
)


def first_match(text: str, rules: Sequence[Rule], default: str) -> str:
    """Return the result of the first rule whose predicate accepts ``text``."""

    for predicate, result in rules:
        if predicate(text):
            return result
    return default


def extract_season(title: str) -> str:
    if not title:
        return UNKNOWN
    return first_match(title, SEASON_RULES, ORDINARY_TIME)


def extract_rank(title: str) -> str:
    if not title:
        return FERIAL
    return first_match(title, RANK_RULES, FERIAL)


__all__ = [
    "Rule",
    "SEASON_RULES",
    "RANK_RULES",
    "contains",
    "contains_ci",
    "first_match",
    "extract_season",
    "extract_rank",
]
