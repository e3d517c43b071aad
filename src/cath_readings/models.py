"""Value objects describing one day's readings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

ADVENT = "Advent"
CHRISTMAS = "Christmas"
LENT = "Lent"
EASTER = "Easter"
PENTECOST = "Pentecost"
ORDINARY_TIME = "Ordinary Time"
UNKNOWN = "Unknown"

SEASONS = (ADVENT, CHRISTMAS, LENT, EASTER, PENTECOST, ORDINARY_TIME, UNKNOWN)

SOLEMNITY = "Solemnity"
FEAST = "Feast"
MEMORIAL = "Memorial"
FERIAL = "Ferial"

RANKS = (SOLEMNITY, FEAST, MEMORIAL, FERIAL)


@dataclass(frozen=True)
class Reading:
    """One scriptural excerpt: its label, citation and text."""

    name: str
    reference: str = ""
    reference_url: str = ""
    text: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "reference": self.reference,
            "reference_url": self.reference_url,
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Reading":
        return cls(
            name=str(data["name"]),
            reference=str(data.get("reference", "")),
            reference_url=str(data.get("reference_url", "")),
            text=str(data.get("text", "")),
        )


@dataclass(frozen=True)
class DailyReadings:
    """Everything parsed from one readings page.

    ``season`` and ``rank`` are always one of :data:`SEASONS` and
    :data:`RANKS`; ``readings`` keeps document order and may be empty.
    """

    date: str
    display_date: str
    title: str = ""
    season: str = UNKNOWN
    rank: str = FERIAL
    lectionary: str = ""
    readings: Tuple[Reading, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.season not in SEASONS:
            raise ValueError(f"unknown season: {self.season!r}")
        if self.rank not in RANKS:
            raise ValueError(f"unknown rank: {self.rank!r}")
        if not isinstance(self.readings, tuple):
            object.__setattr__(self, "readings", tuple(self.readings))

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "display_date": self.display_date,
            "title": self.title,
            "season": self.season,
            "rank": self.rank,
            "lectionary": self.lectionary,
            "readings": [r.to_dict() for r in self.readings],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyReadings":
        """Rebuild a record from :meth:`to_dict` output.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` on a malformed
        payload.
        """

        if not isinstance(data, dict):
            raise TypeError("expected a mapping")
        readings = data.get("readings") or []
        if not isinstance(readings, list):
            raise TypeError("readings must be a list")
        return cls(
            date=str(data["date"]),
            display_date=str(data["display_date"]),
            title=str(data.get("title", "")),
            season=str(data.get("season", UNKNOWN)),
            rank=str(data.get("rank", FERIAL)),
            lectionary=str(data.get("lectionary", "")),
            readings=tuple(Reading.from_dict(r) for r in readings),
        )


__all__ = [
    "Reading",
    "DailyReadings",
    "SEASONS",
    "RANKS",
    "ADVENT",
    "CHRISTMAS",
    "LENT",
    "EASTER",
    "PENTECOST",
    "ORDINARY_TIME",
    "UNKNOWN",
    "SOLEMNITY",
    "FEAST",
    "MEMORIAL",
    "FERIAL",
]
