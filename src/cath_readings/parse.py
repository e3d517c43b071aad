"""Parsing of USCCB daily readings pages.

The page layout this module relies on::

    .wr-block.b-lectionary h2          liturgical title
    .wr-block.b-lectionary p           "Lectionary: 187"
    .wr-block.b-verse                  one per reading
        .content-header .name          "Reading 1", "Gospel", ...
        .content-header .address a     citation and link
        .content-body                  paragraphs of text

When the upstream markup changes, fields quietly fall back to their empty or
default values instead of raising.  Only input that is not markup at all
raises :class:`~cath_readings.errors.ParseError`.
"""

from __future__ import annotations

import datetime as _dt
import logging
import re
from typing import List, Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, NavigableString, Tag  # type: ignore[import-untyped]

from .classify import extract_rank, extract_season
from .dates import display_date
from .errors import ParseError
from .models import DailyReadings, Reading

logger = logging.getLogger(__name__)

USCCB_ORIGIN = "https://bible.usccb.org/"

_WS_RE = re.compile(r"\s+")
_LECTIONARY_RE = re.compile(r"Lectionary:\s*(\d+)")
_SKIPPED_TAGS = frozenset({"script", "style", "template", "noscript"})
_BR = "\x00"
_SPACES_RE = re.compile(r"[^\S\n]+")
_BR_RE = re.compile(r"[^\S\n]*\n?[^\S\n]*\x00[^\S\n]*\n?")


def _squash(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def make_soup(html: Union[str, bytes]) -> BeautifulSoup:
    """Return a soup for ``html`` or raise :class:`ParseError`."""

    if not isinstance(html, (str, bytes)):
        raise ParseError(f"expected markup text, got {type(html).__name__}")
    soup = BeautifulSoup(html, "html.parser")
    if soup.find() is None:
        raise ParseError("input contains no markup elements")
    return soup


def extract_title(soup: BeautifulSoup) -> str:
    """Return the liturgical title, e.g. ``Monday of the Third Week of Advent``."""

    node = soup.select_one(".wr-block.b-lectionary h2")
    return node.get_text().strip() if node is not None else ""


def extract_lectionary(soup: BeautifulSoup) -> str:
    """Return the lectionary number as a string, or ``""``."""

    node = soup.select_one(".wr-block.b-lectionary p")
    if node is None:
        return ""
    match = _LECTIONARY_RE.search(node.get_text())
    return match.group(1) if match else ""


def _is_skipped(node: NavigableString) -> bool:
    return any(parent.name in _SKIPPED_TAGS for parent in node.parents)


def _flatten(node: Tag) -> str:
    # Source newlines are kept; <br> becomes _BR until it is merged with them.
    parts: List[str] = []
    for child in node.descendants:
        if isinstance(child, Tag):
            if child.name == "br":
                parts.append(_BR)
            continue
        # Comments, CDATA and script/style strings are NavigableString subclasses
        if type(child) is not NavigableString or _is_skipped(child):
            continue
        text = str(child).replace(_BR, "").replace("\r\n", "\n").replace("\r", "\n")
        parts.append(_SPACES_RE.sub(" ", text))
    # A <br> followed (or preceded) by a newline in the source is one line break
    return _BR_RE.sub("\n", "".join(parts))


def _split_paragraphs(text: str) -> List[str]:
    paragraphs: List[str] = []
    current: List[str] = []
    for line in text.split("\n"):
        line = line.strip()
        if line:
            current.append(line)
        elif current:
            paragraphs.append("\n".join(current))
            current = []
    if current:
        paragraphs.append("\n".join(current))
    return paragraphs


def normalize_body_text(node: Optional[Tag]) -> str:
    """Return the readable text of a reading body.

    Paragraph units are the ``<p>`` elements (or the whole node when it has
    none); a blank line inside a unit also starts a new paragraph.  Line
    breaks come from ``<br>`` and from newlines in the source text.  Lines
    are trimmed, runs of spaces collapse to one, empty paragraphs are
    dropped, and paragraphs are joined by a blank line.  Wrapping the result
    in a single ``<p>`` and normalizing again gives the same text.
    """

    if node is None:
        return ""
    units = [p for p in node.find_all("p") if p.find_parent("p") is None]
    if not units:
        units = [node]
    paragraphs: List[str] = []
    for unit in units:
        paragraphs.extend(_split_paragraphs(_flatten(unit)))
    return "\n\n".join(paragraphs)


def parse_reading_block(block: Tag, base_url: str = USCCB_ORIGIN) -> Optional[Reading]:
    """Parse one ``.b-verse`` block; ``None`` when it has neither name nor text."""

    name_node = block.select_one(".content-header .name")
    address_node = block.select_one(".content-header .address")
    body_node = block.select_one(".content-body")

    name = _squash(name_node.get_text()) if name_node is not None else ""
    text = normalize_body_text(body_node)
    if not name and not text:
        return None

    reference = ""
    reference_url = ""
    link = address_node.find("a") if address_node is not None else None
    if isinstance(link, Tag):
        reference = _squash(link.get_text())
        href = link.get("href")
        if isinstance(href, str) and href.strip():
            reference_url = urljoin(base_url, href.strip())

    return Reading(name=name, reference=reference, reference_url=reference_url, text=text)


def extract_reading_blocks(soup: BeautifulSoup, base_url: str = USCCB_ORIGIN) -> List[Reading]:
    """Return every parseable reading in document order."""

    readings: List[Reading] = []
    for block in soup.select(".wr-block.b-verse"):
        reading = parse_reading_block(block, base_url)
        if reading is None:
            logger.debug("skipping reading block without name or text")
            continue
        readings.append(reading)
    return readings


def parse_readings(
    html: Union[str, bytes],
    day: _dt.date,
    *,
    base_url: str = USCCB_ORIGIN,
) -> DailyReadings:
    """Parse a readings page for ``day`` into a :class:`DailyReadings`."""

    soup = make_soup(html)
    title = extract_title(soup)
    readings = extract_reading_blocks(soup, base_url)
    if not title:
        logger.debug("no liturgical title found for %s", day.isoformat())
    return DailyReadings(
        date=day.isoformat(),
        display_date=display_date(day),
        title=title,
        season=extract_season(title),
        rank=extract_rank(title),
        lectionary=extract_lectionary(soup),
        readings=tuple(readings),
    )


__all__ = [
    "USCCB_ORIGIN",
    "make_soup",
    "extract_title",
    "extract_season",
    "extract_rank",
    "extract_lectionary",
    "extract_reading_blocks",
    "parse_reading_block",
    "normalize_body_text",
    "parse_readings",
]
