"""Readings lookup: date normalization, caching, retrieval and parsing."""

from __future__ import annotations

import datetime as _dt
import logging
import os
from typing import Callable, Optional, Protocol

from . import dates, scrape
from .cache import ReadingsCache, TieredCache
from .demo import get_demo_data
from .errors import (
    AllRoutesFailedError,
    FetchError,
    RaceTimeoutError,
    ReadingsUnavailableError,
)
from .models import DailyReadings
from .parse import parse_readings

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://bible.usccb.org/bible/readings"


class NetworkEnvironment(Protocol):
    """Tells the service whether plain requests are expected to work."""

    def direct_requests_expected_to_succeed(self) -> bool:
        """Return ``False`` where direct requests are normally blocked."""


class DirectNetwork:
    """Ordinary server-side networking; a failed direct fetch is final."""

    def direct_requests_expected_to_succeed(self) -> bool:
        return True


class RestrictedNetwork:
    """Hosts that block direct cross-origin requests; fall back to racing."""

    def direct_requests_expected_to_succeed(self) -> bool:
        return False


def environment_from_name(name: str) -> NetworkEnvironment:
    """Map ``direct`` or ``restricted`` to a :class:`NetworkEnvironment`."""

    key = name.strip().lower()
    if key == "direct":
        return DirectNetwork()
    if key == "restricted":
        return RestrictedNetwork()
    raise ValueError(f"unknown network environment: {name!r}")


def _base_url() -> str:
    return os.getenv("USCCB_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def _race_timeout() -> float:
    """Return the race deadline in seconds (default 6, override via CATH_READINGS_TIMEOUT)."""
    return float(os.getenv("CATH_READINGS_TIMEOUT", str(scrape.DEFAULT_RACE_TIMEOUT)))


def _environment() -> NetworkEnvironment:
    return environment_from_name(os.getenv("CATH_READINGS_NETWORK", "direct"))


def _cache() -> ReadingsCache:
    return ReadingsCache(os.getenv("CATH_READINGS_CACHE_FILE") or None)


class ReadingsService:
    """Entry point for callers wanting a day's :class:`DailyReadings`.

    Settings not passed explicitly come from the environment:
    ``USCCB_BASE_URL``, ``CATH_READINGS_TIMEOUT`` (seconds),
    ``CATH_READINGS_NETWORK`` (``direct`` or ``restricted``) and
    ``CATH_READINGS_CACHE_FILE``.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        cache: Optional[TieredCache] = None,
        environment: Optional[NetworkEnvironment] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], _dt.date] = dates.today,
    ) -> None:
        self.base_url = (base_url or _base_url()).rstrip("/")
        self.cache = cache if cache is not None else _cache()
        self.environment = environment if environment is not None else _environment()
        self.timeout = timeout if timeout is not None else _race_timeout()
        self.clock = clock

    def url_for(self, key: str) -> str:
        return f"{self.base_url}/{key}.cfm"

    def _retrieve(self, url: str) -> str:
        try:
            return scrape.fetch_direct(url)
        except FetchError as exc:
            if self.environment.direct_requests_expected_to_succeed():
                raise
            logger.warning("direct fetch of %s failed (%s); racing proxies", url, exc)

        try:
            return scrape.fetch_via_race(url, self.timeout)
        except RaceTimeoutError as exc:
            raise ReadingsUnavailableError(
                "Network request timed out (proxies may be slow or unavailable)",
                timed_out=True,
            ) from exc
        except AllRoutesFailedError as exc:
            raise ReadingsUnavailableError(
                "Unable to fetch readings (proxy or network error)",
                errors=exc.errors,
            ) from exc

    def get_readings(self, date_or_key: dates.DateOrKey) -> DailyReadings:
        """Return the readings for a date or an ``MMDDYY`` key.

        Malformed keys raise the :mod:`~cath_readings.dates` errors.  In a
        direct environment fetch errors propagate as raised; in a restricted
        one a failed race becomes :class:`ReadingsUnavailableError`.
        """

        key = dates.to_key(date_or_key)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        html = self._retrieve(self.url_for(key))
        readings = parse_readings(html, dates.decode(key))
        self.cache.put(key, readings)
        return readings

    def get_today(self) -> DailyReadings:
        return self.get_readings(self.clock())

    def get_tomorrow(self) -> DailyReadings:
        return self.get_readings_by_days_offset(1)

    def get_readings_by_days_offset(self, days: int) -> DailyReadings:
        return self.get_readings(self.clock() + _dt.timedelta(days=days))

    def get_season(self, date_or_key: dates.DateOrKey) -> str:
        return self.get_readings(date_or_key).season

    def get_rank(self, date_or_key: dates.DateOrKey) -> str:
        return self.get_readings(date_or_key).rank

    @staticmethod
    def get_demo_data() -> DailyReadings:
        return get_demo_data()


__all__ = [
    "DEFAULT_BASE_URL",
    "NetworkEnvironment",
    "DirectNetwork",
    "RestrictedNetwork",
    "environment_from_name",
    "ReadingsService",
]
