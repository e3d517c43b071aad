"""Exception hierarchy for :mod:`cath_readings`."""

from __future__ import annotations

from typing import Sequence


class CathReadingsError(Exception):
    """Base class for every error raised by this package."""


class DateError(CathReadingsError, ValueError):
    """A date key could not be turned into a calendar date."""


class FormatError(DateError):
    """The date key is not exactly six digits (``MMDDYY``)."""


class InvalidDateError(DateError):
    """The date key is well formed but names a day that does not exist."""


class FetchError(CathReadingsError):
    """Retrieving the readings page failed."""


class HttpError(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(self, status: int, url: str = "") -> None:
        super().__init__(f"HTTP {status}" + (f" for {url}" if url else ""))
        self.status = status
        self.url = url


class NetworkError(FetchError):
    """The request failed at the transport level."""


class AllRoutesFailedError(FetchError):
    """Every alternate route failed before any of them succeeded."""

    def __init__(self, errors: Sequence[BaseException] = ()) -> None:
        super().__init__(f"all {len(errors)} routes failed or were blocked")
        self.errors = list(errors)


class RaceTimeoutError(FetchError, TimeoutError):
    """The shared deadline elapsed before any route succeeded."""


class ReadingsUnavailableError(FetchError):
    """Direct fetch and route racing both failed.

    ``timed_out`` tells a deadline expiry apart from every route failing;
    ``errors`` carries the underlying per-route errors, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        timed_out: bool = False,
        errors: Sequence[BaseException] = (),
    ) -> None:
        super().__init__(message)
        self.timed_out = timed_out
        self.errors = list(errors)


class ParseError(CathReadingsError, ValueError):
    """The input could not be read as markup at all."""


__all__ = [
    "CathReadingsError",
    "DateError",
    "FormatError",
    "InvalidDateError",
    "FetchError",
    "HttpError",
    "NetworkError",
    "AllRoutesFailedError",
    "RaceTimeoutError",
    "ReadingsUnavailableError",
    "ParseError",
]
