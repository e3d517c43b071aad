"""Daily Catholic readings from the USCCB, parsed into structured records."""

from .dates import decode, encode
from .demo import get_demo_data
from .errors import (
    AllRoutesFailedError,
    CathReadingsError,
    FormatError,
    HttpError,
    InvalidDateError,
    NetworkError,
    ParseError,
    RaceTimeoutError,
    ReadingsUnavailableError,
)
from .models import DailyReadings, Reading
from .parse import parse_readings
from .service import DirectNetwork, ReadingsService, RestrictedNetwork

__version__ = "1.0.0"

__all__ = [
    "AllRoutesFailedError",
    "CathReadingsError",
    "DailyReadings",
    "DirectNetwork",
    "FormatError",
    "HttpError",
    "InvalidDateError",
    "NetworkError",
    "ParseError",
    "RaceTimeoutError",
    "Reading",
    "ReadingsService",
    "ReadingsUnavailableError",
    "RestrictedNetwork",
    "decode",
    "encode",
    "get_demo_data",
    "parse_readings",
]
