"""Web and command line entry points for :mod:`cath_readings`."""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import sys
from typing import Any, Iterable

from flask import Flask, jsonify  # type: ignore[import-not-found]

from .errors import (
    CathReadingsError,
    DateError,
    ReadingsUnavailableError,
)
from .models import DailyReadings
from .service import ReadingsService


def create_app(*, service: ReadingsService | None = None) -> Flask:
    """Return a :class:`~flask.Flask` application serving readings as JSON."""

    app = Flask(__name__)
    app.config["READINGS_SERVICE"] = service or ReadingsService()

    def _service() -> ReadingsService:
        return app.config["READINGS_SERVICE"]

    def _respond(lookup: Any) -> tuple[Any, int]:
        try:
            readings = lookup()
        except DateError as exc:
            return jsonify({"ok": False, "error": str(exc)}), 400
        except ReadingsUnavailableError as exc:
            app.logger.warning("readings unavailable: %s", exc)
            return jsonify({"ok": False, "error": str(exc)}), 504 if exc.timed_out else 502
        except CathReadingsError as exc:
            app.logger.warning("readings lookup failed: %s", exc)
            return jsonify({"ok": False, "error": str(exc)}), 502
        return jsonify(readings.to_dict()), 200

    @app.get("/healthz")
    def healthz():
        return jsonify({"ok": True}), 200

    @app.get("/demo")
    def demo():
        return jsonify(_service().get_demo_data().to_dict()), 200

    @app.get("/readings/today")
    def today():
        return _respond(_service().get_today)

    @app.get("/readings/tomorrow")
    def tomorrow():
        return _respond(_service().get_tomorrow)

    @app.get("/readings/offset/<int(signed=True):days>")
    def offset(days: int):
        return _respond(lambda: _service().get_readings_by_days_offset(days))

    @app.get("/readings/<key>")
    def by_key(key: str):
        return _respond(lambda: _service().get_readings(key))

    return app


def format_readings(readings: DailyReadings, *, preview: int = 200) -> str:
    """Render ``readings`` as plain text with shortened reading bodies."""

    lines = [f"{readings.display_date} - {readings.title}"]
    lines.append(f"Lectionary: {readings.lectionary}")
    lines.append(f"Season: {readings.season} | Rank: {readings.rank}")
    lines.append("")
    for index, reading in enumerate(readings.readings, start=1):
        lines.append(f"{index}. {reading.name}")
        if reading.reference:
            lines.append(f"   {reading.reference}")
        lines.append("")
        text = reading.text
        lines.append(text if len(text) <= preview else text[:preview] + "...")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def _parse_date_arg(value: str) -> _dt.date | str:
    # ISO dates are accepted for convenience; anything else is passed on as a key.
    if "-" in value:
        try:
            return _dt.date.fromisoformat(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid ISO date: {value}") from exc
    return value


def main(argv: Iterable[str] | None = None) -> int:
    """Command line interface: print readings or run the web server."""

    parser = argparse.ArgumentParser(
        prog="cath-readings", description="Catholic daily readings from the USCCB"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--date", type=_parse_date_arg, help="MMDDYY key or ISO date")
    group.add_argument("--offset", type=int, help="days from today (negative for past)")
    group.add_argument("--demo", action="store_true", help="print the bundled demo data")
    parser.add_argument("--json", action="store_true", help="print JSON instead of text")
    parser.add_argument("--serve", action="store_true", help="run the web server")
    parser.add_argument("--port", type=int, default=5057)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        app = create_app()
        app.run(host="127.0.0.1", port=args.port)
        return 0

    service = ReadingsService()
    try:
        if args.demo:
            readings = service.get_demo_data()
        elif args.date is not None:
            readings = service.get_readings(args.date)
        elif args.offset is not None:
            readings = service.get_readings_by_days_offset(args.offset)
        else:
            readings = service.get_today()
    except CathReadingsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(readings.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_readings(readings), end="")
    return 0


__all__ = ["create_app", "format_readings", "main"]


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
