from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import datetime as dt
import json

from cath_readings import scrape
from cath_readings.app import create_app, format_readings, main
from cath_readings.cache import ReadingsCache
from cath_readings.demo import DEMO_READINGS
from cath_readings.errors import HttpError, RaceTimeoutError
from cath_readings.service import DirectNetwork, ReadingsService, RestrictedNetwork

HTML = (Path(__file__).resolve().parents[1] / "fixtures" / "usccb" / "121525.html").read_text(
    encoding="utf-8"
)


def make_client(environment=None):
    service = ReadingsService(
        cache=ReadingsCache(),
        environment=environment or DirectNetwork(),
        clock=lambda: dt.date(2025, 12, 14),
    )
    return create_app(service=service).test_client()


def test_healthz_ok() -> None:
    resp = make_client().get("/healthz")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}


def test_demo_endpoint() -> None:
    resp = make_client().get("/demo")
    assert resp.status_code == 200
    assert resp.get_json() == DEMO_READINGS.to_dict()


def test_readings_by_key(monkeypatch) -> None:
    monkeypatch.setattr(scrape, "fetch_direct", lambda url: HTML)
    resp = make_client().get("/readings/121525")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["lectionary"] == "187"
    assert [r["name"] for r in data["readings"]][-1] == "Gospel"


def test_relative_day_routes(monkeypatch) -> None:
    urls = []

    def fake_fetch(url):
        urls.append(url)
        return HTML

    monkeypatch.setattr(scrape, "fetch_direct", fake_fetch)
    client = make_client()
    assert client.get("/readings/today").get_json()["date"] == "2025-12-14"
    assert client.get("/readings/tomorrow").get_json()["date"] == "2025-12-15"
    assert client.get("/readings/offset/-1").get_json()["date"] == "2025-12-13"


def test_bad_keys_are_client_errors() -> None:
    client = make_client()
    assert client.get("/readings/abc").status_code == 400
    assert client.get("/readings/023099").status_code == 400


def test_upstream_failures_map_to_gateway_errors(monkeypatch) -> None:
    def fake_fetch(url):
        raise HttpError(500, url)

    def fake_race(url, timeout):
        raise RaceTimeoutError("late")

    monkeypatch.setattr(scrape, "fetch_direct", fake_fetch)
    monkeypatch.setattr(scrape, "fetch_via_race", fake_race)
    assert make_client().get("/readings/121525").status_code == 502
    assert make_client(RestrictedNetwork()).get("/readings/121525").status_code == 504


def test_format_readings_truncates_text() -> None:
    text = format_readings(DEMO_READINGS)
    assert text.startswith("December 15, 2025 - Monday of the Third Week of Advent\n")
    assert "Lectionary: 187" in text
    assert "4. Gospel" in text
    assert "   Matthew 21:23-27" in text
    assert DEMO_READINGS.readings[0].text[:200] + "..." in text
    assert DEMO_READINGS.readings[2].text in text


def test_cli_demo_json(capsys) -> None:
    assert main(["--demo", "--json"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out)["title"] == "Monday of the Third Week of Advent"


def test_cli_iso_date(monkeypatch, capsys) -> None:
    monkeypatch.delenv("CATH_READINGS_CACHE_FILE", raising=False)
    monkeypatch.setattr(scrape, "fetch_direct", lambda url: HTML)
    assert main(["--date", "2025-12-15"]) == 0
    assert "1. Reading 1" in capsys.readouterr().out


def test_cli_reports_errors(monkeypatch, capsys) -> None:
    monkeypatch.delenv("CATH_READINGS_CACHE_FILE", raising=False)
    monkeypatch.setenv("CATH_READINGS_NETWORK", "direct")
    assert main(["--date", "023099"]) == 1
    assert "error:" in capsys.readouterr().err
