from __future__ import annotations

from fastapi.testclient import TestClient

import web_ui
from src.core.config import reset_settings
from src.groceries.tracker import FrequencyTracker
from web_ui import create_app


def _client() -> TestClient:
    tracker = FrequencyTracker()
    tracker.load_lines(["Milk", "milk", "Bread", ""])
    return TestClient(create_app(tracker))


def test_items_are_sorted():
    res = _client().get("/api/v1/items")
    assert res.status_code == 200
    body = res.json()
    assert body["items"] == [{"name": "bread", "count": 1}, {"name": "milk", "count": 2}]
    assert body["schema_version"]


def test_lookup_is_case_insensitive():
    client = _client()
    assert client.get("/api/v1/items/MILK").json() == {"query": "MILK", "name": "milk", "count": 2}
    assert client.get("/api/v1/items/eggs").json()["count"] == 0


def test_histogram_lines():
    res = _client().get("/api/v1/histogram")
    assert res.json()["lines"] == ["bread" + " " * 16 + "* (1)", "milk" + " " * 17 + "** (2)"]


def test_health_reports_item_count():
    body = _client().get("/api/v1/health").json()
    assert body["status"] == "online"
    assert body["items_loaded"] == 2


def test_non_utf8_names_are_served_as_valid_text(tmp_path):
    source = tmp_path / "latin1.txt"
    source.write_bytes(b"Caf\xe9\nMilk\n")
    tracker = FrequencyTracker(encoding="utf-8")
    tracker.load(source)
    client = TestClient(create_app(tracker))

    res = client.get("/api/v1/items")
    assert res.status_code == 200
    assert res.json()["items"] == [{"name": "caf\ufffd", "count": 1}, {"name": "milk", "count": 1}]

    res = client.get("/api/v1/histogram")
    assert res.status_code == 200
    assert res.json()["lines"][0] == "caf\ufffd" + " " * 17 + "* (1)"


def test_main_uses_configured_log_level(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    reset_settings()
    levels = []
    apps = []
    monkeypatch.setattr(web_ui.logging, "basicConfig", lambda **kw: levels.append(kw["level"]))
    monkeypatch.setattr(web_ui.uvicorn, "run", lambda app, **kw: apps.append(app))

    web_ui.main([str(tmp_path / "missing.txt")])

    assert levels == ["ERROR"]
    assert len(apps) == 1
