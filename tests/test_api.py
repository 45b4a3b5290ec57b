"""API endpoint tests: plan, lookup, stream, refresh and error mapping."""

import pytest

from Gloss.playback import Timing
from server import config
from server.settings import get_settings
from tests.utils.sse import event_types, parse_events

FAST = Timing(base_duration_ms=30, phrase_factor=2.0, word_pause_ms=10, phrase_pause_ms=20, tick_interval_ms=5)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
    assert body["dictionary_error"] is None


def test_plan_greeting_question(client):
    resp = client.post("/api/signs/plan", json={"text": "Hello, how are you?", "speed": 1.0})
    assert resp.status_code == 200
    data = resp.json()
    assert data["normalized"] == "hello how are you"
    assert data["units"] == ["hello", "how are you"]
    phrase = data["items"][1]
    assert phrase["is_phrase"] is True
    assert phrase["kind"] == "how-are-you"
    assert phrase["duration_ms"] == pytest.approx(1950)
    assert data["total_ms"] == pytest.approx(1500 + 500 + 1950 + 600)


def test_plan_speed_is_clamped(client):
    resp = client.post("/api/signs/plan", json={"text": "run fast", "speed": 10})
    assert resp.status_code == 200
    data = resp.json()
    assert data["speed"] == config.SPEED_MAX
    assert data["total_ms"] == pytest.approx(4000 / config.SPEED_MAX)


def test_plan_empty_text(client):
    resp = client.post("/api/signs/plan", json={"text": "  ?! "})
    assert resp.status_code == 200
    assert resp.json()["units"] == []
    assert resp.json()["total_ms"] == 0


@pytest.mark.parametrize("speed", [0, -1])
def test_plan_rejects_non_positive_speed(client, speed):
    resp = client.post("/api/signs/plan", json={"text": "hello", "speed": speed})
    assert resp.status_code == 422
    body = resp.json()
    assert body["status"] == "error"
    assert body["details"]["error_code"] == "CONFIGURATION_ERROR"
    assert body["details"]["field"] == "speed"


def test_plan_unit_limit(client, monkeypatch):
    """Oversized input is rejected before any unit is resolved."""
    from server.routes import signs

    def no_resolve(*_args, **_kwargs):
        raise AssertionError("units resolved past the limit")

    monkeypatch.setattr(config, "MAX_UNITS", 2)
    monkeypatch.setattr(signs, "make_item", no_resolve)
    resp = client.post("/api/signs/plan", json={"text": "one two three"})
    assert resp.status_code == 413


def test_plan_at_unit_limit_is_accepted(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_UNITS", 2)
    resp = client.post("/api/signs/plan", json={"text": "good morning thank you"})
    assert resp.status_code == 200
    assert resp.json()["units"] == ["good morning", "thank you"]


def test_stream_unit_limit(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_UNITS", 2)
    resp = client.get("/api/signs/stream", params={"text": "one two three"})
    assert resp.status_code == 413
    assert "too many sign units" in resp.json()["detail"]


def test_lookup_phrase_and_default(client):
    resp = client.get("/api/signs/lookup", params={"unit": "Thank, You"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["normalized"] == "thank you"
    assert data["is_phrase"] is True
    assert data["descriptor"]["kind"] == "thank-you"

    miss = client.get("/api/signs/lookup", params={"unit": "xyznotaword"}).json()
    assert miss["descriptor"] == {"kind": "default", "color": "#607D8B", "glyph": "👋"}


def test_lookup_rejects_blank_unit(client):
    assert client.get("/api/signs/lookup", params={"unit": "!!!"}).status_code == 400
    assert client.get("/api/signs/lookup").status_code == 422


def test_stream_frames_until_idle(client, monkeypatch):
    monkeypatch.setattr(config, "get_timing", lambda: FAST)
    resp = client.get("/api/signs/stream", params={"text": "hello good morning"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")

    events = parse_events(resp.text)
    assert events[0] == ("start", {"units": ["hello", "good morning"], "speed": 1.0})
    assert events[-1][0] == "idle"

    frames = [data for kind, data in events if kind == "frame"]
    assert frames[0]["progress"] == 0.0
    assert frames[0]["glyph_scale"] == 0.5
    assert [f["unit"] for f in frames if f["progress"] == 1.0] == ["hello", "good morning"]
    assert events[-1][1]["frames"] == len(frames)


def test_stream_glyphless_unit_uses_shape_radius(client, monkeypatch):
    monkeypatch.setattr(config, "get_timing", lambda: FAST)
    events = parse_events(client.get("/api/signs/stream", params={"text": "run"}).text)
    frames = [data for kind, data in events if kind == "frame"]
    assert frames[0]["shape_radius"] == 30
    assert frames[-1]["shape_radius"] == 50


def test_stream_empty_text_goes_straight_to_idle(client):
    resp = client.get("/api/signs/stream", params={"text": "   "})
    assert event_types(resp.text) == ["start", "idle"]


def test_stream_times_out(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "STREAM_MAX_SEC", 0.0)
    resp = client.get("/api/signs/stream", params={"text": "hello"})
    assert event_types(resp.text) == ["start", "timeout"]


def test_stream_rejects_non_positive_speed(client):
    resp = client.get("/api/signs/stream", params={"text": "hello", "speed": 0})
    assert resp.status_code == 422
    assert resp.json()["details"]["error_code"] == "CONFIGURATION_ERROR"


def test_refresh_dictionary(client, small_provider):
    small_provider.snapshot()
    resp = client.post("/api/signs/dictionary/refresh")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "words": 6, "phrases": 5}
    assert small_provider.build_count == 2


def test_builtin_dictionary_is_served(builtin_client):
    data = builtin_client.get("/api/signs/lookup", params={"unit": "good morning"}).json()
    assert data["descriptor"]["kind"] == "good-morning"
    assert builtin_client.get("/health").json()["dictionary_built"] is True
