"""HTTP tests for the FastAPI surface."""

from __future__ import annotations

from collections.abc import Iterator

import asyncio
import logging

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from tests.conftest import SMALL_SQUARE, ZONES_FILE


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setenv("ZONES_PATH", str(ZONES_FILE))
    from app.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


def draw(client: TestClient, ring: list = SMALL_SQUARE) -> None:
    for lon, lat in ring:
        client.post("/workspace/click", json={"lon": lon, "lat": lat})


def test_health(client: TestClient) -> None:
    body = client.get("/health").json()
    assert body["ok"] is True
    assert body["zones"] == 4


def test_zones_passthrough(client: TestClient) -> None:
    zones = client.get("/zones").json()
    assert [z["id"] for z in zones] == ["zone1", "zone2", "zone3", "zone4"]
    assert zones[0]["color"] == "#ff5733"


def test_zone_report_selection(client: TestClient) -> None:
    body = client.post("/workspace/click", json={"lon": 72.8705, "lat": 19.3685}).json()
    assert body["outcome"] == "zone_report"
    assert body["workspace"]["selection"]["zone_id"] == "zone1"
    assert body["workspace"]["selection"]["report"]["maxHeight"] == "50m"


def test_draw_save_delete_reset(client: TestClient) -> None:
    client.put("/workspace/mode", json={"mode": "free_drawing"})
    draw(client)
    draft = client.get("/workspace").json()["draft"]
    assert draft["state"] == "valid"
    assert draft["area"]["square_meters"] > 0

    saved = client.post("/workspace/save").json()
    assert saved["id"] is not None
    assert saved["workspace"]["draft"]["vertices"] == []
    polygons = client.get("/polygons").json()
    assert len(polygons) == 1
    assert polygons[0]["area"]["square_feet"] == polygons[0]["area"]["square_meters"] * 10.7639

    assert client.delete("/polygons/unknown").json()["deleted"] is False
    draw(client)
    client.post("/workspace/save")
    assert len(client.get("/polygons").json()) == 2
    assert client.delete(f"/polygons/{saved['id']}").json()["deleted"] is True

    reset = client.post("/workspace/reset").json()
    assert reset["polygons"] == []
    assert reset["draft"]["vertices"] == []


def test_rejected_save(client: TestClient) -> None:
    client.put("/workspace/mode", json={"mode": "free_drawing"})
    draw(client, SMALL_SQUARE[:2])
    body = client.post("/workspace/save").json()
    assert body["id"] is None
    assert len(body["workspace"]["draft"]["vertices"]) == 2


def test_malformed_click_is_sanitized(client: TestClient) -> None:
    client.put("/workspace/mode", json={"mode": "free_drawing"})
    body = client.post("/workspace/click", json={"lon": "abc", "lat": 999}).json()
    assert body["workspace"]["draft"]["vertices"] == [[0.0, 90.0]]


def test_drag_and_meshes(client: TestClient) -> None:
    client.post("/workspace/mode/toggle")
    client.post("/workspace/mode/toggle")
    draw(client)
    moved = client.post("/workspace/draft/vertices/0", json={"lon": 9.9999, "lat": 0.0}).json()
    assert moved["moved"] is True
    assert moved["workspace"]["draft"]["vertices"][0] == [9.9999, 0.0]
    assert client.post("/workspace/draft/vertices/7", json={"lon": 1, "lat": 1}).json()["moved"] is False

    client.put("/workspace/height", json={"value": 30})
    snapshot = client.post("/workspace/3d/toggle").json()
    assert snapshot["three_d"] is True
    assert snapshot["meshes"]["draft"]["height"] == 30
    assert len(client.get("/polygons/meshes").json()["draft"]["edges"]) == 4


def test_events_feed(client: TestClient) -> None:
    client.post("/workspace/mode/toggle")
    events = client.get("/events", params={"limit": 5}).json()
    assert events[0]["type"] == "mode_changed"
    assert events[0]["mode"] == "property_inspection"


def test_click_with_integer_too_large_for_float(client: TestClient) -> None:
    client.put("/workspace/mode", json={"mode": "free_drawing"})
    body = '{"lon": 1' + "0" * 400 + ', "lat": 1}'
    response = client.post("/workspace/click", content=body, headers={"content-type": "application/json"})
    assert response.status_code == 200
    assert response.json()["workspace"]["draft"]["vertices"] == [[180.0, 1.0]]


def test_ws_pushes_snapshot(client: TestClient) -> None:
    with client.websocket_connect("/ws", headers={"origin": "http://localhost:5173"}) as ws:
        assert ws.receive_json()["mode"] == "zoning_inspection"


def test_ws_rejects_unknown_origin(client: TestClient) -> None:
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/ws", headers={"origin": "http://elsewhere.test"}) as ws:
            ws.receive_text()


class _BrokenSocket:
    """WebSocket stand-in whose sends fail after the peer vanished."""

    def __init__(self) -> None:
        self.headers = {"origin": "http://localhost:5173"}
        self.closed = False

    async def accept(self) -> None:
        return None

    async def send_text(self, text: str) -> None:
        raise RuntimeError("Cannot call send once a close message has been sent.")

    async def close(self, code: int = 1000) -> None:
        self.closed = True


def test_ws_failed_send_is_logged_and_closed(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    from api.routes.ws import ws_workspace
    from core import state

    monkeypatch.delenv("ALLOW_ORIGINS", raising=False)
    monkeypatch.setattr(state, "stop_flag", False)
    socket = _BrokenSocket()
    with caplog.at_level(logging.WARNING, logger="zoneplot.api.ws"):
        asyncio.run(ws_workspace(socket))
    assert socket.closed is True
    assert "Workspace push stopped" in caplog.text


def test_run_serves_app_with_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    import app.main as main

    calls: list[tuple] = []
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    main.run()
    assert calls[0][0] == ("app.main:app",)
    assert calls[0][1]["port"] == 8123
