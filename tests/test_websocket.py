"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json
import time

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from grid_snake.server.app import create_app


@pytest.fixture()
def tc():
    """Starlette TestClient kept open so session tick loops keep running."""
    with TestClient(create_app()) as client:
        yield client


def _create_session(tc, **body) -> str:
    body.setdefault("tick_interval_ms", 50)
    resp = tc.post("/sessions", json=body)
    assert resp.status_code == 201
    return resp.json()["session_id"]


class TestPlayWebSocket:
    def test_receive_initial_snapshot(self, tc):
        session_id = _create_session(tc, autostart=False)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            state = json.loads(ws.receive_text())
            assert state["head"] == [2, 0]
            assert state["body"] == [[0, 0], [1, 0]]
            assert "food" in state

    def test_receive_tick_snapshots(self, tc):
        session_id = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            state = json.loads(ws.receive_text())
            assert set(state) == {"head", "body", "food"}

    def test_send_event(self, tc):
        session_id = _create_session(tc, autostart=False)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text("not json")
            ws.send_text(json.dumps([1, 2]))
            ws.send_text(json.dumps({"event": 5}))
            ws.send_text(json.dumps({"event": "jump"}))
            ws.send_text(json.dumps({"event": "stop"}))

            run_state = None
            for _ in range(50):
                resp = tc.get(f"/sessions/{session_id}")
                run_state = resp.json()["run_state"]
                if run_state == "stopped":
                    break
                time.sleep(0.02)
            assert run_state == "stopped"

    def test_nonexistent_session_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/sessions/nonexistent/play",
        ):
            pass


class TestAppLifespan:
    def test_session_limit_from_factory(self):
        with TestClient(create_app(max_sessions=1)) as client:
            first = client.post("/sessions", json={"autostart": False})
            second = client.post("/sessions", json={"autostart": False})
            assert first.status_code == 201
            assert second.status_code == 409

    def test_shutdown_stops_tick_loops(self):
        app = create_app()
        with TestClient(app) as client:
            session_id = _create_session(client)
            session = app.state.session_manager.get_session(session_id).session
            assert session.running
        assert not session.running
        assert app.state.session_manager.list_sessions() == []
