"""
Tests for the HTTP API, backed by the fake transport.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pulse_control.api import configure, router
from pulse_control.audio.protocol import Command, decode_fields
from pulse_control.errors import TransportError


@pytest.fixture
def client(transport):
    configure(transport)
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


class TestVolumeRoutes:
    def test_get_volume(self, client):
        response = client.get("/api/v1/volume")
        assert response.status_code == 200
        assert response.json()["volume"] == pytest.approx(0.5, abs=1 / 65535)

    def test_get_volume_missing_sink(self, client, transport):
        transport.sink_list = []
        response = client.get("/api/v1/volume")
        assert response.status_code == 404

    def test_get_volume_transport_error(self, client, transport, transport_error):
        transport.info_error = transport_error
        assert client.get("/api/v1/volume").status_code == 502

    def test_set_volume(self, client, transport):
        response = client.put("/api/v1/volume", json={"volume": 1.0})
        assert response.status_code == 200
        _, payload = transport.requests[0]
        assert decode_fields(payload)[1:] == ["s1", [65535]]

    def test_set_volume_rejects_negative(self, client, transport):
        assert client.put("/api/v1/volume", json={"volume": -0.5}).status_code == 422
        assert transport.requests == []

    def test_set_volume_rejects_infinity(self, client, transport):
        response = client.put(
            "/api/v1/volume",
            content='{"volume": 1e400}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert transport.requests == []

    def test_set_sink_volume(self, client, transport):
        response = client.put("/api/v1/sinks/s0/volume", json={"volume": 0.5})
        assert response.status_code == 200
        _, payload = transport.requests[0]
        assert decode_fields(payload)[1] == "s0"


class TestMuteRoutes:
    def test_get_mute(self, client):
        response = client.get("/api/v1/mute")
        assert response.status_code == 200
        assert response.json() == {"muted": False}

    def test_get_mute_missing_sink(self, client, transport):
        transport.sink_list = []
        assert client.get("/api/v1/mute").status_code == 404

    def test_mute_listed_sinks(self, client, transport):
        response = client.put("/api/v1/mute", json={"muted": True, "devices": ["A", "B"]})
        assert response.status_code == 200
        assert [decode_fields(p)[1] for _, p in transport.requests] == ["A", "B"]

    def test_mute_default_source(self, client, transport):
        response = client.put("/api/v1/sources/mute", json={"muted": True})
        assert response.status_code == 200
        command, payload = transport.requests[0]
        assert command == Command.SET_SOURCE_MUTE
        assert decode_fields(payload)[1:] == ["mic", True]

    def test_toggle(self, client, transport):
        response = client.post("/api/v1/mute/toggle")
        assert response.status_code == 200
        assert response.json() == {"muted": True}

    def test_toggle_failure(self, client, transport, transport_error):
        transport.request_errors["s1"] = transport_error
        assert client.post("/api/v1/mute/toggle").status_code == 502


class TestMalformedServerOutput:
    def test_get_mute_with_malformed_sinks(self, client, transport):
        transport.sinks_error = TransportError("Unexpected pactl sinks entry")
        assert client.get("/api/v1/mute").status_code == 502
