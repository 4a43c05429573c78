import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent))

from version import __version__
from web.web import create_app
from map_fixtures import MAPS_DIR


@pytest.fixture
def client():
    return TestClient(create_app(MAPS_DIR))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_list_maps(client):
    response = client.get("/api/maps")
    assert response.status_code == 200
    assert response.json()["maps"] == ["outpost", "relay_station"]


def test_generate_level(client):
    response = client.get("/api/levels/outpost", params={"seed": 5, "level": 3})
    assert response.status_code == 200
    body = response.json()
    assert body["map"] == "outpost"
    assert body["seed"] == 5
    assert body["level"] == 3
    assert body["valid"] is True
    assert body["problems"] == []
    assert len(body["rows"]) == 11
    assert all(len(row) == 21 for row in body["rows"])
    assert isinstance(body["hints"], list)


def test_generation_is_repeatable_over_http(client):
    params = {"seed": 99, "level": 6}
    first = client.get("/api/levels/relay_station", params=params).json()
    second = client.get("/api/levels/relay_station", params=params).json()
    assert first == second


def test_dump(client):
    response = client.get("/api/levels/relay_station/dump", params={"seed": 5})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("=== MAP DUMP DEBUG")
    assert "level: 1" in response.text


def test_unknown_map(client):
    response = client.get("/api/levels/nowhere", params={"seed": 1})
    assert response.status_code == 404


@pytest.mark.parametrize("params", [{}, {"seed": 1, "level": 0}, {"seed": "abc"}])
def test_bad_query(client, params):
    response = client.get("/api/levels/outpost", params=params)
    assert response.status_code == 422


@pytest.mark.parametrize("text", [
    "start = 0,0\nexit = 0,1\n---\n#.\n",
    "start = 0,0\nexit = 0,1\n..\n",
])
def test_unusable_map(tmp_path, text):
    (tmp_path / "broken.txt").write_text(text, encoding="utf-8")
    client = TestClient(create_app(tmp_path))
    assert client.get("/api/maps").json()["maps"] == ["broken"]
    response = client.get("/api/levels/broken", params={"seed": 1})
    assert response.status_code == 422
