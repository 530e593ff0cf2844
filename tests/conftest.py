"""Shared fixtures: sample layouts/card data and a TestClient per temporary database."""

import copy

import pytest
from fastapi.testclient import TestClient

from cardsmith.config.settings import settings
from cardsmith.seed import SHARED_BACK, SHARED_FRONT

PASSWORD = "correct-horse"


def make_card_data(**overrides) -> dict:
    data = {
        "player": {
            "name": "Ken Griffey Jr.",
            "team": "Mariners",
            "position": "CF",
            "jerseyNumber": 24,
            "year": 1991,
            "throws": "left",
        },
        "stats": {"homeRuns": 22, "runsBattedIn": 100, "battingAverage": 0.327},
        "imageUrl": "https://img.example.com/griffey.jpg",
        "customFields": {"careerHighlights": "13x All-Star"},
    }
    data.update(overrides)
    return data


def make_generic_layout(**overrides) -> dict:
    layout = {
        "width": 630,
        "height": 880,
        "backgroundColor": "#FFFFFF",
        "elements": [
            {"id": "title", "type": "text", "x": 10, "y": 10, "zIndex": 2, "content": "{{player.name}}"},
            {"id": "photo", "type": "image", "x": 0, "y": 40, "width": 200, "height": 300, "zIndex": 1, "src": ""},
        ],
    }
    layout.update(overrides)
    return layout


@pytest.fixture
def card_data() -> dict:
    return make_card_data()


@pytest.fixture
def bordered_template() -> dict:
    return {"front": copy.deepcopy(SHARED_FRONT), "back": copy.deepcopy(SHARED_BACK)}


@pytest.fixture
def generic_template() -> dict:
    return {"front": make_generic_layout(), "back": make_generic_layout(elements=[])}


@pytest.fixture
def api_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cardsmith-test.db'}")
    monkeypatch.setattr(settings, "PASSWORD_HASH_ITERATIONS", 1000)
    monkeypatch.setattr(settings, "SEED_DEFAULT_TEMPLATES", True)
    return settings


@pytest.fixture
def client(api_settings):
    from cardsmith.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client: TestClient, email: str, password: str = PASSWORD) -> tuple:
    response = client.post("/api/v1/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return (email, password)


@pytest.fixture
def alice(client):
    return register(client, "alice@example.com")


@pytest.fixture
def bob(client):
    return register(client, "bob@example.com")


@pytest.fixture
def default_template_id(client) -> str:
    templates = client.get("/api/v1/templates").json()
    return next(t["id"] for t in templates if t["isDefault"])
