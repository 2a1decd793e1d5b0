import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app import service
from src.dex.catalogue import CatalogueLoader


FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def client():
    service.app.state.catalogue_loader = CatalogueLoader(FIXTURES / "pokemon.json")
    yield TestClient(service.app)
    service.app.state.catalogue_loader = None


def test_games_endpoint_lists_mapping(client):
    response = client.get("/games")

    assert response.status_code == 200
    games = response.json()
    assert len(games) == 13
    assert games[0] == {"name": "FireRed/LeafGreen", "region": "Kanto", "dexes": ["kanto"]}
    sword_shield = next(g for g in games if g["name"] == "Sword/Shield")
    assert sword_shield["dexes"] == ["galar", "isle_of_armor", "crown_tundra"]


def test_pokemon_endpoint_groups_by_dex(client):
    response = client.get("/pokemon", params={"game": "Sword/Shield"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["game"] == "Sword/Shield"
    assert payload["region"] == "Galar"
    assert [group["dex"] for group in payload["groups"]] == [
        "galar",
        "isle_of_armor",
        "crown_tundra",
    ]
    galar = payload["groups"][0]["pokemon"]
    assert [entry["dex_number"] for entry in galar] == [1, 194, 196, 378]
    assert galar[0]["pokemon"]["name"] == "grookey"
    assert payload["groups"][2]["pokemon"] == []


def test_unknown_game_is_not_an_error(client):
    response = client.get("/pokemon", params={"game": "Unknown Title"})

    assert response.status_code == 200
    assert response.json() == {"game": "Unknown Title", "region": "Unknown", "groups": []}


def test_blank_game_is_rejected(client):
    response = client.get("/pokemon", params={"game": "   "})

    assert response.status_code == 400
    assert response.json()["detail"] == "game must not be empty"


def test_unavailable_catalogue_returns_503(tmp_path):
    service.app.state.catalogue_loader = CatalogueLoader(tmp_path / "missing.json")
    try:
        response = TestClient(service.app).get("/pokemon", params={"game": "X/Y"})
    finally:
        service.app.state.catalogue_loader = None

    assert response.status_code == 503


def test_malformed_catalogue_returns_500(tmp_path):
    path = tmp_path / "pokemon.json"
    path.write_text(json.dumps([{"id": "abc", "name": "glitch"}]), encoding="utf-8")
    service.app.state.catalogue_loader = CatalogueLoader(path)
    try:
        response = TestClient(service.app).get("/pokemon", params={"game": "X/Y"})
    finally:
        service.app.state.catalogue_loader = None

    assert response.status_code == 500
    assert "Record 0 is invalid" in response.json()["detail"]
