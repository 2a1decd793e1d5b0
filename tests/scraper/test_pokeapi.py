from unittest.mock import Mock

import pytest
import requests

from src.scraper.base import ScrapeConfig, ScraperError
from src.scraper.pokeapi import PokeAPIScraper, PokedexEntry, species_id_from_url


def species(entry_number, species_id, name):
    return {
        "entry_number": entry_number,
        "pokemon_species": {
            "name": name,
            "url": f"https://pokeapi.co/api/v2/pokemon-species/{species_id}/",
        },
    }


def build_scraper(payload=None, exc=None, status_error=None):
    response = Mock()
    response.json = Mock(return_value=payload)
    response.raise_for_status = Mock(side_effect=status_error)
    session = Mock()
    session.get = Mock(side_effect=exc) if exc else Mock(return_value=response)
    return PokeAPIScraper(config=ScrapeConfig(timeout=5), session=session), session


def test_species_id_from_url():
    assert species_id_from_url("https://pokeapi.co/api/v2/pokemon-species/25/") == 25
    assert species_id_from_url("https://pokeapi.co/api/v2/pokemon-species/1008") == 1008
    with pytest.raises(ScraperError):
        species_id_from_url("https://pokeapi.co/api/v2/pokemon-species/pikachu/")


def test_fetch_entries_parses_regional_pokedex():
    payload = {
        "id": 2,
        "name": "kanto",
        "pokemon_entries": [species(1, 1, "bulbasaur"), species(25, 25, "pikachu")],
    }
    scraper, session = build_scraper(payload=payload)

    entries = scraper.fetch_entries("kanto")

    session.get.assert_called_once_with("https://pokeapi.co/api/v2/pokedex/kanto", timeout=5)
    assert entries == [
        PokedexEntry(entry_number=1, species_id=1, species_name="bulbasaur"),
        PokedexEntry(entry_number=25, species_id=25, species_name="pikachu"),
    ]


def test_regional_number_differs_from_species_id():
    payload = {"name": "galar", "pokemon_entries": [species(194, 25, "pikachu")]}
    scraper, _ = build_scraper(payload=payload)

    [entry] = scraper.fetch_entries("galar")

    assert entry.entry_number == 194
    assert entry.species_id == 25


def test_http_status_error_raises_scraper_error():
    error = requests.HTTPError("404 Client Error")
    error.response = Mock(status_code=404)
    scraper, _ = build_scraper(payload={}, status_error=error)

    with pytest.raises(ScraperError, match="HTTP 404"):
        scraper.fetch_pokedex("not-a-dex")


def test_network_error_raises_scraper_error():
    scraper, _ = build_scraper(exc=requests.ConnectionError("unreachable"))

    with pytest.raises(ScraperError):
        scraper.fetch_pokedex("national")


def test_payload_without_entries_is_rejected():
    scraper, _ = build_scraper(payload={"name": "kanto"})

    with pytest.raises(ScraperError, match="pokemon_entries"):
        scraper.fetch_pokedex("kanto")


def test_malformed_entry_is_rejected():
    payload = {"name": "kanto", "pokemon_entries": [{"entry_number": 1}]}
    scraper, _ = build_scraper(payload=payload)

    with pytest.raises(ScraperError, match="Malformed"):
        scraper.fetch_entries("kanto")


def test_full_url_is_passed_through():
    scraper, session = build_scraper(payload={"ok": True})

    assert scraper.get("https://pokeapi.co/api/v2/pokedex/1/") == {"ok": True}
    session.get.assert_called_once_with("https://pokeapi.co/api/v2/pokedex/1/", timeout=5)


def test_default_session_sends_user_agent():
    scraper = PokeAPIScraper()
    try:
        assert scraper._session.headers["User-Agent"].startswith("regional-dex/")
    finally:
        scraper.close()
