"""
PokeAPI client for the regional-dex maintenance tooling.

Only the ``/pokedex/{name}`` endpoint is used:

  national         : one entry per species, used to seed the store
  kanto, galar ... : regional entry lists, used to back-fill dex columns

Each entry looks like::

    {"entry_number": 4,
     "pokemon_species": {"name": "charmander",
                         "url": "https://pokeapi.co/api/v2/pokemon-species/4/"}}

The species id (national dex number) is the last path segment of the URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.scraper.base import BaseScraper, ScraperError


@dataclass(frozen=True)
class PokedexEntry:
    entry_number: int
    species_id: int
    species_name: str


def species_id_from_url(url: str) -> int:
    """
    Extract the species id from a PokeAPI species URL.

    >>> species_id_from_url("https://pokeapi.co/api/v2/pokemon-species/25/")
    25
    """
    segment = url.rstrip("/").rsplit("/", 1)[-1]
    try:
        return int(segment)
    except ValueError as exc:
        raise ScraperError(f"No species id in URL: {url!r}") from exc


class PokeAPIScraper(BaseScraper):
    """Fetches pokedex listings from https://pokeapi.co."""

    def get(self, endpoint: str) -> Any:
        """Fetch a relative path (``"/pokedex/kanto"``) or a full URL."""
        if endpoint.startswith("http"):
            url = endpoint
        else:
            url = f"{self.config.base_url}{endpoint}"
        return self.get_json(url)

    def fetch_pokedex(self, pokedex_name: str) -> dict:
        self.logger.info(f"Fetching {pokedex_name} pokedex...")
        pokedex = self.get(f"/pokedex/{pokedex_name}")
        if not isinstance(pokedex, dict) or not isinstance(
            pokedex.get("pokemon_entries"), list
        ):
            raise ScraperError(f"Pokedex {pokedex_name!r} has no pokemon_entries list")
        self.logger.info(
            f"Found {len(pokedex['pokemon_entries'])} Pokemon in "
            f"{pokedex.get('name', pokedex_name)}"
        )
        return pokedex

    @staticmethod
    def parse_entries(pokedex: dict) -> list[PokedexEntry]:
        entries: list[PokedexEntry] = []
        for raw in pokedex.get("pokemon_entries", []):
            try:
                species = raw["pokemon_species"]
                entries.append(
                    PokedexEntry(
                        entry_number=int(raw["entry_number"]),
                        species_id=species_id_from_url(species["url"]),
                        species_name=species["name"],
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ScraperError(f"Malformed pokedex entry {raw!r}") from exc
        return entries

    def fetch_entries(self, pokedex_name: str) -> list[PokedexEntry]:
        return self.parse_entries(self.fetch_pokedex(pokedex_name))

