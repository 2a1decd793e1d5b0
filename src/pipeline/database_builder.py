"""
Database Builder — offline maintenance for the Pokemon catalogue.

WHAT THIS FILE DOES
───────────────────
1. build()              — fetch the national pokedex from PokeAPI and insert
                          one row (id, name) per species
2. add_regional_dex()   — fetch one regional pokedex and back-fill its column
                          with the regional entry numbers
3. export_catalogue()   — dump the table to the JSON array read by the
                          catalogue loader

Each step is a one-shot, operator-run job.  Network and database errors are
not caught here: they propagate to the CLI, which reports them and exits.

OUTPUT
──────
The export is a list of flat records with every dex column present:

  [{"id": 1, "name": "bulbasaur", "kanto": 1, "updated_johto": 226, ...,
    "galar": null, ...}, ...]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from configs.constants import Constants
from src.database.store import DEX_COLUMNS, PokemonStore
from src.dex.game_config import RegionalDex
from src.scraper.pokeapi import PokeAPIScraper

logger = logging.getLogger(__name__)

POKEDEX_NAMES: list[str] = [dex.pokedex_name for dex in RegionalDex]


class ExportError(RuntimeError):
    """Raised when there is nothing to export."""


def resolve_pokedex(pokedex_name: str) -> RegionalDex:
    """Map a PokeAPI pokedex name (``updated-hoenn``) to its dex column."""
    dex = RegionalDex.from_pokedex_name(pokedex_name)
    if dex is None:
        raise ValueError(
            f"Unknown pokedex: {pokedex_name}. Valid names: {', '.join(POKEDEX_NAMES)}"
        )
    return dex


class DatabaseBuilder:
    """
    Populates a :class:`PokemonStore` from PokeAPI.

    Parameters
    ----------
    scraper : PokeAPIScraper, optional
        Client used for the ``/pokedex`` requests.  Not needed for export.
    store : PokemonStore
        Target database; the schema is created on construction.
    """

    def __init__(
        self, scraper: Optional[PokeAPIScraper], store: PokemonStore
    ) -> None:
        self.scraper = scraper
        self.store = store
        self.store.create_schema()

    def build(self) -> int:
        """Insert every national-dex species and return the stored row count."""
        entries = self.scraper.fetch_entries(Constants.NATIONAL_POKEDEX)

        logger.info("Inserting Pokemon into database...")
        self.store.insert_pokemon(entries)

        count = self.store.count()
        logger.info(f"✓ Successfully inserted {count} Pokemon into database")
        logger.info(f"✓ Database saved to: {self.store.db_path}")
        return count

    def add_regional_dex(self, pokedex_name: str) -> int:
        """
        Back-fill the column for *pokedex_name* and return how many rows
        now carry a value in it.
        """
        dex = resolve_pokedex(pokedex_name)
        entries = self.scraper.fetch_entries(pokedex_name)

        logger.info(f"Updating database column: {dex.value}...")
        matched = self.store.update_regional_dex(dex, entries)
        unmatched = len(entries) - matched
        if unmatched:
            logger.warning(
                f"{unmatched} {pokedex_name} entries matched no stored species — "
                "run build-db first?"
            )

        count = self.store.count(dex)
        logger.info(f"✓ Successfully updated {count} Pokemon in {dex.value} column")

        sample = pd.DataFrame(self.store.sample(dex))
        if not sample.empty:
            logger.info(
                f"Sample data (first 5 Pokemon in {pokedex_name}):\n"
                f"{sample.to_string(index=False)}"
            )
        return count

    def export_catalogue(self, path: Union[str, Path]) -> int:
        """
        Write all rows as a JSON array of flat records; returns the row count.

        Raises ExportError without touching *path* when the table is empty.
        """
        rows = self.store.fetch_all()
        if not rows:
            raise ExportError(
                f"No Pokemon in {self.store.db_path}; refusing to overwrite {path}"
            )

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        columns = ["id", "name", *DEX_COLUMNS]
        df = pd.DataFrame.from_records(rows, columns=columns)
        # Int64 keeps absent entries as null instead of NaN
        df = df.astype({column: "Int64" for column in ["id", *DEX_COLUMNS]})
        df.to_json(path, orient="records", indent=2, force_ascii=False)

        logger.info(f"✓ Exported {len(df)} Pokemon → {path}")
        return len(df)
