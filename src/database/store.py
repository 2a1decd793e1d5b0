"""SQLite store holding one row per national-dex Pokemon plus regional dex columns."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from src.dex.game_config import RegionalDex
from src.scraper.pokeapi import PokedexEntry

logger = logging.getLogger(__name__)

TABLE_NAME = "pokemon"

# Column names are only ever taken from RegionalDex, never from user input.
DEX_COLUMNS: List[str] = [dex.value for dex in RegionalDex]


def _schema_sql() -> str:
    dex_columns = ",\n".join(f"    {column} INTEGER" for column in DEX_COLUMNS)
    return (
        f"CREATE TABLE IF NOT EXISTS {TABLE_NAME} (\n"
        "    id INTEGER PRIMARY KEY,\n"
        "    name TEXT NOT NULL,\n"
        f"{dex_columns}\n"
        ")"
    )


class PokemonStore:
    def __init__(self, db_path: Union[str, Path] = ":memory:"):
        self.db_path = str(db_path)
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self.connection = sqlite3.connect(self.db_path)
        self.connection.row_factory = sqlite3.Row  # access columns by name

    def __enter__(self) -> "PokemonStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self.connection:
            self.connection.close()
            self.connection = None

    def create_schema(self) -> None:
        logger.info("Creating database schema...")
        with self.connection:
            self.connection.execute(_schema_sql())

    def insert_pokemon(self, entries: Iterable[PokedexEntry]) -> int:
        """
        Insert national-dex rows in one transaction.

        Re-running refreshes names and leaves regional columns alone.
        """
        rows = [(entry.species_id, entry.species_name) for entry in entries]
        with self.connection:
            self.connection.executemany(
                f"INSERT INTO {TABLE_NAME} (id, name) VALUES (?, ?) "
                "ON CONFLICT(id) DO UPDATE SET name = excluded.name",
                rows,
            )
        return len(rows)

    def update_regional_dex(
        self, dex: RegionalDex, entries: Iterable[PokedexEntry]
    ) -> int:
        """
        Set the *dex* column for every entry in one transaction.

        Returns the number of rows that matched an existing species id.
        Any failure rolls back the whole update.
        """
        column = RegionalDex(dex).value
        matched = 0
        with self.connection:
            for entry in entries:
                cursor = self.connection.execute(
                    f"UPDATE {TABLE_NAME} SET {column} = ? WHERE id = ?",
                    (entry.entry_number, entry.species_id),
                )
                matched += cursor.rowcount
        return matched

    def count(self, dex: Optional[RegionalDex] = None) -> int:
        query = f"SELECT COUNT(*) AS count FROM {TABLE_NAME}"
        if dex is not None:
            query += f" WHERE {RegionalDex(dex).value} IS NOT NULL"
        return self.connection.execute(query).fetchone()["count"]

    def sample(self, dex: RegionalDex, limit: int = 5) -> List[Dict[str, Any]]:
        column = RegionalDex(dex).value
        rows = self.connection.execute(
            f"SELECT id, name, {column} FROM {TABLE_NAME} "
            f"WHERE {column} IS NOT NULL ORDER BY {column} LIMIT ?",
            (limit,),
        ).fetchall()
        return [dict(row) for row in rows]

    def fetch_all(self) -> List[Dict[str, Any]]:
        rows = self.connection.execute(
            f"SELECT * FROM {TABLE_NAME} ORDER BY id"
        ).fetchall()
        return [dict(row) for row in rows]
