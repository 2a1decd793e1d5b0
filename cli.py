"""
regional-dex unified CLI.

Single entry point for all project operations.

Usage
-----
# Offline maintenance (writes the SQLite store)
python cli.py build-db                          # national dex → pokemon table
python cli.py add-dex galar                     # back-fill one regional column
python cli.py add-dex updated-hoenn
python cli.py export                            # table → pokemon.json

# Lookup (reads the JSON catalogue)
python cli.py games                             # list games, regions and dexes
python cli.py dex "Sword/Shield"                # Pokemon grouped by dex
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from pathlib import Path

from configs.constants import Constants

logger = logging.getLogger("regional-dex")


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------


def _builder(args: argparse.Namespace):
    from src.database.store import PokemonStore
    from src.pipeline.database_builder import DatabaseBuilder
    from src.scraper.pokeapi import PokeAPIScraper

    return DatabaseBuilder(scraper=PokeAPIScraper(), store=PokemonStore(args.db_path))


def cmd_build_db(args: argparse.Namespace) -> None:
    builder = _builder(args)
    try:
        builder.build()
    finally:
        builder.store.close()
    logger.info("✓ Database build complete!")


def cmd_add_dex(args: argparse.Namespace) -> None:
    builder = _builder(args)
    try:
        builder.add_regional_dex(args.pokedex)
    finally:
        builder.store.close()
    logger.info("✓ Regional dex update complete!")


def cmd_export(args: argparse.Namespace) -> None:
    from src.database.store import PokemonStore
    from src.pipeline.database_builder import DatabaseBuilder, ExportError

    if not Path(args.db_path).is_file():
        raise ExportError(f"No database at {args.db_path}; run build-db first")

    with PokemonStore(args.db_path) as store:
        DatabaseBuilder(scraper=None, store=store).export_catalogue(args.catalogue)


def cmd_games(args: argparse.Namespace) -> None:
    from src.dex.game_config import GAME_DEX_MAPPING

    for game, config in GAME_DEX_MAPPING.items():
        dexes = ", ".join(dex.value for dex in config.dexes)
        print(f"{game.value:28s} {config.region.value:8s} {dexes}")


def cmd_dex(args: argparse.Namespace) -> None:
    from src.dex.catalogue import CatalogueLoader
    from src.dex.game_config import region_for_game
    from src.dex.grouping import pokemon_for_game

    region = region_for_game(args.game)
    print(f"{args.game} — region: {getattr(region, 'value', region)}")

    groups = pokemon_for_game(args.game, loader=CatalogueLoader(args.catalogue))
    for group in groups:
        print(f"\n{'─' * 40}")
        print(f"{group.dex.value}  ({len(group.pokemon)} Pokemon)")
        for entry in group.pokemon:
            print(f"  {entry.dex_number:>4}  #{entry.pokemon.id:<5} {entry.pokemon.name}")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    from src.pipeline.database_builder import POKEDEX_NAMES

    root = argparse.ArgumentParser(
        prog="regional-dex",
        description="regional-dex Pokemon catalogue — unified CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    root.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    root.add_argument("--db-path", default=Constants.DB_PATH, metavar="FILE")
    root.add_argument(
        "--catalogue",
        default=Constants.CATALOGUE_SOURCE,
        metavar="PATH_OR_URL",
        help="JSON catalogue export (written by 'export', read by 'dex')",
    )

    subparsers = root.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "build-db", help="Create the table and insert the national dex"
    ).set_defaults(func=cmd_build_db)

    available = "\n  ".join(POKEDEX_NAMES)
    add_p = subparsers.add_parser(
        "add-dex",
        help="Back-fill one regional dex column",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Available pokedexes:\n  {available}\n\n"
            "Examples:\n"
            "  python cli.py add-dex updated-hoenn\n"
            "  python cli.py add-dex galar\n"
            "  python cli.py add-dex paldea"
        ),
    )
    add_p.add_argument(
        "pokedex", choices=POKEDEX_NAMES, metavar="pokedex-name", help="PokeAPI pokedex name"
    )
    add_p.set_defaults(func=cmd_add_dex)

    subparsers.add_parser(
        "export", help="Write the table to the JSON catalogue"
    ).set_defaults(func=cmd_export)

    subparsers.add_parser(
        "games", help="List games with their region and dexes"
    ).set_defaults(func=cmd_games)

    dex_p = subparsers.add_parser("dex", help="Show a game's Pokemon grouped by dex")
    dex_p.add_argument("game", help='Game title, e.g. "Sword/Shield"')
    dex_p.set_defaults(func=cmd_dex)

    return root


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    from src.dex.catalogue import CatalogueError
    from src.pipeline.database_builder import ExportError
    from src.scraper.base import ScraperError

    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        args.func(args)
    except (ScraperError, CatalogueError, ExportError, sqlite3.Error) as exc:
        logger.error(f"{args.command} failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
