"""
Constants
"""

# Ignore pylint warnings
# pylint: disable = line-too-long

import os


class Constants:
    """
    Constants configurations
    """

    POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
    NATIONAL_POKEDEX = "national"

    USER_AGENT = "regional-dex/1.0 (pokedex-catalogue-builder)"
    REQUEST_TIMEOUT = 30

    # Relational store populated by the offline tooling
    DB_PATH = os.getenv("REGIONAL_DEX_DB_PATH", os.path.join("public", "data", "pokemon.db"))

    # JSON export read by the catalogue loader (file path or http(s) URL)
    CATALOGUE_SOURCE = os.getenv(
        "REGIONAL_DEX_CATALOGUE", os.path.join("public", "data", "pokemon.json")
    )
