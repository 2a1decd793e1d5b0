"""Regional dex lookup: game mapping, catalogue loading and grouping."""

from .catalogue import (
    CatalogueError,
    CatalogueLoader,
    CatalogueMalformed,
    CatalogueUnavailable,
    get_default_loader,
    load_catalogue,
    set_default_loader,
)
from .game_config import (
    GAME_DEX_MAPPING,
    GameConfig,
    GameName,
    RegionalDex,
    RegionName,
    dexes_for_game,
    pokemon_in_game,
    region_for_game,
)
from .grouping import group_by_dex, pokemon_for_game
from .models import DexGroup, Pokemon, PokemonInDex

__all__ = [
    "CatalogueError",
    "CatalogueLoader",
    "CatalogueMalformed",
    "CatalogueUnavailable",
    "DexGroup",
    "GAME_DEX_MAPPING",
    "GameConfig",
    "GameName",
    "Pokemon",
    "PokemonInDex",
    "RegionName",
    "RegionalDex",
    "dexes_for_game",
    "get_default_loader",
    "group_by_dex",
    "load_catalogue",
    "pokemon_for_game",
    "pokemon_in_game",
    "region_for_game",
    "set_default_loader",
]
