"""Group the catalogue by the regional dexes of a game."""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from src.dex.catalogue import CatalogueLoader, get_default_loader
from src.dex.game_config import GameName, dexes_for_game
from src.dex.models import DexGroup, Pokemon, PokemonInDex


def group_by_dex(
    catalogue: Sequence[Pokemon], game: Union[GameName, str]
) -> List[DexGroup]:
    """
    Build one :class:`DexGroup` per dex of *game*, in mapping order.

    Each group holds the Pokemon with an entry in that dex, sorted by entry
    number.  The sort is stable, so ties keep catalogue order.  Groups with
    no members are still returned.
    """
    groups: List[DexGroup] = []
    for dex in dexes_for_game(game):
        entries = [
            PokemonInDex(pokemon=pokemon, dex_number=pokemon.dex_numbers[dex])
            for pokemon in catalogue
            if dex in pokemon.dex_numbers
        ]
        entries.sort(key=lambda entry: entry.dex_number)
        groups.append(DexGroup(dex=dex, pokemon=entries))
    return groups


def pokemon_for_game(
    game: Union[GameName, str], loader: Optional[CatalogueLoader] = None
) -> List[DexGroup]:
    """
    Get all Pokemon available in a game, grouped by dex.

    An unknown game returns ``[]`` before the catalogue is touched, so it
    never raises CatalogueUnavailable or CatalogueMalformed even when the
    catalogue is missing or broken. Known games load first and surface
    those errors.
    """
    if not dexes_for_game(game):
        return []
    loader = loader or get_default_loader()
    return group_by_dex(loader.load(), game)
