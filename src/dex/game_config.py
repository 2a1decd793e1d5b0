"""
Game configuration for the regional dex lookup.

Maps each Pokemon game to the regional Pokedex columns it uses.  Some games
span several dexes (Kalos is split in three, the DLC games add their own), so
the value side is an ordered list: base dex first, then any DLC dexes.

The table is hand-curated from the PokeAPI ``/pokedex`` listings and never
recomputed at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from src.dex.models import Pokemon

UNKNOWN_REGION = "Unknown"


class RegionalDex(str, Enum):
    """Regional Pokedex identifiers, named after their database columns."""

    KANTO = "kanto"
    UPDATED_JOHTO = "updated_johto"
    UPDATED_HOENN = "updated_hoenn"
    EXTENDED_SINNOH = "extended_sinnoh"
    UPDATED_UNOVA = "updated_unova"
    KALOS_CENTRAL = "kalos_central"
    KALOS_COASTAL = "kalos_coastal"
    KALOS_MOUNTAIN = "kalos_mountain"
    UPDATED_ALOLA = "updated_alola"
    GALAR = "galar"
    ISLE_OF_ARMOR = "isle_of_armor"
    CROWN_TUNDRA = "crown_tundra"
    HISUI = "hisui"
    PALDEA = "paldea"
    KITAKAMI = "kitakami"
    BLUEBERRY = "blueberry"

    @property
    def pokedex_name(self) -> str:
        """Name of the matching PokeAPI pokedex (``updated_hoenn`` -> ``updated-hoenn``)."""
        return self.value.replace("_", "-")

    @classmethod
    def from_pokedex_name(cls, name: str) -> Optional["RegionalDex"]:
        for dex in cls:
            if dex.pokedex_name == name:
                return dex
        return None


class GameName(str, Enum):
    FIRERED_LEAFGREEN = "FireRed/LeafGreen"
    RUBY_SAPPHIRE = "Ruby/Sapphire"
    DIAMOND_PEARL_PLATINUM = "Diamond/Pearl/Platinum"
    HEARTGOLD_SOULSILVER = "HeartGold/SoulSilver"
    BLACK_WHITE = "Black/White"
    BLACK_WHITE_2 = "Black/White 2"
    X_Y = "X/Y"
    OMEGA_RUBY_ALPHA_SAPPHIRE = "Omega Ruby/Alpha Sapphire"
    ULTRA_SUN_ULTRA_MOON = "Ultra Sun/Ultra Moon"
    SWORD_SHIELD = "Sword/Shield"
    LEGENDS_ARCEUS = "Legends: Arceus"
    SCARLET_VIOLET = "Scarlet/Violet"
    LEGENDS_Z_A = "Legends: Z-A"

    @classmethod
    def parse(cls, value: Union["GameName", str, None]) -> Optional["GameName"]:
        """Convert external input into a ``GameName``; ``None`` if unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class RegionName(str, Enum):
    KANTO = "Kanto"
    JOHTO = "Johto"
    HOENN = "Hoenn"
    SINNOH = "Sinnoh"
    UNOVA = "Unova"
    KALOS = "Kalos"
    ALOLA = "Alola"
    GALAR = "Galar"
    HISUI = "Hisui"
    PALDEA = "Paldea"


@dataclass(frozen=True)
class GameConfig:
    dexes: tuple[RegionalDex, ...]
    region: RegionName


_KALOS_DEXES = (
    RegionalDex.KALOS_CENTRAL,
    RegionalDex.KALOS_COASTAL,
    RegionalDex.KALOS_MOUNTAIN,
)

GAME_DEX_MAPPING: dict[GameName, GameConfig] = {
    GameName.FIRERED_LEAFGREEN: GameConfig(
        dexes=(RegionalDex.KANTO,), region=RegionName.KANTO
    ),
    GameName.RUBY_SAPPHIRE: GameConfig(
        dexes=(RegionalDex.UPDATED_HOENN,), region=RegionName.HOENN
    ),
    GameName.DIAMOND_PEARL_PLATINUM: GameConfig(
        dexes=(RegionalDex.EXTENDED_SINNOH,), region=RegionName.SINNOH
    ),
    GameName.HEARTGOLD_SOULSILVER: GameConfig(
        dexes=(RegionalDex.UPDATED_JOHTO,), region=RegionName.JOHTO
    ),
    GameName.BLACK_WHITE: GameConfig(
        dexes=(RegionalDex.UPDATED_UNOVA,), region=RegionName.UNOVA
    ),
    GameName.BLACK_WHITE_2: GameConfig(
        dexes=(RegionalDex.UPDATED_UNOVA,), region=RegionName.UNOVA
    ),
    GameName.X_Y: GameConfig(dexes=_KALOS_DEXES, region=RegionName.KALOS),
    GameName.OMEGA_RUBY_ALPHA_SAPPHIRE: GameConfig(
        dexes=(RegionalDex.UPDATED_HOENN,), region=RegionName.HOENN
    ),
    GameName.ULTRA_SUN_ULTRA_MOON: GameConfig(
        dexes=(RegionalDex.UPDATED_ALOLA,), region=RegionName.ALOLA
    ),
    GameName.SWORD_SHIELD: GameConfig(
        dexes=(
            RegionalDex.GALAR,
            RegionalDex.ISLE_OF_ARMOR,
            RegionalDex.CROWN_TUNDRA,
        ),
        region=RegionName.GALAR,
    ),
    GameName.LEGENDS_ARCEUS: GameConfig(
        dexes=(RegionalDex.HISUI,), region=RegionName.HISUI
    ),
    GameName.SCARLET_VIOLET: GameConfig(
        dexes=(
            RegionalDex.PALDEA,
            RegionalDex.KITAKAMI,
            RegionalDex.BLUEBERRY,
        ),
        region=RegionName.PALDEA,
    ),
    GameName.LEGENDS_Z_A: GameConfig(dexes=_KALOS_DEXES, region=RegionName.KALOS),
}


def game_config(game: Union[GameName, str]) -> Optional[GameConfig]:
    parsed = GameName.parse(game)
    if parsed is None:
        return None
    return GAME_DEX_MAPPING.get(parsed)


def dexes_for_game(game: Union[GameName, str]) -> list[RegionalDex]:
    """Get the regional dex columns for a game (empty for unknown games)."""
    config = game_config(game)
    return list(config.dexes) if config else []


def region_for_game(game: Union[GameName, str]) -> Union[RegionName, str]:
    """Get the region name for a game, or ``"Unknown"``."""
    config = game_config(game)
    return config.region if config else UNKNOWN_REGION


def pokemon_in_game(pokemon: "Pokemon", game: Union[GameName, str]) -> bool:
    """Check whether a Pokemon has an entry in any of the game's regional dexes."""
    return any(pokemon.dex_number(dex) is not None for dex in dexes_for_game(game))
