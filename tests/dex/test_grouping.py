from pathlib import Path
from unittest.mock import Mock

import pytest

from src.dex.catalogue import CatalogueLoader, CatalogueUnavailable, set_default_loader
from src.dex.game_config import GameName, RegionalDex, dexes_for_game
from src.dex.grouping import group_by_dex, pokemon_for_game
from src.dex.models import Pokemon


FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def build_loader(catalogue):
    loader = Mock(spec=CatalogueLoader)
    loader.load = Mock(return_value=catalogue)
    return loader


@pytest.fixture
def fixture_loader():
    return CatalogueLoader(FIXTURES / "pokemon.json")


def test_sorts_by_dex_number_not_catalogue_order():
    a = Pokemon(id=10, name="a", kanto=2)
    b = Pokemon(id=20, name="b", kanto=1)

    [group] = group_by_dex([a, b], "FireRed/LeafGreen")

    assert group.dex == RegionalDex.KANTO
    assert [entry.pokemon for entry in group.pokemon] == [b, a]
    assert [entry.dex_number for entry in group.pokemon] == [1, 2]


def test_sword_shield_groups_in_mapping_order(fixture_loader):
    groups = pokemon_for_game("Sword/Shield", loader=fixture_loader)

    assert [group.dex for group in groups] == dexes_for_game("Sword/Shield")
    galar, isle_of_armor, crown_tundra = groups
    assert [(e.dex_number, e.pokemon.name) for e in galar.pokemon] == [
        (1, "grookey"),
        (194, "pikachu"),
        (196, "eevee"),
        (378, "charmander"),
    ]
    assert [e.pokemon.name for e in isle_of_armor.pokemon] == ["bulbasaur"]
    assert crown_tundra.pokemon == []


def test_pokemon_with_single_dex_appears_only_in_that_group():
    only_galar = Pokemon(id=5, name="five", galar=5)
    other = Pokemon(id=6, name="six", galar=2, isle_of_armor=1)

    groups = group_by_dex([only_galar, other], GameName.SWORD_SHIELD)

    members = {group.dex: [e.pokemon.id for e in group.pokemon] for group in groups}
    assert members[RegionalDex.GALAR] == [6, 5]
    assert members[RegionalDex.ISLE_OF_ARMOR] == [6]
    assert members[RegionalDex.CROWN_TUNDRA] == []


@pytest.mark.parametrize("game", list(GameName))
def test_one_group_per_dex_with_non_decreasing_numbers(game, fixture_loader):
    groups = pokemon_for_game(game, loader=fixture_loader)

    assert len(groups) == len(dexes_for_game(game))
    assert [group.dex for group in groups] == dexes_for_game(game)
    for group in groups:
        numbers = [entry.dex_number for entry in group.pokemon]
        assert numbers == sorted(numbers)


def test_ties_keep_catalogue_order():
    first = Pokemon(id=1, name="first", paldea=3)
    second = Pokemon(id=2, name="second", paldea=3)
    third = Pokemon(id=3, name="third", paldea=1)

    [paldea, _, _] = group_by_dex([first, second, third], "Scarlet/Violet")

    assert [e.pokemon.name for e in paldea.pokemon] == ["third", "first", "second"]


def test_unknown_game_returns_empty_without_loading():
    loader = build_loader([Pokemon(id=1, name="bulbasaur", kanto=1)])

    assert pokemon_for_game("Unknown Title", loader=loader) == []
    loader.load.assert_not_called()


def test_unavailable_catalogue_only_surfaces_for_known_games(tmp_path):
    loader = CatalogueLoader(tmp_path / "missing.json")

    assert pokemon_for_game("Pokemon Snap", loader=loader) == []
    with pytest.raises(CatalogueUnavailable):
        pokemon_for_game("X/Y", loader=loader)


def test_empty_catalogue_still_yields_empty_groups():
    groups = pokemon_for_game("X/Y", loader=build_loader([]))

    assert [group.dex.value for group in groups] == [
        "kalos_central",
        "kalos_coastal",
        "kalos_mountain",
    ]
    assert all(group.pokemon == [] for group in groups)


def test_loader_errors_propagate(tmp_path):
    loader = CatalogueLoader(tmp_path / "missing.json")

    with pytest.raises(CatalogueUnavailable):
        pokemon_for_game("Sword/Shield", loader=loader)


def test_defaults_to_process_wide_loader(fixture_loader):
    set_default_loader(fixture_loader)
    try:
        groups = pokemon_for_game("Legends: Arceus")
    finally:
        set_default_loader(None)

    assert [e.pokemon.name for e in groups[0].pokemon] == ["pikachu", "eevee"]
