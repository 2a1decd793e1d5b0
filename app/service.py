"""FastAPI service exposing the game mapping and dex grouping to the UI."""
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from src.dex.catalogue import (
    CatalogueLoader,
    CatalogueMalformed,
    CatalogueUnavailable,
    get_default_loader,
)
from src.dex.game_config import GAME_DEX_MAPPING, RegionalDex, region_for_game
from src.dex.grouping import pokemon_for_game
from src.dex.models import DexGroup

logger = logging.getLogger(__name__)


class GameSummary(BaseModel):
    name: str
    region: str
    dexes: List[RegionalDex]


class GamePokemonResponse(BaseModel):
    game: str
    region: str
    groups: List[DexGroup] = Field(default_factory=list)


app = FastAPI(title="Regional Dex Service")


def get_catalogue_loader() -> CatalogueLoader:
    loader = getattr(app.state, "catalogue_loader", None)
    if loader is None:
        loader = get_default_loader()
        app.state.catalogue_loader = loader
    return loader


@app.get("/games", response_model=List[GameSummary])
async def list_games() -> List[GameSummary]:
    return [
        GameSummary(name=game.value, region=config.region.value, dexes=list(config.dexes))
        for game, config in GAME_DEX_MAPPING.items()
    ]


@app.get("/pokemon", response_model=GamePokemonResponse)
async def game_pokemon(
    game: Optional[str] = Query(None, description='Game title, e.g. "Sword/Shield"'),
) -> GamePokemonResponse:
    if game is None or not game.strip():
        raise HTTPException(status_code=400, detail="game must not be empty")

    loader = get_catalogue_loader()
    try:
        groups = await run_in_threadpool(pokemon_for_game, game, loader)
    except CatalogueUnavailable as exc:
        logger.error("Catalogue unavailable: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except CatalogueMalformed as exc:
        logger.error("Catalogue malformed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    region = region_for_game(game)
    return GamePokemonResponse(
        game=game, region=getattr(region, "value", region), groups=groups
    )


__all__ = [
    "app",
    "GamePokemonResponse",
    "GameSummary",
    "get_catalogue_loader",
]
