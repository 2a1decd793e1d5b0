"""Catalogue records shared by the loader, the grouping and the read API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, PositiveInt, field_validator, model_validator

from src.dex.game_config import RegionalDex


class Pokemon(BaseModel):
    """
    One catalogue row: national id, name and per-dex entry numbers.

    Source records are flat (``{"id": 1, "name": "bulbasaur", "kanto": 1,
    "galar": null, ...}``); the dex columns are folded into ``dex_numbers``
    and null columns are dropped, so a missing key means "not in that dex".
    """

    id: PositiveInt
    name: str = Field(..., min_length=1)
    dex_numbers: Dict[RegionalDex, PositiveInt] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_dex_columns(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "dex_numbers" in data:
            return data
        data = dict(data)
        numbers: Dict[str, Any] = {}
        for dex in RegionalDex:
            value = data.pop(dex.value, None)
            if value is not None:
                numbers[dex.value] = value
        data["dex_numbers"] = numbers
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _reject_bool_id(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("id must be an integer, not a boolean")
        return value

    @field_validator("dex_numbers", mode="before")
    @classmethod
    def _reject_bool_numbers(cls, value: Any) -> Any:
        if isinstance(value, dict):
            for dex, number in value.items():
                if isinstance(number, bool):
                    raise ValueError(f"{dex} must be an integer, not a boolean")
        return value

    def dex_number(self, dex: Union[RegionalDex, str]) -> Optional[int]:
        return self.dex_numbers.get(RegionalDex(dex))

    def to_record(self) -> Dict[str, Any]:
        """Flat record with every dex column present (``None`` when absent)."""
        record: Dict[str, Any] = {"id": self.id, "name": self.name}
        for dex in RegionalDex:
            record[dex.value] = self.dex_numbers.get(dex)
        return record


class PokemonInDex(BaseModel):
    pokemon: Pokemon
    dex_number: int


class DexGroup(BaseModel):
    """Pokemon present in one regional dex, ordered by their in-dex number."""

    dex: RegionalDex
    pokemon: List[PokemonInDex] = Field(default_factory=list)
