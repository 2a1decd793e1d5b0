"""
Catalogue loader.

Reads the materialised ``pokemon.json`` export (a JSON array of flat Pokemon
records) from a file or an HTTP endpoint, validates it, and keeps the parsed
list for the lifetime of the loader.

The cache is single-assignment: it is filled by the first successful
:py:meth:`CatalogueLoader.load` and never invalidated.  A failed load leaves
it empty so the next call starts over.  Concurrent first callers wait on one
lock and share a single read.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import ValidationError

from configs.constants import Constants
from src.dex.game_config import RegionalDex
from src.dex.models import Pokemon

logger = logging.getLogger(__name__)


class CatalogueError(RuntimeError):
    """Base class for catalogue loading failures."""


class CatalogueUnavailable(CatalogueError):
    """The catalogue resource could not be fetched or decoded."""


class CatalogueMalformed(CatalogueError):
    """The catalogue resource was read but does not have the expected shape."""


def parse_catalogue(records: Any) -> List[Pokemon]:
    """
    Validate raw JSON records and convert them to :class:`Pokemon` objects.

    Raises
    ------
    CatalogueMalformed
        If the payload is not a list of objects, a record is missing
        ``id``/``name``, a dex value is not a positive integer, or two
        records share a national id.
    """
    if not isinstance(records, list):
        raise CatalogueMalformed(
            f"Expected a JSON array of Pokemon, got {type(records).__name__}"
        )

    catalogue: List[Pokemon] = []
    seen_ids: set[int] = set()
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise CatalogueMalformed(f"Record {index} is not an object: {record!r}")
        try:
            pokemon = Pokemon.model_validate(record)
        except ValidationError as exc:
            raise CatalogueMalformed(f"Record {index} is invalid: {exc}") from exc
        if pokemon.id in seen_ids:
            raise CatalogueMalformed(f"Duplicate national id {pokemon.id} at record {index}")
        seen_ids.add(pokemon.id)
        catalogue.append(pokemon)

    _warn_on_duplicate_dex_numbers(catalogue)
    return catalogue


def _warn_on_duplicate_dex_numbers(catalogue: List[Pokemon]) -> None:
    for dex in RegionalDex:
        owners: Dict[int, int] = {}
        for pokemon in catalogue:
            number = pokemon.dex_numbers.get(dex)
            if number is None:
                continue
            if number in owners:
                logger.warning(
                    "Dex %s number %d shared by #%d and #%d",
                    dex.value,
                    number,
                    owners[number],
                    pokemon.id,
                )
            else:
                owners[number] = pokemon.id


class CatalogueLoader:
    """
    Explicit single-assignment cache over the catalogue resource.

    Parameters
    ----------
    source : str | Path
        Filesystem path or ``http(s)://`` URL of the JSON export.
    session : requests.Session, optional
        Session used for URL sources.  A plain session is created lazily
        when omitted.
    timeout : int
        Per-request timeout in seconds for URL sources.
    """

    def __init__(
        self,
        source: Union[str, Path],
        session: Optional[requests.Session] = None,
        timeout: int = Constants.REQUEST_TIMEOUT,
    ) -> None:
        self.source = str(source)
        self.timeout = timeout
        self._session = session
        self._catalogue: Optional[List[Pokemon]] = None
        self._lock = threading.Lock()

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    @property
    def loaded(self) -> bool:
        return self._catalogue is not None

    def load(self) -> List[Pokemon]:
        """Return the catalogue, reading it on first use."""
        catalogue = self._catalogue
        if catalogue is not None:
            return catalogue

        with self._lock:
            if self._catalogue is None:
                records = self._read()
                self._catalogue = parse_catalogue(records)
                logger.info(
                    "Loaded %d Pokemon from %s", len(self._catalogue), self.source
                )
            return self._catalogue

    def _read(self) -> Any:
        if self.is_remote:
            return self._read_url()
        return self._read_file()

    def _read_file(self) -> Any:
        try:
            with open(self.source, encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as exc:
            raise CatalogueUnavailable(
                f"Could not read catalogue from {self.source}: {exc}"
            ) from exc

    def _read_url(self) -> Any:
        if self._session is None:
            self._session = requests.Session()
        try:
            resp = self._session.get(self.source, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise CatalogueUnavailable(
                f"Could not fetch catalogue from {self.source}: {exc}"
            ) from exc


# ---------------------------------------------------------------------------
# Process-wide default loader
# ---------------------------------------------------------------------------

_default_loader: Optional[CatalogueLoader] = None
_default_lock = threading.Lock()


def get_default_loader() -> CatalogueLoader:
    global _default_loader
    with _default_lock:
        if _default_loader is None:
            _default_loader = CatalogueLoader(Constants.CATALOGUE_SOURCE)
        return _default_loader


def set_default_loader(loader: Optional[CatalogueLoader]) -> None:
    """Replace the process-wide loader (``None`` rebuilds it from config on next use)."""
    global _default_loader
    with _default_lock:
        _default_loader = loader


def load_catalogue() -> List[Pokemon]:
    return get_default_loader().load()
