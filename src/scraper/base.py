"""
Base HTTP scraper for regional-dex.

Every scraper inherits from BaseScraper and gets:

  - A requests.Session with a descriptive User-Agent
  - get_json(), which raises ScraperError on any HTTP, network or decode
    failure so one-shot maintenance runs stop at the first problem

There is no retry or disk cache here.  The maintenance scripts make one or
two requests per run and the operator simply re-runs them on failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from configs.constants import Constants

# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------


@dataclass
class ScrapeConfig:
    """
    Configuration shared by every BaseScraper subclass.

    Parameters
    ----------
    base_url : str
        Root of the upstream API, without a trailing slash.
    timeout : int
        Per-request timeout in seconds.
    user_agent : str
        Sent with every request so upstream can identify the tool.
    """

    base_url: str = Constants.POKEAPI_BASE_URL
    timeout: int = Constants.REQUEST_TIMEOUT
    user_agent: str = Constants.USER_AGENT

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")


class ScraperError(RuntimeError):
    """Raised when an upstream request fails or returns unusable data."""


# ---------------------------------------------------------------------------
# Base scraper
# ---------------------------------------------------------------------------


class BaseScraper:
    """
    Base for regional-dex scrapers.

    Example
    -------
    ::

        class MyScraper(BaseScraper):
            def fetch_thing(self, name: str) -> dict:
                return self.get_json(f"{self.config.base_url}/thing/{name}")
    """

    def __init__(
        self,
        config: Optional[ScrapeConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ScrapeConfig()
        self._session = session or self._build_session()
        self.logger = logging.getLogger(self.__class__.__name__)

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        session.headers["User-Agent"] = self.config.user_agent
        return session

    def get_json(self, url: str) -> Any:
        """
        Fetch *url* and return parsed JSON.

        Raises
        ------
        ScraperError
            On a non-2xx status, a connection/timeout error, or a body that
            is not valid JSON.
        """
        self.logger.debug(f"GET {url}")
        try:
            resp = self._session.get(url, timeout=self.config.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as exc:
            code = exc.response.status_code if exc.response is not None else "?"
            raise ScraperError(f"HTTP {code} fetching {url}") from exc
        except (requests.RequestException, ValueError) as exc:
            raise ScraperError(f"Request / parse error for {url}: {exc}") from exc

    def close(self) -> None:
        self._session.close()
