"""
TMDb API client used as the title index for candidate lookup.

The client turns TMDb movie search results into candidate titles of the form
"Title (Year)", sanitized for use in filenames and kept in TMDb relevance
order. Results without a release year are dropped because the resolver
relies on the year to rank candidates.
"""
import threading
from typing import Any, Callable, Dict, List, Optional

import requests

from . import constants
from . import file_util
from . import logger
from .logger import LogLevel


class TMDbError(Exception):
    """Base exception for TMDb API errors."""


class TMDbAPIError(TMDbError):
    """Exception for request or response failures."""


def format_result_title(result: Dict[str, Any]) -> Optional[str]:
    """
    Build a candidate title from one TMDb movie result.

    Examples:
      {"title": "Heat", "release_date": "1995-12-15"} -> "Heat (1995)"
      {"title": "Alien: Covenant", "release_date": "2017-05-09"} -> "Alien - Covenant (2017)"
      {"title": "Untitled", "release_date": ""} -> None
    """
    title = (result.get("title") or result.get("original_title") or "").strip()
    year = (result.get("release_date") or "")[:4]
    if not title or len(year) != 4 or not year.isdigit():
        return None
    return file_util.sanitize_filename(f"{title} ({year})")


class TMDbClient:
    """Client for the TMDb movie search endpoint, with a per-query cache."""

    def __init__(
            self,
            api_key: Optional[str] = None,
            base_url: str = constants.TMDB_BASE_URL,
            language: str = constants.TMDB_LANGUAGE,
            timeout: float = constants.REQUEST_TIMEOUT,
    ):
        self.api_key = api_key or constants.TMDB_API_KEY
        if not self.api_key:
            raise TMDbError("TMDb API key is required. Set the TMDB_API_KEY environment variable.")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.params = {"api_key": self.api_key, "language": language}

        self._cache: Dict[str, List[str]] = {}
        self._cache_lock = threading.Lock()

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a request to the TMDb API and handle errors."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise TMDbAPIError(f"Request failed: {e}") from e
        except ValueError as e:
            raise TMDbAPIError(f"Invalid JSON response: {e}") from e

        if "success" in data and not data["success"]:
            raise TMDbAPIError(f"TMDb API error: {data.get('status_message', 'Unknown error')}")
        return data

    def search_movie(self, query: str) -> List[Dict[str, Any]]:
        """Search for movies by title; returns the raw TMDb results."""
        data = self._make_request("search/movie", {"query": query, "include_adult": "false"})
        return data.get("results", [])

    def search_titles(self, query: str) -> List[str]:
        """Return the candidate titles for `query`, in TMDb order."""
        query = query.strip()
        if not query:
            return []

        with self._cache_lock:
            if query in self._cache:
                return list(self._cache[query])

        logger.log("search.request", LogLevel.DEBUG, query=query)
        titles = []
        for result in self.search_movie(query):
            title = format_result_title(result)
            if title:
                titles.append(title)

        with self._cache_lock:
            self._cache[query] = titles
        return list(titles)


def safe_search(client: TMDbClient) -> Callable[[str], List[str]]:
    """Wrap `client.search_titles` so that TMDb failures yield no candidates."""

    def search(query: str) -> List[str]:
        try:
            return client.search_titles(query)
        except TMDbError as e:
            logger.log("search.error", LogLevel.WARN, query=query, error=str(e))
            return []

    return search
