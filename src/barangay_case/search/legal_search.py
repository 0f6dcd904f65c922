"""Legal research search restricted to trusted Philippine legal sources.

Wraps the Google Custom Search JSON API. Queries are limited to an allow-list
of domains by appending ``(site:a OR site:b ...)`` to the user's query.
Selected results can be attached to a CitationList for inclusion in a report.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import requests  # type: ignore[import-untyped]
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
RESULTS_PER_QUERY = 10

DEFAULT_ALLOWED_SITES = [
    "lawphil.net",
    "chanrobles.com",
    "sc.judiciary.gov.ph",
    "ca.judiciary.gov.ph",
    "officialgazette.gov.ph",
    "philippinelaw.allegheny.edu",
]

GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")
GOOGLE_CSE_ID = os.getenv("GOOGLE_CSE_ID", "")
ALLOWED_SITES = [s.strip() for s in os.getenv("LEGAL_SEARCH_ALLOWED_SITES", ",".join(DEFAULT_ALLOWED_SITES)).split(",") if s.strip()]
SEARCH_TIMEOUT = float(os.getenv("SEARCH_TIMEOUT", "15"))


class ConfigurationError(RuntimeError):
    pass


class NetworkError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class SearchResult:
    title: str
    link: str
    display_link: str
    snippet: str = ""

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "SearchResult":
        return cls(
            title=item.get("title", ""),
            link=item.get("link", ""),
            display_link=item.get("displayLink", ""),
            snippet=item.get("snippet") or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "link": self.link,
            "displayLink": self.display_link,
            "snippet": self.snippet,
        }


# An attached search result is a citation.
Citation = SearchResult


def build_query(query: str, domains: Iterable[str]) -> str:
    domain_filter = " OR ".join(f"site:{d}" for d in domains)
    return f"{query} ({domain_filter})"


class LegalSearchClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        cse_id: Optional[str] = None,
        allowed_sites: Optional[List[str]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = GOOGLE_API_KEY if api_key is None else api_key
        self.cse_id = GOOGLE_CSE_ID if cse_id is None else cse_id
        self.allowed_sites = list(ALLOWED_SITES if allowed_sites is None else allowed_sites)
        self.timeout = SEARCH_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.cse_id)

    def search(self, query: str) -> List[SearchResult]:
        """Run ``query`` against the allow-listed sites.

        Raises ConfigurationError when credentials are missing and NetworkError
        on transport failures or non-success responses.
        """
        if not self.configured:
            raise ConfigurationError("Please configure GOOGLE_API_KEY and GOOGLE_CSE_ID")
        params = {
            "key": self.api_key,
            "cx": self.cse_id,
            "q": build_query(query, self.allowed_sites),
            "num": str(RESULTS_PER_QUERY),
        }
        logger.info(f"Legal search: {query!r} across {len(self.allowed_sites)} sites")
        try:
            response = self.session.get(SEARCH_URL, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Legal search request failed: {e}")
            raise NetworkError(f"Search request failed: {e}") from e
        if not response.ok:
            logger.warning(f"Legal search returned HTTP {response.status_code}")
            raise NetworkError(f"Search request failed: {response.status_code}", response.status_code)
        try:
            data = response.json() or {}
        except ValueError as e:
            logger.warning(f"Legal search returned a non-JSON body: {e}")
            raise NetworkError(f"Search request failed: invalid response ({e})", response.status_code) from e
        return [SearchResult.from_item(item) for item in data.get("items") or []]


class CitationList:
    """Ordered citations attached by the user; kept outside the case report itself."""

    def __init__(self):
        self._items: List[Citation] = []

    def attach(self, item: Citation) -> Citation:
        self._items.append(item)
        return item

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self):
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @staticmethod
    def label(item: Citation) -> str:
        return f"{item.title} — {item.display_link}"

    def to_list(self) -> List[Dict[str, str]]:
        return [dict(c.to_dict(), label=self.label(c)) for c in self._items]
