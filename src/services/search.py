"""
Web search enrichment using Tavily.

Looks up pages related to an idea so the summarizer has some outside context.
API Documentation: https://docs.tavily.com/documentation/api-reference/endpoint/search
"""

import sys
from typing import Any, List, Optional
import requests

from src.config import SEARCH_MAX_RESULTS, Settings
from src.models.idea_record import RelatedItem


class SearchError(Exception):
    """Raised when the search API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Tavily search failed: {status_code} {reason}")


class TavilySearchClient:
    """
    Fetches related pages for a query from the Tavily search API.

    One POST per query, basic depth, at most three results. Transport
    failures and error statuses are raised to the caller unchanged; there
    is no retry and no fallback to an empty result list.
    """

    SEARCH_DEPTH = "basic"

    def __init__(self, settings: Optional[Settings] = None, verbose: bool = False):
        self.settings = settings or Settings.from_env()
        self.verbose = verbose

    @property
    def name(self) -> str:
        return "search"

    def search(self, query: str) -> List[RelatedItem]:
        """
        Search the web for pages related to the query.

        Args:
            query: Free-text idea used as the search query.

        Returns:
            Up to three RelatedItem instances (may be empty).

        Raises:
            ValueError: If no Tavily API key is configured.
            SearchError: If the API returns a non-success status.
        """
        if not self.settings.tavily_api_key:
            raise ValueError("TAVILY_API_KEY is not configured")

        payload = {
            "api_key": self.settings.tavily_api_key,
            "query": query,
            "search_depth": self.SEARCH_DEPTH,
            "max_results": SEARCH_MAX_RESULTS,
        }

        response = requests.post(self.settings.tavily_search_url, json=payload)
        if not response.ok:
            raise SearchError(response.status_code, response.reason)

        items = self.normalize_results(response.json())
        if self.verbose:
            print(f"[{self.name}] Found {len(items)} related results", file=sys.stderr)
        return items

    @staticmethod
    def normalize_results(data: Any) -> List[RelatedItem]:
        """
        Convert a raw Tavily response body to RelatedItem instances.

        A missing, null, or non-list "results" field yields an empty list.
        Every entry of a list is mapped, including non-object entries.
        """
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            return []

        return [RelatedItem.from_search_result(raw) for raw in results]
