"""
Catalog Client

HTTP client for the remote trivia catalog. Every failure mode of a single
call (network, HTTP status, undecodable body) surfaces as TransientFetchError.
"""

from typing import Any, Optional

import requests

from ..config.game_settings import CATALOG_BASE_URL
from ..exceptions import TransientFetchError


class CatalogClient:
    """
    Thin wrapper around the catalog's two endpoints.

    - ``GET {base}/categories?count=N`` lists ``{id, title}`` entries
    - ``GET {base}/category?id=ID`` returns ``{title, clues: [{question, answer}]}``

    Responses are returned as decoded JSON; shape checks live in
    ``services.validation``.
    """

    def __init__(self, base_url: str = CATALOG_BASE_URL, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_json(self, path: str, params: dict, category_id: Any = None) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransientFetchError(f"GET {url} failed: {e}", category_id) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransientFetchError(f"GET {url} returned invalid JSON: {e}", category_id) from e

    def list_categories(self, count: int) -> Any:
        """Fetch up to ``count`` candidate categories."""
        return self._get_json('categories', {'count': count})

    def get_category_detail(self, category_id: Any) -> Any:
        """Fetch the title and full clue list of one category."""
        return self._get_json('category', {'id': category_id}, category_id)

    def close(self):
        self.session.close()
