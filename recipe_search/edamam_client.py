"""
Edamam API Client - Fetch recipe search pages and single recipes.

The client returns already-validated payloads: search pages are projected onto
the GUI list-slice shape, single recipes come back as RecipeSchema objects.
"""
from typing import Iterable, List, Optional, Tuple

import requests
from pydantic import ValidationError

from .config import Settings, get_settings
from .models.schemas import HitListSchema, RecipeResponseSchema, RecipeSchema
from .utils.logger import get_logger

logger = get_logger(__name__)

QueryPairs = Iterable[Tuple[str, str]]


class RecipeSearchError(RuntimeError):
    """Raised when the recipe API cannot be reached or returns a bad payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EdamamClient:
    """
    Client for the Edamam Recipe Search API (v2).

    Provides methods to:
    - Search recipes with filter parameters
    - Follow the "next page" link of a result page
    - Fetch a single recipe by id
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

        if not self.settings.has_credentials:
            logger.warning("EDAMAM_APP_ID / EDAMAM_APP_KEY not set; requests will be rejected")

    def _auth_params(self) -> List[Tuple[str, str]]:
        return [
            ("type", "public"),
            ("app_id", self.settings.edamam_app_id or ""),
            ("app_key", self.settings.edamam_app_key or ""),
        ]

    def _request(self, url: str, params: Optional[List[Tuple[str, str]]] = None) -> dict:
        """
        Perform a GET request and return the decoded JSON body.

        Raises:
            RecipeSearchError: on transport failures, HTTP errors or non-JSON bodies
        """
        try:
            response = self.session.get(
                url, params=params, timeout=self.settings.request_timeout
            )
        except requests.RequestException as exc:
            logger.error("Recipe API request failed: %s", exc)
            raise RecipeSearchError(f"Request failed: {exc}") from exc

        if not response.ok:
            logger.error("Recipe API returned %s for %s", response.status_code, url)
            raise RecipeSearchError(
                f"Recipe API returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise RecipeSearchError("Recipe API returned a non-JSON body") from exc

    @staticmethod
    def _parse_page(data: dict) -> dict:
        try:
            return HitListSchema.model_validate(data).to_state()
        except ValidationError as exc:
            raise RecipeSearchError(f"Unexpected search payload: {exc}") from exc

    def search(self, query: QueryPairs) -> dict:
        """
        Search recipes.

        Args:
            query: encoded (key, value) pairs; repeated keys are allowed

        Returns:
            A page in the list-slice shape ({from, to, count, hits, next})
        """
        params = self._auth_params() + list(query)
        logger.debug("Searching recipes with %d query pairs", len(params))
        return self._parse_page(self._request(self.settings.edamam_base_url, params))

    def next_page(self, href: str) -> dict:
        """Follow a "next" link. The href already carries every query parameter."""
        if not href:
            raise RecipeSearchError("No next page available")
        return self._parse_page(self._request(href))

    def get_recipe(self, recipe_id: str) -> RecipeSchema:
        url = f"{self.settings.edamam_base_url.rstrip('/')}/{recipe_id}"
        data = self._request(url, self._auth_params())
        try:
            return RecipeResponseSchema.model_validate(data).recipe
        except ValidationError as exc:
            raise RecipeSearchError(f"Unexpected recipe payload: {exc}") from exc
