"""Main GUI application object.

Wires one recipes store to the router: the URL synchronizer mirrors search
params into the query string, navigation picks the active view and focuses a
recipe for the single-recipe route.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from gui.router import Location, Router, match_route
from gui.services.clients import get_recipe_client
from gui.services.search_service import load_next_page, load_recipe, run_search
from gui.state.context import provider
from gui.state.store import RecipesStore
from gui.state.url_sync import UrlSynchronizer
from gui.utils.logging import logger
from recipe_search.edamam_client import EdamamClient
from recipe_search.models.schemas import RecipeSchema


@dataclass
class RecipeSearchApp:
    """App shell: one store, one router, one synchronizer."""

    store: RecipesStore = field(default_factory=RecipesStore)
    router: Router = field(default_factory=Router)
    client: Optional[EdamamClient] = None
    current_view: str = "home"
    synchronizer: UrlSynchronizer = field(init=False)

    def __post_init__(self) -> None:
        self.synchronizer = UrlSynchronizer(self.store, self.router)

    def run(self) -> None:
        """Start syncing params and resolve the router's current location."""

        self.synchronizer.attach()
        self.navigate(self.router.location.path, replace=True)

    def close(self) -> None:
        self.synchronizer.detach()
        self.store.close()

    @contextmanager
    def session(self) -> Iterator["RecipeSearchApp"]:
        """Run the app with its store mounted as the current one."""

        with provider(self.store):
            self.run()
            try:
                yield self
            finally:
                self.synchronizer.detach()

    def switch_view(self, view_name: str) -> None:
        """Switch the active view."""

        self.current_view = view_name

    def navigate(self, path: str, replace: bool = False) -> bool:
        """Go to ``path``; returns False for paths outside the route table."""

        match = match_route(Location.parse(path).path)
        if match is None:
            logger.warning("No route for %s", path)
            return False

        self.router.navigate(path, replace=replace)
        self.switch_view(match.name)
        self.store.dispatch.id(match.params.get("id"))
        if match.name == "recipes" and self.synchronizer.attached:
            self.synchronizer.sync()
        return True

    # ------------------------------------------------------------------
    # Fetch flows
    # ------------------------------------------------------------------

    def _client(self) -> EdamamClient:
        if self.client is None:
            self.client = get_recipe_client()
        return self.client

    def search(self) -> bool:
        return run_search(self.store.dispatch, self._client().search, self.store.state.params)

    def next_page(self) -> bool:
        return load_next_page(self.store.dispatch, self._client().next_page, self.store.state)

    def open_recipe(self, recipe_id: str) -> Optional[RecipeSchema]:
        self.navigate(f"/recipes/{recipe_id}")
        return load_recipe(self.store.dispatch, self._client().get_recipe, recipe_id)
