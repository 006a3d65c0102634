"""Search helpers for the GUI.

These functions implement the fetch side of the recipes state: they report
progress and failures through the dispatch facade and hand successful pages
to the list slice. The actual HTTP call is injected (normally an
``EdamamClient`` method) so the flow can run against fakes in tests.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple

from gui.state.store import DispatchFacade
from gui.state.types import HitListState, Snapshot
from gui.state.url_sync import encode_params
from gui.utils.logging import log
from recipe_search.edamam_client import RecipeSearchError
from recipe_search.models.schemas import RecipeSchema

SearchFn = Callable[[List[Tuple[str, str]]], HitListState]
NextPageFn = Callable[[str], HitListState]
RecipeFn = Callable[[str], RecipeSchema]


def _fetch(dispatch: DispatchFacade, call: Callable[[], Any]) -> Optional[Any]:
    dispatch.error(None)
    dispatch.loading(True)
    try:
        result = call()
    except RecipeSearchError as exc:
        log(f"Recipe request failed: {exc}", logging.WARNING)
        dispatch.error(str(exc))
        dispatch.loading(False)
        return None
    except Exception:
        dispatch.loading(False)
        raise
    return result


def run_search(
    dispatch: DispatchFacade, fetch: SearchFn, params: Mapping[str, Any]
) -> bool:
    """Fetch the first page for ``params`` into the list slice.

    Returns True when a page was stored, False when the request failed (the
    message is then in the ``error`` status field).
    """
    page = _fetch(dispatch, lambda: fetch(encode_params(params)))
    if page is None:
        return False
    dispatch.list.set(page)
    dispatch.loading(False)
    return True


def load_next_page(dispatch: DispatchFacade, fetch_next: NextPageFn, state: Snapshot) -> bool:
    """Replace the list slice with the page behind ``list.next.href``."""
    href = state.list["next"]["href"]
    if not href:
        return False
    page = _fetch(dispatch, lambda: fetch_next(href))
    if page is None:
        return False
    dispatch.list.set(page)
    dispatch.loading(False)
    return True


def load_recipe(
    dispatch: DispatchFacade, fetch_recipe: RecipeFn, recipe_id: str
) -> Optional[RecipeSchema]:
    """Focus ``recipe_id`` and fetch its full record for the detail view."""
    dispatch.id(recipe_id)
    recipe = _fetch(dispatch, lambda: fetch_recipe(recipe_id))
    if recipe is None:
        return None
    dispatch.loading(False)
    return recipe
