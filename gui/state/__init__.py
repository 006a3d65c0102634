"""Recipes state container.

Three independent slices (status, params, list) behind one dispatch facade,
plus the observer that mirrors the params slice into the URL.
"""

from gui.state.context import INITIAL_VALUE, current_store, provider, use_recipes_context
from gui.state.reducers import EMPTY_PARAMS, list_reducer, params_reducer, status_reducer
from gui.state.store import ContextValue, DispatchFacade, RecipesStore, SliceDispatch
from gui.state.types import (
    ACTION_TABLE,
    PARAM_KEYS,
    ActionType,
    HitListState,
    QueryParams,
    Slice,
    Snapshot,
    StatusState,
    empty_list,
    make_action,
)
from gui.state.url_sync import UrlSynchronizer, encode_params, encode_range

__all__ = [
    "INITIAL_VALUE",
    "current_store",
    "provider",
    "use_recipes_context",
    "EMPTY_PARAMS",
    "list_reducer",
    "params_reducer",
    "status_reducer",
    "ContextValue",
    "DispatchFacade",
    "RecipesStore",
    "SliceDispatch",
    "ACTION_TABLE",
    "PARAM_KEYS",
    "ActionType",
    "HitListState",
    "QueryParams",
    "Slice",
    "Snapshot",
    "StatusState",
    "empty_list",
    "make_action",
    "UrlSynchronizer",
    "encode_params",
    "encode_range",
]
