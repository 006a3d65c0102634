"""Accessor for the recipes state.

``provider()`` mounts a store for the duration of a block and makes it the
current one; ``use_recipes_context()`` returns the current (state, dispatch)
pair. Outside any provider the accessor falls back to ``INITIAL_VALUE``,
whose dispatch actions do nothing.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from gui.state.reducers import EMPTY_PARAMS
from gui.state.store import ContextValue, RecipesStore, make_noop_dispatch
from gui.state.types import Snapshot, StatusState, empty_list

INITIAL_VALUE = ContextValue(
    state=Snapshot.compose(StatusState(), EMPTY_PARAMS, empty_list()),
    dispatch=make_noop_dispatch(),
)

_current_store: ContextVar[Optional[RecipesStore]] = ContextVar(
    "recipes_store", default=None
)


@contextmanager
def provider(store: Optional[RecipesStore] = None) -> Iterator[RecipesStore]:
    """Mount ``store`` (a fresh one by default) for the enclosed block.

    The store is closed when the block exits, the same way a provider's state
    goes away when its UI subtree unmounts. Nested providers shadow outer ones.
    """
    store = store or RecipesStore()
    token = _current_store.set(store)
    try:
        yield store
    finally:
        _current_store.reset(token)
        store.close()


def current_store() -> Optional[RecipesStore]:
    return _current_store.get()


def use_recipes_context() -> ContextValue:
    """Return the current state snapshot and dispatch facade."""
    store = _current_store.get()
    if store is None:
        return INITIAL_VALUE
    return store.value
