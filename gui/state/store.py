"""Application state container.

``RecipesStore`` owns the three slices (status, params, list) of one mounted
UI subtree. Components read ``store.state`` (or ``store.value`` for the
state/dispatch pair) and write through ``store.dispatch``.

Every dispatch runs one reducer to completion and commits its result before
observers are told about it. Observers registered with ``subscribe`` always
receive the latest snapshot.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Mapping, Optional

from gui.state.reducers import EMPTY_PARAMS, list_reducer, params_reducer, status_reducer
from gui.state.types import (
    ActionType,
    HitListState,
    ParamsSet,
    QueryParams,
    Slice,
    Snapshot,
    StatusState,
    empty_list,
    make_action,
)
from gui.utils.logging import log, logger

Listener = Callable[[Snapshot], None]
DispatchFn = Callable[[Any], None]


class SliceDispatch:
    """``set`` / ``update`` / ``clear`` for the params or list slice."""

    __slots__ = ("_slice", "_dispatch")

    def __init__(self, slice_: Slice, dispatch: DispatchFn):
        self._slice = slice_
        self._dispatch = dispatch

    def set(self, payload: Any) -> None:
        self._dispatch(make_action(self._slice, ActionType.SET, payload))

    def update(self, payload: Any) -> None:
        self._dispatch(make_action(self._slice, ActionType.UPDATE, payload))

    def clear(self, payload: None = None) -> None:
        self._dispatch(make_action(self._slice, ActionType.CLEAR))


class DispatchFacade:
    """All dispatchable actions, grouped by slice.

    ``loading`` / ``error`` / ``id`` target the status slice; ``params`` and
    ``list`` expose the set/update/clear verbs of their slices.
    """

    __slots__ = ("_status", "params", "list")

    def __init__(
        self,
        dispatch_status: DispatchFn,
        dispatch_params: DispatchFn,
        dispatch_list: DispatchFn,
    ):
        self._status = dispatch_status
        self.params = SliceDispatch(Slice.PARAMS, dispatch_params)
        self.list = SliceDispatch(Slice.LIST, dispatch_list)

    def loading(self, payload: bool) -> None:
        self._status(make_action(Slice.STATUS, ActionType.LOADING, payload))

    def error(self, payload: Optional[str] = None) -> None:
        self._status(make_action(Slice.STATUS, ActionType.ERROR, payload))

    def id(self, payload: Optional[str] = None) -> None:
        self._status(make_action(Slice.STATUS, ActionType.ID, payload))


@dataclass(frozen=True)
class ContextValue:
    """What the accessor hands to components."""

    state: Snapshot
    dispatch: DispatchFacade


class RecipesStore:
    """Holds the status, params and list slices behind one stable facade."""

    def __init__(self, params: Optional[QueryParams] = None) -> None:
        self._status = StatusState()
        self._params: Mapping[str, Any] = EMPTY_PARAMS
        if params:
            # Same filtering as a SET, so unknown keys never enter state.
            self._params = params_reducer(EMPTY_PARAMS, ParamsSet(params))
        self._list: HitListState = empty_list()

        self._listeners: List[Listener] = []
        self._closed = False
        self._batch_depth = 0
        self._pending = False
        self._notifying = False

        self._slices: Optional[tuple] = None
        self._snapshot: Optional[Snapshot] = None
        self._value: Optional[ContextValue] = None

        # Built once; its identity never changes for the life of the store.
        self._dispatch = DispatchFacade(
            self._dispatch_status, self._dispatch_params, self._dispatch_list
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def dispatch(self) -> DispatchFacade:
        return self._dispatch

    def _refresh(self) -> None:
        slices = (self._status, self._params, self._list)
        if self._slices is None or any(a is not b for a, b in zip(slices, self._slices)):
            self._slices = slices
            self._snapshot = Snapshot.compose(*slices)
            self._value = ContextValue(state=self._snapshot, dispatch=self._dispatch)

    @property
    def state(self) -> Snapshot:
        """Current snapshot; a new object only after some slice changed."""
        self._refresh()
        return self._snapshot

    @property
    def value(self) -> ContextValue:
        """The (state, dispatch) pair, cached under the same rule as ``state``."""
        self._refresh()
        return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def batch(self) -> Iterator[DispatchFacade]:
        """Defer observer notification until the outermost batch exits.

        Each dispatch inside the block still commits on its own; only the
        notification is coalesced.
        """
        self._batch_depth += 1
        try:
            yield self._dispatch
        finally:
            self._batch_depth -= 1
            if not self._batch_depth and self._pending and not self._notifying:
                self._flush()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Unmount: drop observers and stop accepting dispatches."""
        if self._closed:
            return
        self._closed = True
        self._listeners.clear()
        log("Recipes store closed", logging.DEBUG)

    def __enter__(self) -> "RecipesStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Dispatch plumbing
    # ------------------------------------------------------------------

    def _dispatch_status(self, action) -> None:
        self._apply("_status", status_reducer, action)

    def _dispatch_params(self, action) -> None:
        self._apply("_params", params_reducer, action)

    def _dispatch_list(self, action) -> None:
        self._apply("_list", list_reducer, action)

    def _apply(self, attr: str, reducer, action) -> None:
        if self._closed:
            logger.debug("Ignoring %s dispatched to a closed store", type(action).__name__)
            return

        current = getattr(self, attr)
        updated = reducer(current, action)
        if updated is current:
            return

        setattr(self, attr, updated)
        self._pending = True
        if self._batch_depth or self._notifying:
            # Picked up by the running flush or by the end of the batch.
            return
        self._flush()

    def _flush(self) -> None:
        self._notifying = True
        try:
            while self._pending:
                self._pending = False
                snapshot = self.state
                for listener in list(self._listeners):
                    try:
                        listener(snapshot)
                    except Exception:
                        # Remaining observers still get this round.
                        logger.exception("Store listener %r failed", listener)
        finally:
            self._notifying = False


def make_noop_dispatch() -> DispatchFacade:
    """A facade whose actions do nothing (used outside any mounted store)."""

    def noop(action) -> None:
        return None

    return DispatchFacade(noop, noop, noop)


__all__ = [
    "ContextValue",
    "DispatchFacade",
    "RecipesStore",
    "SliceDispatch",
    "make_noop_dispatch",
]
