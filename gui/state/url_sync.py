"""Mirror the params slice into the address bar's query string.

The synchronizer is an observer of the store, not part of any reducer: after a
params change has been committed it re-encodes the complete params mapping and
asks the router to replace the current query string with it. The direction is
state -> URL only; the address bar is never read back into the store.

Encoding rules:
  * scalars are written literally, enums by value, booleans as true/false
  * sequences become repeated keys (``health=vegan&health=soy-free``)
  * ``None`` and empty sequences omit the key
  * calorie/time ranges use ``MIN-MAX``, ``MIN+`` or ``MAX``
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Tuple

from gui.state.store import RecipesStore
from gui.state.types import PARAM_KEYS, RANGE_KEYS, Snapshot
from gui.utils.logging import logger

QueryPairs = List[Tuple[str, str]]


def _scalar(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_range(value: Any) -> Optional[str]:
    """Encode a calorie/time value; ``None`` means "leave the key out"."""
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise ValueError(f"Range must be a (min, max) pair, got {value!r}")
        low, high = (_scalar(bound) or None for bound in value)
        if low and high:
            return f"{low}-{high}"
        if low:
            return f"{low}+"
        return high
    return _scalar(value) or None


def encode_params(params: Mapping[str, Any]) -> QueryPairs:
    """Flatten a params mapping into ordered (key, value) query pairs."""
    pairs: QueryPairs = []
    for key in PARAM_KEYS:
        if key not in params:
            continue
        value = params[key]

        if key in RANGE_KEYS:
            encoded = encode_range(value)
            if encoded is not None:
                pairs.append((key, encoded))
            continue

        if isinstance(value, (list, tuple, set, frozenset)):
            items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
            for item in items:
                encoded = _scalar(item)
                if encoded is not None:
                    pairs.append((key, encoded))
            continue

        encoded = _scalar(value)
        if encoded is not None:
            pairs.append((key, encoded))
    return pairs


class UrlSynchronizer:
    """Write the params slice to ``router`` whenever it changes.

    ``router`` only needs a ``set_search_params(pairs, replace=True)`` method.
    """

    def __init__(self, store: RecipesStore, router, sync_on_attach: bool = True):
        self.store = store
        self.router = router
        self.sync_on_attach = sync_on_attach
        self._last_params: Optional[Mapping[str, Any]] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> None:
        if self.attached:
            return
        self._unsubscribe = self.store.subscribe(self._on_commit)
        params = self.store.state.params
        if self.sync_on_attach:
            self._write(params)
        else:
            self._last_params = params

    def sync(self) -> None:
        """Write the current params now, changed or not."""
        self._write(self.store.state.params)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_commit(self, snapshot: Snapshot) -> None:
        if snapshot.params is self._last_params:
            return
        self._write(snapshot.params)

    def _write(self, params: Mapping[str, Any]) -> None:
        self._last_params = params
        pairs = encode_params(params)
        logger.debug("Syncing %d params to the query string", len(pairs))
        self.router.set_search_params(pairs, replace=True)
