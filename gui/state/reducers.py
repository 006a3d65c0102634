"""Pure reducers for the three state slices.

Every reducer maps (current slice value, action) to the next slice value.
Unmatched action kinds return the very same object so consumers can use
identity as the change signal.
"""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping

from gui.state.types import (
    LIST_KEYS,
    PARAM_KEYS,
    ActionType,
    HitListState,
    ListAction,
    ParamsAction,
    StatusAction,
    StatusState,
    empty_list,
)
from gui.utils.logging import logger

# Shared empty params value; read-only so CLEAR can hand out the same object.
EMPTY_PARAMS: Mapping[str, Any] = MappingProxyType({})


def _known(payload: Mapping[str, Any], keys, slice_name: str) -> dict:
    accepted = {key: value for key, value in payload.items() if key in keys}
    if len(accepted) != len(payload):
        dropped = sorted(set(payload) - set(keys))
        logger.warning("Ignoring unknown %s keys: %s", slice_name, ", ".join(dropped))
    return accepted


def status_reducer(state: StatusState, action: StatusAction) -> StatusState:
    """Each status action replaces exactly one field."""
    kind = getattr(action, "kind", None)

    if kind is ActionType.LOADING:
        return dataclasses.replace(state, loading=action.payload)

    if kind is ActionType.ERROR:
        return dataclasses.replace(state, error=action.payload)

    if kind is ActionType.ID:
        return dataclasses.replace(state, active_id=action.payload)

    return state


def params_reducer(state: Mapping[str, Any], action: ParamsAction) -> Mapping[str, Any]:
    """SET replaces, UPDATE shallow-merges, CLEAR resets to the empty mapping."""
    kind = getattr(action, "kind", None)

    if kind is ActionType.SET:
        return _known(action.payload or {}, PARAM_KEYS, "params")

    if kind is ActionType.UPDATE:
        return {**state, **_known(action.payload or {}, PARAM_KEYS, "params")}

    if kind is ActionType.CLEAR:
        return EMPTY_PARAMS

    return state


def list_reducer(state: HitListState, action: ListAction) -> HitListState:
    """Same three verbs as params, applied to top-level list fields only."""
    kind = getattr(action, "kind", None)

    if kind is ActionType.SET:
        return {**empty_list(), **_known(action.payload or {}, LIST_KEYS, "list")}

    if kind is ActionType.UPDATE:
        return {**state, **_known(action.payload or {}, LIST_KEYS, "list")}

    if kind is ActionType.CLEAR:
        return empty_list()

    return state
