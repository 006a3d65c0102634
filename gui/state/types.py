"""Action vocabulary and state shapes for the recipes state container.

Three slices make up the state: ``status`` (loading/error/active id),
``params`` (search parameters) and ``list`` (current page of results).

Each slice accepts its own closed family of actions. The mapping from
(slice, action kind) to the action class, and therefore to the payload type,
lives in ``ACTION_TABLE``; the facade builds every action through it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypedDict,
    Union,
)

from recipe_search.models.vocabulary import (
    CuisineType,
    DietLabel,
    DishType,
    HealthLabel,
    ImageSize,
    MealType,
)


class ActionType(Enum):
    LOADING = "loading"
    ERROR = "error"
    ID = "id"
    SET = "set"
    UPDATE = "update"
    CLEAR = "clear"


class Slice(str, Enum):
    STATUS = "status"
    PARAMS = "params"
    LIST = "list"


# ---------------------------------------------------------------------------
# Params slice
# ---------------------------------------------------------------------------

ParamValue = Union[str, Sequence[str]]
# A single bound such as "300", or a (min, max) pair where either side may be None.
RangeValue = Union[str, Tuple[Optional[str], Optional[str]]]


class QueryParams(TypedDict, total=False):
    diet: Union[DietLabel, Sequence[DietLabel], str, Sequence[str]]
    health: Union[HealthLabel, Sequence[HealthLabel], str, Sequence[str]]
    cuisineType: Union[CuisineType, Sequence[CuisineType], str, Sequence[str]]
    mealType: Union[MealType, Sequence[MealType], str, Sequence[str]]
    dishType: Union[DishType, Sequence[DishType], str, Sequence[str]]
    calories: RangeValue
    time: RangeValue
    imageSize: Union[ImageSize, Sequence[ImageSize], str, Sequence[str]]
    random: bool
    field: ParamValue
    cont: ParamValue


# Declaration order doubles as the query-string key order.
PARAM_KEYS: Tuple[str, ...] = tuple(QueryParams.__annotations__)
RANGE_KEYS = frozenset({"calories", "time"})


# ---------------------------------------------------------------------------
# List slice
# ---------------------------------------------------------------------------


class RecipeLink(TypedDict):
    href: str
    title: str


class RecipeSummary(TypedDict):
    uri: str
    image: str
    label: str


class ResultItem(TypedDict):
    selfLink: RecipeLink
    recipe: RecipeSummary


# "from" is a keyword, so the list shape uses the functional TypedDict syntax.
HitListState = TypedDict(
    "HitListState",
    {
        "from": int,
        "to": int,
        "count": int,
        "hits": List[ResultItem],
        "next": RecipeLink,
    },
)
HitListUpdate = TypedDict(
    "HitListUpdate",
    {
        "from": int,
        "to": int,
        "count": int,
        "hits": List[ResultItem],
        "next": RecipeLink,
    },
    total=False,
)

LIST_KEYS: Tuple[str, ...] = ("from", "to", "count", "hits", "next")


def empty_list() -> HitListState:
    """Zero value of the list slice."""
    return {
        "from": 0,
        "to": 0,
        "count": 0,
        "hits": [],
        "next": {"href": "", "title": ""},
    }


# ---------------------------------------------------------------------------
# Status slice and snapshot
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StatusState:
    loading: bool = False
    error: Optional[str] = None
    active_id: Optional[str] = None


@dataclass(frozen=True)
class Snapshot:
    """Externally visible state: status fields flattened next to params and list."""

    loading: bool
    error: Optional[str]
    active_id: Optional[str]
    params: Mapping[str, Any]
    list: HitListState

    @classmethod
    def compose(
        cls, status: StatusState, params: Mapping[str, Any], hit_list: HitListState
    ) -> "Snapshot":
        return cls(
            loading=status.loading,
            error=status.error,
            active_id=status.active_id,
            params=params,
            list=hit_list,
        )


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadingAction:
    kind: ClassVar[ActionType] = ActionType.LOADING
    payload: bool


@dataclass(frozen=True)
class ErrorAction:
    kind: ClassVar[ActionType] = ActionType.ERROR
    payload: Optional[str] = None


@dataclass(frozen=True)
class IdAction:
    kind: ClassVar[ActionType] = ActionType.ID
    payload: Optional[str] = None


@dataclass(frozen=True)
class ParamsSet:
    kind: ClassVar[ActionType] = ActionType.SET
    payload: QueryParams


@dataclass(frozen=True)
class ParamsUpdate:
    kind: ClassVar[ActionType] = ActionType.UPDATE
    payload: QueryParams


@dataclass(frozen=True)
class ParamsClear:
    kind: ClassVar[ActionType] = ActionType.CLEAR
    payload: None = None


@dataclass(frozen=True)
class ListSet:
    kind: ClassVar[ActionType] = ActionType.SET
    payload: HitListState


@dataclass(frozen=True)
class ListUpdate:
    kind: ClassVar[ActionType] = ActionType.UPDATE
    payload: HitListUpdate


@dataclass(frozen=True)
class ListClear:
    kind: ClassVar[ActionType] = ActionType.CLEAR
    payload: None = None


StatusAction = Union[LoadingAction, ErrorAction, IdAction]
ParamsAction = Union[ParamsSet, ParamsUpdate, ParamsClear]
ListAction = Union[ListSet, ListUpdate, ListClear]
Action = Union[StatusAction, ParamsAction, ListAction]

ACTION_TABLE: Dict[Tuple[Slice, ActionType], Type[Any]] = {
    (Slice.STATUS, ActionType.LOADING): LoadingAction,
    (Slice.STATUS, ActionType.ERROR): ErrorAction,
    (Slice.STATUS, ActionType.ID): IdAction,
    (Slice.PARAMS, ActionType.SET): ParamsSet,
    (Slice.PARAMS, ActionType.UPDATE): ParamsUpdate,
    (Slice.PARAMS, ActionType.CLEAR): ParamsClear,
    (Slice.LIST, ActionType.SET): ListSet,
    (Slice.LIST, ActionType.UPDATE): ListUpdate,
    (Slice.LIST, ActionType.CLEAR): ListClear,
}


def make_action(slice_: Slice, kind: ActionType, payload: Any = None) -> Action:
    """Build the action for ``kind`` against ``slice_``.

    Raises:
        KeyError: if the pair is not part of the vocabulary (e.g. SET on status)
    """
    action_cls = ACTION_TABLE[(slice_, kind)]
    if kind is ActionType.CLEAR:
        return action_cls()
    return action_cls(payload)
