"""In-process router standing in for the browser address bar.

Keeps a history stack of locations, resolves paths against the app's route
table and lets the URL synchronizer replace the query string of the current
location.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from gui.utils.logging import logger

# (pattern, view name); ":id" segments capture a path parameter.
ROUTES: Tuple[Tuple[str, str], ...] = (
    ("/", "home"),
    ("/recipes", "recipes"),
    ("/recipes/:id", "recipe"),
)


def _compile(pattern: str) -> "re.Pattern[str]":
    regex = re.sub(r":(\w+)", r"(?P<\1>[^/]+)", pattern)
    return re.compile(f"^{regex}$")


_COMPILED = tuple((_compile(pattern), name) for pattern, name in ROUTES)


@dataclass(frozen=True)
class RouteMatch:
    name: str
    params: Dict[str, str] = field(default_factory=dict)


def normalize_path(path: str) -> str:
    return "/" + path.strip("/")


def match_route(path: str) -> Optional[RouteMatch]:
    """Resolve ``path`` against the route table; ``None`` for unknown paths."""
    path = normalize_path(path)
    for regex, name in _COMPILED:
        found = regex.match(path)
        if found:
            return RouteMatch(name=name, params=found.groupdict())
    return None


@dataclass(frozen=True)
class Location:
    path: str = "/"
    query: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def parse(cls, url: str) -> "Location":
        parts = urlsplit(url)
        return cls(
            path=normalize_path(parts.path or "/"),
            query=tuple(parse_qsl(parts.query, keep_blank_values=True)),
        )

    @property
    def search(self) -> str:
        return f"?{urlencode(self.query)}" if self.query else ""

    @property
    def href(self) -> str:
        return self.path + self.search

    def get_all(self, key: str) -> List[str]:
        return [value for name, value in self.query if name == key]


class Router:
    """History stack of locations with push/replace semantics."""

    def __init__(self, url: str = "/"):
        self._history: List[Location] = [Location.parse(url)]
        self._index = 0
        self._listeners: List[Callable[[Location], None]] = []

    @property
    def location(self) -> Location:
        return self._history[self._index]

    @property
    def history(self) -> List[Location]:
        return list(self._history[: self._index + 1])

    def subscribe(self, listener: Callable[[Location], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def navigate(self, to: str, replace: bool = False) -> Location:
        return self._commit(Location.parse(to), replace)

    def set_search_params(
        self, pairs: Iterable[Tuple[str, str]], replace: bool = True
    ) -> Location:
        """Replace the whole query string of the current path."""
        location = Location(path=self.location.path, query=tuple(pairs))
        if location == self.location:
            return location
        return self._commit(location, replace)

    def back(self) -> Location:
        if self._index > 0:
            self._index -= 1
            self._notify()
        return self.location

    def forward(self) -> Location:
        if self._index < len(self._history) - 1:
            self._index += 1
            self._notify()
        return self.location

    def _commit(self, location: Location, replace: bool) -> Location:
        if replace:
            self._history[self._index] = location
        else:
            del self._history[self._index + 1 :]
            self._history.append(location)
            self._index += 1
        logger.debug("Location -> %s", location.href)
        self._notify()
        return location

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.location)
