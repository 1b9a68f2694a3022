"""Registry of routes and aliases.

Routes are keyed by id, aliases by both their canonical path and their
alias text. Loaders fill a container once before serving; the router
only reads it.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from wayfinder._internal.types import Handler, QueryValue
from wayfinder.errors import RouteNotFoundError
from wayfinder.http.url import Url
from wayfinder.routing.alias import Alias
from wayfinder.routing.route import Route

logger = logging.getLogger("wayfinder.container")


class RouteContainer:
    """Container for routes and aliases.

    Usage::

        container = RouteContainer(source="routes.json")
        container.set_route(container.create_route("/users/%id%", show_user, "user.show"))
        container.set_alias(container.create_alias("/users/1", "/me"))
        str(container.get_url("http://example.com", "user.show", {"id": 1}))
    """

    __slots__ = ("_aliases_by_alias", "_aliases_by_path", "_routes", "source")

    def __init__(self, source: str | None = None) -> None:
        self.source = source
        self._routes: dict[str, Route] = {}
        self._aliases_by_path: dict[str, Alias] = {}
        self._aliases_by_alias: dict[str, Alias] = {}

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(list(self._routes.values()))

    def __repr__(self) -> str:
        return (
            f"RouteContainer(source={self.source!r}, routes={len(self._routes)}, "
            f"aliases={len(self._aliases_by_path)})"
        )

    def set_route_container(self, container: "RouteContainer") -> None:
        """Copy every route and alias of *container* into this one.

        Entries of *container* replace entries with the same id or path.
        """
        for route in container.routes.values():
            self.set_route(route)
        for alias in container.aliases.values():
            self.set_alias(alias)

    # -- Routes --

    def create_route(
        self,
        path: str,
        callback: Handler,
        id: str | None = None,  # noqa: A002
        allowed_methods: str | Iterable[str] | None = None,
    ) -> Route:
        """Create a route tagged with this container's source. Not registered."""
        route = Route(path, callback, id, allowed_methods)
        route.source = self.source
        return route

    @property
    def routes(self) -> Mapping[str, Route]:
        """Registered routes by id, in insertion order."""
        return dict(self._routes)

    def get_route_by_id(self, id: str) -> Route | None:  # noqa: A002
        return self._routes.get(id)

    def get_route_by_path(self, path: str) -> Route | None:
        """Return the first registered route with *path*."""
        for route in self._routes.values():
            if route.path == path:
                return route
        return None

    def set_route(self, route: Route) -> None:
        """Register *route*, generating an id when it has none.

        A route with the id of a registered route replaces it.
        """
        if not route.id:
            route.id = self._next_id()
        elif route.id in self._routes:
            logger.debug("Route %s replaced by %s", route.id, route.path)

        self._routes[route.id] = route
        logger.debug("Route %s registered for %s", route.id, route.path)

    add_route = set_route

    def unset_route(self, route: Route) -> None:
        if route.id is not None and self._routes.pop(route.id, None) is not None:
            logger.debug("Route %s removed", route.id)

    def _next_id(self) -> str:
        # "i" + route count, skipping ids freed then reused by removals.
        index = len(self._routes)
        while f"i{index}" in self._routes:
            index += 1
        return f"i{index}"

    # -- Aliases --

    def create_alias(self, path: str, alias: str, is_forced: bool = False) -> Alias:
        """Create an alias tagged with this container's source. Not registered."""
        return Alias(path, alias, is_forced=is_forced, source=self.source)

    @property
    def aliases(self) -> Mapping[str, Alias]:
        """Registered aliases by canonical path."""
        return dict(self._aliases_by_path)

    def get_alias_by_path(self, path: str) -> Alias | None:
        return self._aliases_by_path.get(path)

    def get_alias_by_alias(self, alias: str) -> Alias | None:
        return self._aliases_by_alias.get(alias)

    def set_alias(self, alias: Alias) -> None:
        """Register *alias* under both its path and its alias text."""
        self._drop_alias(self._aliases_by_path.get(alias.path))
        self._drop_alias(self._aliases_by_alias.get(alias.alias))

        self._aliases_by_path[alias.path] = alias
        self._aliases_by_alias[alias.alias] = alias
        logger.debug("Alias %s registered for %s", alias.alias, alias.path)

    def unset_alias(self, alias: Alias) -> None:
        registered = self._aliases_by_path.get(alias.path)
        if registered is None or registered.alias != alias.alias:
            return
        self._drop_alias(registered)
        logger.debug("Alias %s removed", alias.alias)

    def _drop_alias(self, alias: Alias | None) -> None:
        # Keep both indexes pointing at the same aliases.
        if alias is None:
            return
        if self._aliases_by_path.get(alias.path) is alias:
            del self._aliases_by_path[alias.path]
        if self._aliases_by_alias.get(alias.alias) is alias:
            del self._aliases_by_alias[alias.alias]

    # -- Reverse routing --

    def get_url(
        self,
        base_url: str,
        id: str,  # noqa: A002
        arguments: Mapping[str, Any] | None = None,
        query_parameters: Mapping[str, QueryValue] | None = None,
        query_separator: str = "&",
    ) -> Url:
        """Build the URL of the route registered as *id*.

        Raises ``RouteNotFoundError`` if no route has that id.
        """
        route = self.get_route_by_id(id)
        if route is None:
            msg = f"Could not get the URL for route {id}: no route found for the provided id."
            raise RouteNotFoundError(msg)

        return route.get_url(base_url, arguments, query_parameters, query_separator)

    def get_url_alias(self, url: Url) -> str:
        """Render *url*, swapping its path for a forced alias when one exists."""
        path = url.get_path(parsed=True)

        alias = self._aliases_by_path.get(path)
        if alias is not None and alias.is_forced:
            path = alias.alias

        if path == "/" and url.base_url:
            path = ""

        query = url.query_string
        if query:
            path = f"{path}?{query}"

        return url.base_url + path
