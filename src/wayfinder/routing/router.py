"""Router: resolves a request to a route of a RouteContainer.

The router keeps no state between calls. Each ``route()`` reads the
container, allocates a fresh RouterResult and, on a match, a clone of
the winning route carrying the bound arguments. Registered routes are
never modified, so concurrent calls over an unchanging container are
safe.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from wayfinder._internal.types import Arguments, Handler, QueryValue
from wayfinder.config import RouterConfig
from wayfinder.http.url import Url
from wayfinder.routing.container import RouteContainer
from wayfinder.routing.params import PathSegment, normalize_path, split_tokens
from wayfinder.routing.result import RouterResult
from wayfinder.routing.route import Route

logger = logging.getLogger("wayfinder.router")


def normalize_request_path(path: str) -> str:
    """Strip the query string and any trailing slash from a request path.

    An empty remainder, as in ``?only_query``, is the root.
    """
    path = path.split("?", 1)[0]
    return normalize_path(path)


def match_segments(
    tokens: list[str],
    segments: list[PathSegment],
    is_dynamic: bool,
) -> Arguments | None:
    """Match request *tokens* against the *segments* of a route.

    Returns the bound arguments, or ``None`` when the route does not
    match. Parameters bind by name; for a dynamic route, request tokens
    past the route's own are appended by position (0, 1, ...).
    """
    if len(tokens) < len(segments):
        return None

    arguments: Arguments = {}
    for token, segment in zip(tokens, segments):
        if segment.is_param:
            arguments[segment.param_name] = token
        elif segment.value != token:
            return None

    if not is_dynamic:
        if len(tokens) != len(segments):
            return None
        return arguments

    for index, token in enumerate(tokens[len(segments):]):
        arguments[index] = token

    return arguments


class Router:
    """Matches (method, path, base URL) requests against a RouteContainer.

    Usage::

        router = Router(container, RouterConfig(default_callback=home))
        result = router.route("GET", "/users/42?tab=posts", "http://example.com")
        if result.route is not None:
            result.route.callback(**result.route.arguments)
    """

    __slots__ = ("_config", "_container")

    def __init__(self, container: RouteContainer, config: RouterConfig | None = None) -> None:
        self._container = container
        self._config = config or RouterConfig()

    @property
    def route_container(self) -> RouteContainer:
        return self._container

    @route_container.setter
    def route_container(self, container: RouteContainer) -> None:
        self._container = container

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def default_callback(self) -> Handler | None:
        """Callback served for ``/`` when no registered route matches it."""
        return self._config.default_callback

    @default_callback.setter
    def default_callback(self, callback: Handler | None) -> None:
        self._config = replace(self._config, default_callback=callback)

    def route(self, method: str, path: str, base_url: str | None = None) -> RouterResult:
        """Resolve a request.

        Never raises: a miss is an empty result, a path served only for
        other methods is a result carrying ``allowed_methods``, and a
        canonical path with a forced alias is a result carrying that
        alias.
        """
        path = normalize_request_path(path)

        alias = self._container.get_alias_by_alias(path)
        if alias is not None:
            logger.debug("Alias %s resolved to %s", path, alias.path)
            path = normalize_request_path(alias.path)
        else:
            alias = self._container.get_alias_by_path(path)
            if alias is not None and alias.is_forced:
                logger.debug("Path %s forced to alias %s", path, alias.alias)
                return RouterResult(alias=alias)

        result = self._match(method, path, base_url)

        if result.is_empty() and self._config.default_callback is not None and path == "/":
            logger.debug("No route for /, using the default callback")
            result.route = Route("/", self._config.default_callback)

        return result

    # -- Reverse routing --

    def get_url(
        self,
        base_url: str,
        id: str,  # noqa: A002
        arguments: Mapping[str, Any] | None = None,
        query_parameters: Mapping[str, QueryValue] | None = None,
    ) -> Url:
        """Build the URL of route *id* with the configured query separator.

        Raises ``RouteNotFoundError`` if no route has that id.
        """
        return self._container.get_url(
            base_url, id, arguments, query_parameters, self._config.query_separator
        )

    def get_url_alias(
        self,
        base_url: str,
        id: str,  # noqa: A002
        arguments: Mapping[str, Any] | None = None,
        query_parameters: Mapping[str, QueryValue] | None = None,
    ) -> str:
        """Like ``get_url()``, rendered through the container's forced aliases."""
        url = self.get_url(base_url, id, arguments, query_parameters)
        return self._container.get_url_alias(url)

    def _match(self, method: str, path: str, base_url: str | None) -> RouterResult:
        tokens = split_tokens(path)

        candidates: list[tuple[Route, Arguments]] = []
        for route in self._container:
            if base_url and route.base_url and route.base_url != base_url:
                continue

            arguments = match_segments(tokens, route.segments, route.is_dynamic)
            if arguments is not None:
                candidates.append((route, arguments))

        if not candidates:
            logger.debug("No route matches %s %s", method, path)
            return RouterResult()

        # The fewest bound arguments is the most literal match. Among
        # equals, a route scoped to the request's base URL goes first,
        # then registration order.
        fewest = min(len(arguments) for _, arguments in candidates)
        best = [candidate for candidate in candidates if len(candidate[1]) == fewest]
        best.sort(key=lambda candidate: not (base_url and candidate[0].base_url == base_url))

        allowed: set[str] = set()
        for route, arguments in best:
            if route.is_method_allowed(method):
                matched = route.clone()
                matched.arguments = arguments
                logger.debug("Route %s matches %s %s", route.id, method, path)
                return RouterResult(route=matched)

            allowed.update(route.allowed_methods or ())

        logger.debug("Method %s not allowed for %s, allowed: %s", method, path, sorted(allowed))
        return RouterResult(allowed_methods=frozenset(allowed))
