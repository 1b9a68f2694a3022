"""Wayfinder: request routing and URL building for Python web applications.

Resolves a (method, path, base URL) request to the most specific
registered route, binding its path arguments, and builds URLs back
from route ids.

Basic usage::

    from wayfinder import RouteContainer, Router

    container = RouteContainer()
    container.set_route(container.create_route("/users/%id%", show_user, "user.show", "GET"))

    router = Router(container)
    result = router.route("GET", "/users/42")
    result.route.arguments  # {"id": "42"}

    str(container.get_url("http://example.com", "user.show", {"id": 42}))
    # "http://example.com/users/42"
"""

__version__ = "0.1.0"
__all__ = [
    "Alias",
    "HTTPError",
    "InvalidAliasError",
    "InvalidAllowedMethodError",
    "InvalidArgumentTypeError",
    "InvalidIdError",
    "InvalidPathError",
    "MethodNotAllowed",
    "MissingArgumentError",
    "NotFound",
    "Route",
    "RouteContainer",
    "RouteNotFoundError",
    "Router",
    "RouterConfig",
    "RouterError",
    "RouterResult",
    "Url",
    "WayfinderError",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Alias": "wayfinder.routing.alias",
    "HTTPError": "wayfinder.errors",
    "InvalidAliasError": "wayfinder.errors",
    "InvalidAllowedMethodError": "wayfinder.errors",
    "InvalidArgumentTypeError": "wayfinder.errors",
    "InvalidIdError": "wayfinder.errors",
    "InvalidPathError": "wayfinder.errors",
    "MethodNotAllowed": "wayfinder.errors",
    "MissingArgumentError": "wayfinder.errors",
    "NotFound": "wayfinder.errors",
    "Route": "wayfinder.routing.route",
    "RouteContainer": "wayfinder.routing.container",
    "RouteNotFoundError": "wayfinder.errors",
    "Router": "wayfinder.routing.router",
    "RouterConfig": "wayfinder.config",
    "RouterError": "wayfinder.errors",
    "RouterResult": "wayfinder.routing.result",
    "Url": "wayfinder.http.url",
    "WayfinderError": "wayfinder.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
