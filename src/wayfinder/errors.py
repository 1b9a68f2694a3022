"""Wayfinder exception hierarchy.

Shared across Route, Alias, RouteContainer, Router and Url so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


class RouterError(WayfinderError):
    """Raised when a route definition or a URL request is invalid.

    Definition errors surface at construction or mutation time, never
    while matching a request.
    """


class InvalidPathError(RouterError):
    """A route path is empty, not a string, or not a valid HTTP path."""


class InvalidIdError(RouterError):
    """A route id is empty or not a string."""


class InvalidAllowedMethodError(RouterError):
    """An allowed method entry is empty or not a string."""


class InvalidAliasError(RouterError):
    """An alias has an empty path or alias."""


class MissingArgumentError(RouterError):
    """A URL was requested without a value for one of its path parameters."""


class InvalidArgumentTypeError(RouterError):
    """A path argument value is not a scalar and cannot be put in a URL."""


class RouteNotFoundError(RouterError):
    """No route is registered under the requested id."""


@dataclass(frozen=True, slots=True)
class HTTPError(WayfinderError):
    """A routing outcome that cannot be served, as an HTTP status.

    ``RouterResult.raise_for_status()`` raises the subclasses below; a
    host catches ``HTTPError`` and copies ``status`` and ``headers``
    onto its response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: the router returned an empty result."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: the path matched, but none of the most specific routes accept the method.

    ``allowed`` is the method set the router reported; the ``Allow``
    header renders it sorted.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allowed = frozenset(allowed)
        allow_value = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail=detail or f"Method not allowed. Allowed methods: {allow_value}",
            headers=(("Allow", allow_value),),
        )
        object.__setattr__(self, "_allowed", allowed)

    @property
    def allowed(self) -> frozenset[str]:
        return self._allowed
