"""Outcome of a single ``Router.route()`` call."""

from dataclasses import dataclass

from wayfinder.errors import MethodNotAllowed, NotFound
from wayfinder.routing.alias import Alias
from wayfinder.routing.route import Route


@dataclass(slots=True)
class RouterResult:
    """Matched route, forced alias, or allowed methods; or nothing at all.

    The router sets at most one of the three. Setting one does not
    clear the others.
    """

    route: Route | None = None
    alias: Alias | None = None
    allowed_methods: frozenset[str] | None = None

    def is_empty(self) -> bool:
        return self.route is None and self.alias is None and self.allowed_methods is None

    def raise_for_status(self) -> None:
        """Raise the HTTP error matching an unservable outcome.

        Raises ``NotFound`` for an empty result.
        Raises ``MethodNotAllowed`` when only allowed methods are set.
        A route or an alias returns silently.
        """
        if self.route is not None or self.alias is not None:
            return
        if self.allowed_methods is not None:
            raise MethodNotAllowed(self.allowed_methods)
        raise NotFound()
