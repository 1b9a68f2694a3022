"""Route definition: a path pattern, its callback and its constraints.

A Route registered in a RouteContainer is a template. The router never
binds arguments on it; every match gets a ``clone()`` carrying its own
arguments.
"""

import copy
import inspect
from collections.abc import Iterable, Mapping
from typing import Any

from wayfinder._internal.types import SCALAR_TYPES, Arguments, Handler, QueryValue
from wayfinder.errors import (
    InvalidAllowedMethodError,
    InvalidArgumentTypeError,
    InvalidIdError,
    InvalidPathError,
    MissingArgumentError,
)
from wayfinder.http.url import Url
from wayfinder.routing.params import (
    PathSegment,
    is_valid_path,
    normalize_path,
    parse_path,
    split_tokens,
)


def _callback_name(callback: Handler) -> str:
    """Readable form of a callback for debug output."""
    if isinstance(callback, (tuple, list)) and len(callback) == 2:
        owner, method = callback
        if isinstance(owner, str):
            return f"{owner}::{method}"
        if inspect.isclass(owner):
            return f"{owner.__qualname__}::{method}"
        return f"{type(owner).__qualname__}->{method}"
    if inspect.ismethod(callback):
        return f"{type(callback.__self__).__qualname__}->{callback.__name__}"
    qualname = getattr(callback, "__qualname__", None)
    if qualname is not None:
        return qualname
    return str(callback)


class Route:
    """A route definition.

    Usage::

        route = Route("/users/%id%", show_user, id="user.show", allowed_methods="GET")
        route.is_dynamic = False
        str(route.get_url("http://example.com", {"id": 42}))
        # "http://example.com/users/42"
    """

    __slots__ = (
        "_allowed_methods",
        "_arguments",
        "_id",
        "_path",
        "_permissions",
        "_predefined_arguments",
        "_segments",
        "base_url",
        "callback",
        "is_dynamic",
        "locale",
        "source",
    )

    def __init__(
        self,
        path: str,
        callback: Handler,
        id: str | None = None,  # noqa: A002
        allowed_methods: str | Iterable[str] | None = None,
    ) -> None:
        if not is_valid_path(path):
            msg = f"Could not set the path of the route: {path!r} is not a valid HTTP path."
            raise InvalidPathError(msg)

        self._path = normalize_path(path)
        self._segments = parse_path(self._path)
        self.callback = callback
        self._id: str | None = None
        self.id = id
        self._allowed_methods: frozenset[str] | None = None
        self.allowed_methods = allowed_methods
        self.is_dynamic = False
        self._arguments: Arguments | None = None
        self._predefined_arguments: Arguments | None = None
        self._permissions: list[str] | None = None
        self.locale: str | None = None
        self.base_url: str | None = None
        self.source: str | None = None

    def __str__(self) -> str:
        arguments = {
            **self.predefined_arguments,
            **self.arguments,
        }
        rendered = ", ".join(repr(value) for value in arguments.values())
        methods = "|".join(sorted(self._allowed_methods)) if self._allowed_methods else "*"
        kind = "d" if self.is_dynamic else "s"
        return f"{self._path} {_callback_name(self.callback)}({rendered}) {kind}[{methods}]"

    def __repr__(self) -> str:
        return f"Route({self._path!r}, id={self._id!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def _state(self) -> tuple[Any, ...]:
        return (
            self._path,
            self.callback,
            self._id,
            self._allowed_methods,
            self.is_dynamic,
            self.arguments,
            self.predefined_arguments,
            self._permissions,
            self.locale,
            self.base_url,
            self.source,
        )

    # -- Path --

    @property
    def path(self) -> str:
        return self._path

    @property
    def tokens(self) -> list[str]:
        """The ``/``-separated tokens of the path. Empty for the root."""
        return split_tokens(self._path)

    @property
    def segments(self) -> list[PathSegment]:
        """Parsed tokens: literals and ``%name%`` parameters."""
        return self._segments

    @property
    def parameter_names(self) -> list[str]:
        return [seg.param_name for seg in self.segments if seg.param_name is not None]

    # -- Identity --

    @property
    def id(self) -> str | None:  # noqa: A003
        return self._id

    @id.setter
    def id(self, value: str | None) -> None:  # noqa: A003
        if value is not None and (not isinstance(value, str) or value == ""):
            msg = f"Could not set the id of route {self._path}: id is empty or not a string."
            raise InvalidIdError(msg)
        self._id = value

    # -- Methods --

    @property
    def allowed_methods(self) -> frozenset[str] | None:
        """Upper-cased allowed methods, or ``None`` when every method is allowed."""
        return self._allowed_methods

    @allowed_methods.setter
    def allowed_methods(self, methods: str | Iterable[str] | None) -> None:
        self.set_allowed_methods(methods)

    def set_allowed_methods(self, methods: str | Iterable[str] | None) -> None:
        """Restrict the route to *methods*. Empty or ``None`` allows all."""
        if not methods:
            self._allowed_methods = None
            return

        if isinstance(methods, str):
            methods = [methods]
        elif not isinstance(methods, Iterable):
            msg = f"Could not set the allowed methods of route {self._path}: invalid methods provided."
            raise InvalidAllowedMethodError(msg)

        normalized: set[str] = set()
        for method in methods:
            if not isinstance(method, str) or not method.strip():
                msg = f"Could not set the allowed methods of route {self._path}: invalid method {method!r}."
                raise InvalidAllowedMethodError(msg)
            normalized.add(method.strip().upper())

        self._allowed_methods = frozenset(normalized)

    def is_method_allowed(self, method: str) -> bool:
        if self._allowed_methods is None:
            return True
        return method.upper() in self._allowed_methods

    # -- Arguments --

    @property
    def arguments(self) -> Arguments:
        """Arguments bound by the last match. Never ``None``."""
        if self._arguments is None:
            return {}
        return self._arguments

    @arguments.setter
    def arguments(self, arguments: Mapping[str | int, Any] | None) -> None:
        self._arguments = dict(arguments) if arguments is not None else None

    def get_argument(self, name: str | int, default: Any = None) -> Any:
        if self._arguments is None or self._arguments.get(name) is None:
            return default
        return self._arguments[name]

    @property
    def predefined_arguments(self) -> Arguments:
        """Fixed arguments passed to the callback besides the bound ones."""
        if self._predefined_arguments is None:
            return {}
        return self._predefined_arguments

    @predefined_arguments.setter
    def predefined_arguments(self, arguments: Mapping[str | int, Any] | None) -> None:
        self._predefined_arguments = dict(arguments) if arguments is not None else None

    # -- Metadata --

    @property
    def permissions(self) -> list[str] | None:
        return self._permissions

    @permissions.setter
    def permissions(self, permissions: str | Iterable[str] | None) -> None:
        if permissions is None:
            self._permissions = None
        elif isinstance(permissions, str):
            self._permissions = [permissions]
        else:
            self._permissions = list(permissions)

    # -- Reverse routing --

    def get_url(
        self,
        base_url: str,
        arguments: Mapping[str, Any] | None = None,
        query_parameters: Mapping[str, QueryValue] | None = None,
        query_separator: str = "&",
    ) -> Url:
        """Build the URL of this route.

        Every parameter token needs a scalar value in *arguments*. The
        route's own ``base_url``, when set, replaces the one passed in.

        Raises ``MissingArgumentError`` if a parameter has no value.
        Raises ``InvalidArgumentTypeError`` if a value is not a scalar.
        """
        arguments = arguments or {}
        for name in self.parameter_names:
            value = arguments.get(name)
            if value is None:
                msg = f"Could not get the URL of route {self._path}: argument {name} is not set."
                raise MissingArgumentError(msg)
            if not isinstance(value, SCALAR_TYPES):
                msg = (
                    f"Could not get the URL of route {self._path}: "
                    f"argument {name} is not a scalar value."
                )
                raise InvalidArgumentTypeError(msg)

        if self.base_url:
            base_url = self.base_url

        return Url(base_url, self._path, arguments, query_parameters, query_separator)

    # -- Copying --

    def clone(self) -> "Route":
        """Return a copy that can be bound without touching this route.

        Containers are copied; the callback is shared.
        """
        route = copy.copy(self)
        route._arguments = copy.deepcopy(self._arguments)
        route._predefined_arguments = copy.deepcopy(self._predefined_arguments)
        route._permissions = list(self._permissions) if self._permissions is not None else None
        return route
