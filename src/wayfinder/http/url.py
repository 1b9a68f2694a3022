"""Modifiable URL built from a base URL, a path template and parameters.

Usage::

    url = Url("http://example.com", "/data/%id%/%action%", {"id": 1, "action": "edit"})
    url.set_query_parameter("format", "json")
    str(url)  # "http://example.com/data/1/edit?format=json"

Rendering is tolerant: a parameter token without a value is left in
place as ``%name%``. Strict rendering, which refuses incomplete
arguments, lives in ``Route.get_url()``.
"""

from collections.abc import Mapping
from typing import Any

from wayfinder._internal.types import QueryValue
from wayfinder.http.query import format_value, serialize_query
from wayfinder.routing.params import normalize_path, parameter_name, split_tokens


class Url:
    """A URL whose arguments and query parameters can change after creation."""

    __slots__ = ("_arguments", "_base_url", "_path", "_query_parameters", "query_separator")

    def __init__(
        self,
        base_url: str,
        path: str | None = "/",
        arguments: Mapping[str, Any] | None = None,
        query_parameters: Mapping[str, QueryValue] | None = None,
        query_separator: str = "&",
    ) -> None:
        self._base_url = base_url or ""
        self._path = normalize_path(path or "/")
        self._arguments: dict[str, Any] = dict(arguments or {})
        self._query_parameters: dict[str, QueryValue] = {}
        self.query_separator = query_separator

        for name, value in (query_parameters or {}).items():
            self.set_query_parameter(name, value)

    def __str__(self) -> str:
        query = serialize_query(self._query_parameters, self.query_separator)
        if query:
            query = "?" + query
        path = self._render_path()
        if not path and not self._base_url:
            path = "/"
        return self._base_url + path + query

    def __repr__(self) -> str:
        return f"Url({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Url):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_path(self, parsed: bool = False) -> str:
        """Return the path template, or the substituted path when *parsed*."""
        if parsed:
            return self._render_path() or "/"
        return self._path

    @property
    def path(self) -> str:
        return self._path

    # -- Arguments --

    def set_argument(self, name: str, value: Any) -> None:
        """Set a path argument. ``None`` removes it."""
        if value is None:
            self._arguments.pop(name, None)
        else:
            self._arguments[name] = value

    def get_argument(self, name: str, default: Any = None) -> Any:
        return self._arguments.get(name, default)

    @property
    def arguments(self) -> dict[str, Any]:
        return dict(self._arguments)

    # -- Query parameters --

    def set_query_parameter(self, name: str, value: QueryValue) -> None:
        """Set a query parameter. ``None`` removes it instead of rendering ``name=``."""
        if value is None:
            self._query_parameters.pop(name, None)
        else:
            self._query_parameters[name] = value

    def get_query_parameter(self, name: str, default: QueryValue = None) -> QueryValue:
        return self._query_parameters.get(name, default)

    @property
    def query_parameters(self) -> dict[str, QueryValue]:
        return dict(self._query_parameters)

    @property
    def query_string(self) -> str:
        """The serialized query, without the leading ``?``."""
        return serialize_query(self._query_parameters, self.query_separator)

    def _render_path(self) -> str:
        parts: list[str] = []
        for token in split_tokens(self._path):
            name = parameter_name(token)
            if name is None or self._arguments.get(name) is None:
                parts.append(token)
            else:
                parts.append(format_value(self._arguments[name]))

        if not parts:
            return ""
        return "/" + "/".join(parts)
