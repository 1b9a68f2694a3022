"""Alias: a short path standing in for a canonical one.

Requests for the alias are served by the canonical path's route. A
forced alias goes further: requests for the canonical path are answered
with a redirect signal pointing at the alias.
"""

from wayfinder.errors import InvalidAliasError


def _check(value: object, field: str) -> str:
    if not isinstance(value, str) or not value:
        msg = f"Could not set the {field} of the alias: provided {field} is empty or not a string."
        raise InvalidAliasError(msg)
    return value


class Alias:
    """A ``path`` / ``alias`` pair.

    ``path`` is the canonical path (``/path/to/contact``), ``alias`` the
    short form (``/ptc``). Both stay non-empty strings for the life of
    the alias; ``is_forced`` and ``source`` are free to change.
    """

    __slots__ = ("_alias", "_path", "is_forced", "source")

    def __init__(
        self,
        path: str,
        alias: str,
        is_forced: bool = False,
        source: str | None = None,
    ) -> None:
        self.path = path
        self.alias = alias
        self.is_forced = is_forced
        self.source = source

    def __repr__(self) -> str:
        return (
            f"Alias(path={self._path!r}, alias={self._alias!r}, "
            f"is_forced={self.is_forced!r}, source={self.source!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alias):
            return NotImplemented
        return (self._path, self._alias, self.is_forced, self.source) == (
            other._path,
            other._alias,
            other.is_forced,
            other.source,
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def path(self) -> str:
        return self._path

    @path.setter
    def path(self, value: str) -> None:
        self._path = _check(value, "path")

    @property
    def alias(self) -> str:
        return self._alias

    @alias.setter
    def alias(self, value: str) -> None:
        self._alias = _check(value, "alias")
