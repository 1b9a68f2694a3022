"""Query string serialization.

Nested mappings render as bracketed keys, PHP style, so hosts that
parse ``filter[type]=general`` get their structure back::

    >>> serialize_query({"filter": {"type": "general", "published": 1}})
    'filter[published]=1&filter[type]=general'

Keys are sorted ascending at every nesting level, so the same
parameters always produce the same string.
"""

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import quote_plus

from wayfinder._internal.types import QueryValue


def _sort_key(key: object) -> tuple[int, Any]:
    # Integer keys sort numerically and before string keys.
    if isinstance(key, int) and not isinstance(key, bool):
        return (0, key)
    return (1, str(key))


def format_value(value: Any) -> str:
    """Form-encode a scalar (space becomes ``+``)."""
    if value is True:
        return "1"
    if value is False:
        return "0"
    return quote_plus(str(value))


def flatten_query(
    params: Mapping[Any, QueryValue], prefix: str | None = None
) -> Iterator[tuple[str, str]]:
    """Yield ``(key, encoded value)`` pairs with nested keys bracketed."""
    for name in sorted(params, key=_sort_key):
        value = params[name]
        if value is None:
            continue

        encoded_name = quote_plus(str(name))
        key = f"{prefix}[{encoded_name}]" if prefix else encoded_name

        if isinstance(value, Mapping):
            yield from flatten_query(value, key)
        elif isinstance(value, (list, tuple)):
            yield from flatten_query(dict(enumerate(value)), key)
        else:
            yield key, format_value(value)


def serialize_query(params: Mapping[Any, QueryValue] | None, separator: str = "&") -> str:
    """Serialize *params* into a query string without the leading ``?``."""
    if not params:
        return ""
    return separator.join(f"{key}={value}" for key, value in flatten_query(params))
