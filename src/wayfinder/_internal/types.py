"""Shared type aliases used across wayfinder modules."""

from typing import Any, TypeAlias

# Route callback: opaque to the router. A function, a (class, method)
# pair, a bound method, a dotted string... whatever the host dispatches on.
Handler: TypeAlias = Any

# Bound path arguments: named parameters keyed by str, dynamic tail
# segments keyed by their position (0, 1, ...), in insertion order.
Arguments: TypeAlias = dict[str | int, Any]

# A query parameter value: a scalar or an arbitrarily nested mapping,
# rendered as bracketed keys (``filter[type]=general``).
QueryValue: TypeAlias = Any

# Scalars that may be put into a URL path.
SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool)
