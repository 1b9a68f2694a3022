"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from wayfinder._internal.types import Handler


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(default_callback=home)
    """

    # Callback served for "/" when no registered route matches it
    default_callback: Handler | None = None

    # Separator between query parameters in URLs built through the router
    query_separator: str = "&"
