"""Path grammar, normalization and token parsing.

Route paths are ``/``-separated tokens. A token of the exact form
``%name%`` is a parameter capturing one request segment; any other
token is a literal that must match byte for byte::

    "/users"             -> [PathSegment("users")]
    "/users/%id%"        -> [PathSegment("users"), PathSegment("%id%", is_param=True, param_name="id")]
    "/"                  -> []
"""

import re
from dataclasses import dataclass

# One HTTP path segment:
#   (([a-zA-Z0-9]|[$+_.-]|%|[!*'(),])|(%[0-9A-Fa-f][0-9A-Fa-f])|[;:@&=])*
# A bare "%" is allowed (parameter tokens), so the percent-encoded octet
# alternative adds nothing and the segment folds into one character
# class. Same language, no backtracking blowup on long invalid paths.
_HTTP_SEGMENT = r"[a-zA-Z0-9$+_.\-%!*'(),;:@&=]*"
HTTP_PATH = re.compile(_HTTP_SEGMENT + r"(?:/" + _HTTP_SEGMENT + r")*")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed token of a route path.

    Literal:   ``users``  (is_param=False)
    Parameter: ``%id%``   (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


def is_valid_path(path: object) -> bool:
    """Check whether *path* is a non-empty string in the HTTP path grammar."""
    if not isinstance(path, str) or path == "":
        return False
    return HTTP_PATH.fullmatch(path) is not None


def normalize_path(path: str) -> str:
    """Return *path* with exactly one leading slash and no trailing slash.

    The root path stays ``/``; ``///admin/`` becomes ``/admin``.
    """
    return "/" + path.strip("/")


def split_tokens(path: str) -> list[str]:
    """Split a normalized path into its tokens. The root has none."""
    if path == "/":
        return []
    return path[1:].split("/")


def parameter_name(token: str) -> str | None:
    """Return the parameter name if *token* is ``%name%``, else ``None``."""
    if len(token) > 2 and token[0] == "%" and token[-1] == "%":
        return token[1:-1]
    return None


def parse_path(path: str) -> list[PathSegment]:
    """Parse a normalized route path into segments."""
    segments: list[PathSegment] = []
    for token in split_tokens(path):
        name = parameter_name(token)
        if name is None:
            segments.append(PathSegment(value=token))
        else:
            segments.append(PathSegment(value=token, is_param=True, param_name=name))
    return segments
