"""
Content API — Path Resolver
=============================

What:  Turns the raw path token of a /content URL into a Resource Path.
Why:   Every operation needs the same normalization and the same failure mode
       when no path was given.
How:   Pure functions; failures raise MissingPathError (→ 400) so the request
       never reaches the storage backend.

Examples:
    resolve_path("docs/a.txt")        → "/docs/a.txt"
    resolve_path("/docs/a.txt")       → "/docs/a.txt"
    resolve_path("")                  → MissingPathError
    resolve_directory_path(None)      → "/"
    resolve_directory_path("docs")    → "/docs/"
"""

import posixpath
from typing import Optional

from content_api.exceptions import MissingPathError

SEPARATOR = "/"


def ensure_leading_slash(path: str) -> str:
    if path.startswith(SEPARATOR):
        return path
    return SEPARATOR + path


def get_extension(path: str) -> Optional[str]:
    """
    Extension of the last path segment, including the dot.

    Returns None when the segment has no extension. Leading-dot names such as
    ".config" count as extension-less.
    """
    _, extension = posixpath.splitext(path)
    return extension or None


def has_extension(path: str, extension: str) -> bool:
    return path.endswith(extension)


def resolve_path(token: Optional[str]) -> str:
    """
    Resolve the path token of a single-resource request.

    Raises:
        MissingPathError: token is None, empty, or otherwise falsy.
    """
    if not token:
        raise MissingPathError()
    return ensure_leading_slash(token)


def resolve_directory_path(token: Optional[str]) -> str:
    """
    Resolve the path token of a list request into a directory prefix.

    An absent token lists the root. The result always starts and ends with
    the separator.
    """
    if not token:
        return SEPARATOR
    path = ensure_leading_slash(token)
    if not path.endswith(SEPARATOR):
        path += SEPARATOR
    return path
