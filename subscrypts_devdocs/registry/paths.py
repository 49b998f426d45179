"""Pathname normalisation shared by the registry loader and resolver."""

from __future__ import annotations

import re

_SEGMENT_SEPARATORS = re.compile(r"[-_]+")
FALLBACK_PAGE_NAME = "Documentation"


def normalize_pathname(pathname: str) -> str:
    """Return the lookup key for ``pathname``.

    Examples
    --------
    >>> normalize_pathname("/Pricing/")
    '/pricing'
    >>> normalize_pathname("")
    '/'
    """
    path = pathname.strip().lower().rstrip("/")
    if not path:
        return "/"
    if not path.startswith("/"):
        path = f"/{path}"
    return path


def page_name_from_path(pathname: str) -> str:
    """Derive a generic page name from the last segment of ``pathname``.

    Examples
    --------
    >>> page_name_from_path("/unknown-route")
    'Unknown Route'
    >>> page_name_from_path("/")
    'Documentation'
    """
    segment = normalize_pathname(pathname).rsplit("/", 1)[-1]
    words = _SEGMENT_SEPARATORS.sub(" ", segment).strip()
    if not words:
        return FALLBACK_PAGE_NAME
    return words.title()


__all__ = ["FALLBACK_PAGE_NAME", "normalize_pathname", "page_name_from_path"]
