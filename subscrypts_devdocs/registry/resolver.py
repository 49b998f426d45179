"""Resolve route pathnames to their documentation bundles.

The resolver is a pure, total function over a fixed route table: every
pathname yields a bundle. Registered routes match exactly (after
normalisation); anything else resolves to an empty fallback bundle whose
page name is derived from the path.

Example
-------
>>> from subscrypts_devdocs.registry import resolve
>>> resolve("/pricing").page_name
'Pricing'
>>> resolve("/unknown-route").sections
()
"""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from .loader import load_registry_content
from .models import DocumentationBundle
from .paths import normalize_pathname, page_name_from_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class DocumentationRegistry:
    """Immutable route table mapping exact paths to documentation bundles."""

    def __init__(self, routes: cabc.Mapping[str, DocumentationBundle]) -> None:
        self._routes: dict[str, DocumentationBundle] = {
            normalize_pathname(path): bundle for path, bundle in routes.items()
        }

    @classmethod
    def from_content_dir(cls, content_dir: Path | None = None) -> DocumentationRegistry:
        """Build a registry from YAML documents in ``content_dir``."""
        return cls(load_registry_content(content_dir))

    def resolve(self, pathname: str) -> DocumentationBundle:
        """Return the bundle registered for ``pathname`` or a fallback bundle."""
        bundle = self._routes.get(normalize_pathname(pathname))
        if bundle is not None:
            return bundle
        return DocumentationBundle(page_name=page_name_from_path(pathname))

    def routes(self) -> list[str]:
        """Return registered route paths in registration order."""
        return list(self._routes)

    def bundles(self) -> list[DocumentationBundle]:
        """Return every registered bundle in registration order."""
        return list(self._routes.values())

    def __contains__(self, pathname: object) -> bool:
        return isinstance(pathname, str) and normalize_pathname(pathname) in self._routes

    def __len__(self) -> int:
        return len(self._routes)


@functools.cache
def default_registry() -> DocumentationRegistry:
    """Return the registry built from the packaged content, loaded once."""
    return DocumentationRegistry.from_content_dir()


def _registry_or_default(
    registry: DocumentationRegistry | None,
) -> DocumentationRegistry:
    """Return ``registry`` unless it is None; an empty registry is kept."""
    if registry is not None:
        return registry
    return default_registry()


def resolve(
    pathname: str, *, registry: DocumentationRegistry | None = None
) -> DocumentationBundle:
    """Return the documentation bundle for ``pathname``.

    Parameters
    ----------
    pathname : str
        Current route path supplied by the host navigation layer.
    registry : DocumentationRegistry, optional
        Route table to consult; defaults to :func:`default_registry`.

    Returns
    -------
    DocumentationBundle
        The registered bundle, or an empty fallback bundle for unregistered
        paths. Never ``None``.
    """
    return _registry_or_default(registry).resolve(pathname)


def all_documentation(
    *, registry: DocumentationRegistry | None = None
) -> list[DocumentationBundle]:
    """Return every registered bundle in registration order."""
    return _registry_or_default(registry).bundles()


def page_names(*, registry: DocumentationRegistry | None = None) -> list[str]:
    """Return the page names of every registered bundle."""
    return [bundle.page_name for bundle in all_documentation(registry=registry)]


def registered_routes(*, registry: DocumentationRegistry | None = None) -> list[str]:
    """Return the registered route paths."""
    return _registry_or_default(registry).routes()


__all__ = [
    "DocumentationRegistry",
    "all_documentation",
    "default_registry",
    "page_names",
    "registered_routes",
    "resolve",
]
