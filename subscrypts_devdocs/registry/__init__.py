"""Route-driven documentation registry for the developer sidebar.

Bundles are authored as YAML under ``subscrypts_devdocs/content`` and loaded
once into immutable dataclasses. :func:`resolve` maps a route pathname to its
bundle and never fails: unregistered routes get an empty fallback bundle.
"""

from .loader import DEFAULT_CONTENT_DIR, load_registry_content
from .models import (
    CodeExample,
    DocLink,
    DocumentationBundle,
    PropSpec,
    RegistryError,
    Section,
    SectionType,
)
from .paths import normalize_pathname, page_name_from_path
from .resolver import (
    DocumentationRegistry,
    all_documentation,
    default_registry,
    page_names,
    registered_routes,
    resolve,
)

__all__ = [
    "DEFAULT_CONTENT_DIR",
    "CodeExample",
    "DocLink",
    "DocumentationBundle",
    "DocumentationRegistry",
    "PropSpec",
    "RegistryError",
    "Section",
    "SectionType",
    "all_documentation",
    "default_registry",
    "load_registry_content",
    "normalize_pathname",
    "page_name_from_path",
    "page_names",
    "registered_routes",
    "resolve",
]
