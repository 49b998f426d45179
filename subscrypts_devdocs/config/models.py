"""Typed dataclasses describing devdocs configuration structures."""

from __future__ import annotations

import dataclasses as dc
import os
from pathlib import Path

from subscrypts_devdocs._constants import (
    DEFAULT_ORIGIN,
    DEFAULT_SDK_REPO_URL,
    DEFAULT_SDK_VERSION,
)

STORAGE_PATH_ENV = "SUBSCRYPTS_DEVDOCS_STORAGE"


def default_storage_path() -> Path:
    """Return the state file path, honouring ``SUBSCRYPTS_DEVDOCS_STORAGE``.

    The environment is consulted on every call.
    """
    override = os.getenv(STORAGE_PATH_ENV)
    if override:
        return Path(override)
    return Path.home() / ".config" / "subscrypts-devdocs" / "storage.toml"


class DevDocsConfigError(ValueError):
    """Raised when the devdocs configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual copy applied to the rendered sidebar and host pages."""

    title: str = "Developer Documentation"
    site_name: str = "Subscrypts React SDK Demo"


@dc.dataclass(slots=True)
class DevDocsConfig:
    """Fully resolved configuration for rendering and persisting the sidebar.

    Attributes
    ----------
    origin : str
        Origin whose storage table holds the persisted sidebar state.
    storage_path : Path
        TOML file backing the per-origin durable storage.
    output_dir : Path
        Folder receiving static pages written by ``devdocs generate``.
    pygments_style : str
        Pygments style used for highlighted code snippets.
    sdk_repo_url : str
        Link target for the sidebar footer.
    fallback_sdk_version : str
        Version shown in the footer when the first section carries none.
    persist_section_expansion : bool
        When ``True`` sections are controlled by the persisted expansion set;
        otherwise each section keeps local, non-persisted state.
    content_dir : Path or None
        Alternate registry content directory; ``None`` uses the packaged
        content.
    theme : ThemeConfig
        Copy used by the templates.
    """

    origin: str = DEFAULT_ORIGIN
    storage_path: Path = dc.field(default_factory=default_storage_path)
    output_dir: Path = Path("public")
    pygments_style: str = "monokai"
    sdk_repo_url: str = DEFAULT_SDK_REPO_URL
    fallback_sdk_version: str = DEFAULT_SDK_VERSION
    persist_section_expansion: bool = True
    content_dir: Path | None = None
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)


__all__ = [
    "STORAGE_PATH_ENV",
    "DevDocsConfig",
    "DevDocsConfigError",
    "ThemeConfig",
    "default_storage_path",
]
