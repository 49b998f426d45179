"""Load devdocs configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import DevDocsConfig, DevDocsConfigError, ThemeConfig

DEFAULT_CONFIG = Path("config/devdocs.yaml")


def load_devdocs_config(path: Path | None = None) -> DevDocsConfig:
    """Load the YAML configuration describing storage and rendering choices.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to the YAML configuration file. When ``None`` the
        default ``config/devdocs.yaml`` is used if it exists, otherwise the
        built-in defaults are returned.

    Returns
    -------
    DevDocsConfig
        Parsed configuration with defaults applied for every missing key.

    Raises
    ------
    FileNotFoundError
        If an explicit ``path`` does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    DevDocsConfigError
        If a value has the wrong shape (for example, a non-boolean
        ``persist_section_expansion``).

    Examples
    --------
    >>> from pathlib import Path
    >>> from subscrypts_devdocs.config import load_devdocs_config
    >>> config = load_devdocs_config(Path("config/devdocs.yaml"))  # doctest: +SKIP
    >>> config.origin  # doctest: +SKIP
    'http://localhost:5173'
    """
    if path is None:
        if not DEFAULT_CONFIG.exists():
            return DevDocsConfig()
        path = DEFAULT_CONFIG
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise DevDocsConfigError(msg)

    base = DevDocsConfig()
    return DevDocsConfig(
        origin=_require_str(defaults, "origin", base.origin),
        storage_path=_as_path(defaults.get("storage_path")) or base.storage_path,
        output_dir=_as_path(defaults.get("output_dir")) or base.output_dir,
        pygments_style=_require_str(defaults, "pygments_style", base.pygments_style),
        sdk_repo_url=_require_str(defaults, "sdk_repo_url", base.sdk_repo_url),
        fallback_sdk_version=_require_str(
            defaults, "fallback_sdk_version", base.fallback_sdk_version
        ),
        persist_section_expansion=_require_bool(
            defaults, "persist_section_expansion", base.persist_section_expansion
        ),
        content_dir=_as_path(defaults.get("content_dir")),
        theme=_build_theme_config(raw.get("theme")),
    )


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, default: str) -> str:
    """Return ``payload[key]`` as a stripped string or ``default`` when absent."""
    value = payload.get(key)
    if value is None:
        return default
    text = str(value).strip()
    if not text:
        msg = f"'{key}' must not be empty."
        raise DevDocsConfigError(msg)
    return text


def _require_bool(
    payload: typ.Mapping[str, typ.Any], key: str, default: bool
) -> bool:
    value = payload.get(key)
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"'{key}' must be a boolean, got {value!r}."
            raise DevDocsConfigError(msg)


def _as_path(value: object | None) -> Path | None:
    """Return a user-expanded path or None when the value is empty."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return Path(text).expanduser()


def _build_theme_config(payload: object | None) -> ThemeConfig:
    """Build a ThemeConfig instance from the optional ``theme`` mapping."""
    base = ThemeConfig()
    if payload is None:
        return base
    if not isinstance(payload, dict):
        msg = "'theme' must be a mapping."
        raise DevDocsConfigError(msg)
    return ThemeConfig(
        title=payload.get("title", base.title),
        site_name=payload.get("site_name", base.site_name),
    )


__all__ = ["DEFAULT_CONFIG", "load_devdocs_config"]
