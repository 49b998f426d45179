"""Load and validate devdocs configuration YAML.

This subpackage parses the project's ``devdocs.yaml`` file, applies defaults
for every missing key, and produces a :class:`DevDocsConfig` that the CLI,
the state storage, and the renderers consume.

Examples
--------
>>> from pathlib import Path
>>> from subscrypts_devdocs.config import load_devdocs_config
>>> config = load_devdocs_config(Path("config/devdocs.yaml"))  # doctest: +SKIP
>>> config.fallback_sdk_version  # doctest: +SKIP
'1.4.0'
"""

from .loader import DEFAULT_CONFIG, load_devdocs_config
from .models import (
    STORAGE_PATH_ENV,
    DevDocsConfig,
    DevDocsConfigError,
    ThemeConfig,
    default_storage_path,
)

__all__ = [
    "DEFAULT_CONFIG",
    "STORAGE_PATH_ENV",
    "DevDocsConfig",
    "DevDocsConfigError",
    "ThemeConfig",
    "default_storage_path",
    "load_devdocs_config",
]
