"""Common literal values used across subscrypts_devdocs.

Storage keys and SDK metadata live here so the controller, renderers, and
tests import the same values without drifting. Intended for internal use
within the subscrypts_devdocs package.

Examples
--------
>>> from subscrypts_devdocs import _constants
>>> _constants.STORAGE_KEY_OPEN
'subscrypts-dev-sidebar-state'
>>> _constants.STORAGE_KEY_SECTIONS.endswith("-sections")
True
"""

STORAGE_KEY_OPEN = "subscrypts-dev-sidebar-state"
STORAGE_KEY_SECTIONS = "subscrypts-dev-sidebar-sections"

DEFAULT_ORIGIN = "http://localhost:5173"
DEFAULT_SDK_VERSION = "1.4.0"
DEFAULT_SDK_REPO_URL = "https://github.com/Subscrypts/react-sdk"
DEFAULT_CODE_LANGUAGE = "typescript"
ESCAPE_KEY = "Escape"
