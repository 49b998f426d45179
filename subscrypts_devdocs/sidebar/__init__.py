"""Developer sidebar container, section views, and HTML rendering."""

from .container import (
    TEMPLATES_DIR,
    SidebarContainer,
    SidebarProps,
    ToggleButtonProps,
    create_environment,
)
from .page import SidebarPageBuilder, route_output_path
from .renderer import HtmlContentRenderer
from .resources import (
    HostDocument,
    OpenStateHandle,
    ResourceCounters,
    enter_open_state,
    escape_listener,
    scroll_lock,
)
from .section_view import (
    BlockKind,
    ContentBlock,
    Controlled,
    SectionView,
    Uncontrolled,
)

__all__ = [
    "TEMPLATES_DIR",
    "BlockKind",
    "ContentBlock",
    "Controlled",
    "HostDocument",
    "HtmlContentRenderer",
    "OpenStateHandle",
    "ResourceCounters",
    "SectionView",
    "SidebarContainer",
    "SidebarPageBuilder",
    "SidebarProps",
    "ToggleButtonProps",
    "Uncontrolled",
    "create_environment",
    "enter_open_state",
    "escape_listener",
    "route_output_path",
    "scroll_lock",
]
