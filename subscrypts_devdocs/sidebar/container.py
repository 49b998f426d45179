"""Developer sidebar container: open/closed lifecycle and HTML rendering.

The container binds a :class:`~subscrypts_devdocs.state.SidebarStateController`
to a :class:`~subscrypts_devdocs.sidebar.resources.HostDocument` and the
bundle resolved for the current route. It is Closed or Open exactly as the
controller says; every controller change runs through a single sync step
that acquires the open-state resources (scroll lock and Escape listener) on
entering Open and releases them on leaving it, whatever caused the change.

Typical usage mirrors a page lifecycle:

>>> from subscrypts_devdocs.state import MemoryStorage, SidebarStateController
>>> from subscrypts_devdocs.sidebar import HostDocument, SidebarContainer
>>> document = HostDocument()
>>> controller = SidebarStateController(MemoryStorage())
>>> with SidebarContainer(controller, document, "/pricing") as sidebar:
...     sidebar.open()
...     document.scroll_locked
True
>>> document.scroll_locked
False
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from subscrypts_devdocs.config import DevDocsConfig
from subscrypts_devdocs.registry import resolve

from .renderer import HtmlContentRenderer
from .resources import HostDocument, enter_open_state
from .section_view import Controlled, SectionView, Uncontrolled

if typ.TYPE_CHECKING:
    from subscrypts_devdocs.registry import DocumentationBundle, DocumentationRegistry
    from subscrypts_devdocs.state import SidebarState, SidebarStateController

    from .resources import OpenStateHandle

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used for every sidebar template."""
    return Environment(
        loader=FileSystemLoader(templates_dir or TEMPLATES_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


@dc.dataclass(frozen=True, slots=True)
class ToggleButtonProps:
    """Inputs for the floating open/close affordance."""

    is_open: bool
    on_toggle: typ.Callable[[], None]

    @property
    def label(self) -> str:
        return "Close Developer Docs" if self.is_open else "Open Developer Docs"


@dc.dataclass(frozen=True, slots=True)
class SidebarProps:
    """Inputs for the sidebar panel itself."""

    is_open: bool
    on_toggle: typ.Callable[[], None]
    documentation: DocumentationBundle


class SidebarContainer:
    """Drive the sidebar for one host document and the current route."""

    def __init__(
        self,
        controller: SidebarStateController,
        document: HostDocument | None = None,
        pathname: str = "/",
        *,
        config: DevDocsConfig | None = None,
        registry: DocumentationRegistry | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Resolve the bundle for ``pathname`` and prepare rendering.

        Parameters
        ----------
        controller : SidebarStateController
            Source of truth for the open flag and the expansion set.
        document : HostDocument, optional
            Host page receiving the scroll lock and Escape listener. A fresh
            document is created when omitted.
        pathname : str, optional
            Current route path. Defaults to ``"/"``.
        config : DevDocsConfig, optional
            Rendering options; defaults to :class:`DevDocsConfig` defaults.
        registry : DocumentationRegistry, optional
            Route table; defaults to the packaged registry.
        templates_dir : Path, optional
            Directory containing the Jinja templates.

        Notes
        -----
        Construction has no side effects on ``document``; resources are only
        touched once :meth:`mount` is called.
        """
        self.controller = controller
        self.document = document or HostDocument()
        self.config = config or DevDocsConfig()
        self.registry = registry
        self.renderer = HtmlContentRenderer(self.config.pygments_style)
        self.env = create_environment(templates_dir)
        self.pathname = pathname
        self.documentation = resolve(pathname, registry=registry)
        self._uncontrolled: dict[str, SectionView] = {}
        self._handle: OpenStateHandle | None = None
        self._unsubscribe: typ.Callable[[], None] | None = None

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    @property
    def is_open(self) -> bool:
        return self.controller.is_open

    @property
    def holds_open_resources(self) -> bool:
        """Return True while the scroll lock and Escape listener are held."""
        return self._handle is not None

    def mount(self) -> None:
        """Start observing the controller; enter Open if it is already open."""
        if self.mounted:
            return
        self._unsubscribe = self.controller.subscribe(self._on_state_change)
        self._sync()

    def unmount(self) -> None:
        """Release held resources and stop observing the controller."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._release()

    def __enter__(self) -> SidebarContainer:
        self.mount()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unmount()

    def open(self) -> None:
        self.controller.open()

    def close(self) -> None:
        self.controller.close()

    def toggle(self) -> None:
        self.controller.toggle()

    def press_key(self, key: str) -> None:
        """Dispatch a key-down on the host document."""
        self.document.dispatch_key(key)

    def click_backdrop(self) -> None:
        """Close the sidebar; the backdrop only exists while open."""
        if self.controller.is_open:
            self.controller.close()

    def navigate(self, pathname: str) -> None:
        """Re-resolve the displayed bundle for a new route.

        Local expansion of uncontrolled sections is discarded; the open flag
        and the persisted expansion set are untouched.
        """
        self.pathname = pathname
        self.documentation = resolve(pathname, registry=self.registry)
        self._uncontrolled.clear()
        logger.debug(
            "Sidebar navigated to %s (%s)", pathname, self.documentation.page_name
        )

    def toggle_section(self, section_id: str) -> None:
        """Toggle one section through its view, honouring the expansion mode."""
        for view in self.section_views():
            if view.section.id == section_id:
                view.toggle()
                return
        self.controller.toggle_section(section_id)

    def expand_all(self) -> None:
        """Expand every section of the displayed bundle."""
        self.controller.expand_all(self.documentation.section_ids)

    def collapse_all(self) -> None:
        self.controller.collapse_all()

    def section_views(self) -> list[SectionView]:
        """Return one view per section of the displayed bundle.

        Controlled views are rebuilt from the current expansion set on each
        call; uncontrolled views are cached per section id until navigation.
        """
        if not self.config.persist_section_expansion:
            return [
                self._uncontrolled.setdefault(
                    section.id, SectionView(section, Uncontrolled())
                )
                for section in self.documentation.sections
            ]
        expanded = self.controller.expanded_sections
        return [
            SectionView(
                section,
                Controlled(
                    is_expanded=section.id in expanded,
                    on_toggle=self._section_toggler(section.id),
                ),
            )
            for section in self.documentation.sections
        ]

    def toggle_button_props(self) -> ToggleButtonProps:
        return ToggleButtonProps(is_open=self.controller.is_open, on_toggle=self.toggle)

    def sidebar_props(self) -> SidebarProps:
        return SidebarProps(
            is_open=self.controller.is_open,
            on_toggle=self.toggle,
            documentation=self.documentation,
        )

    def footer_version(self) -> str:
        """Return the SDK version shown in the footer."""
        return self.documentation.sdk_version or self.config.fallback_sdk_version

    def render(self) -> str:
        """Render the toggle button, backdrop, and panel as HTML.

        Returns
        -------
        str
            Markup for the whole sidebar widget. The backdrop is emitted only
            while open; section bodies only for expanded sections.
        """
        template = self.env.get_template("sidebar.jinja")
        return template.render(
            theme=self.config.theme,
            toggle=self.toggle_button_props(),
            sidebar=self.sidebar_props(),
            sections=[view.context(self.renderer) for view in self.section_views()],
            footer_version=self.footer_version(),
            repo_url=self.config.sdk_repo_url,
        )

    def _section_toggler(self, section_id: str) -> typ.Callable[[], None]:
        def _toggle() -> None:
            self.controller.toggle_section(section_id)

        return _toggle

    def _on_state_change(self, _state: SidebarState) -> None:
        self._sync()

    def _on_escape(self) -> None:
        if self.controller.is_open:
            self.controller.close()

    def _sync(self) -> None:
        if not self.mounted:
            return
        if self.controller.is_open and self._handle is None:
            self._handle = enter_open_state(self.document, self._on_escape)
            logger.debug("Sidebar opened on %s", self.pathname)
        elif not self.controller.is_open:
            self._release()

    def _release(self) -> None:
        if self._handle is None:
            return
        self._handle.release()
        self._handle = None
        logger.debug("Sidebar resources released on %s", self.pathname)


__all__ = [
    "TEMPLATES_DIR",
    "SidebarContainer",
    "SidebarProps",
    "ToggleButtonProps",
    "create_environment",
]
