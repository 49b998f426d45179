"""Static preview pages embedding the developer sidebar.

``SidebarPageBuilder`` writes one HTML page per registered route into the
configured output directory (``/`` becomes ``index.html``, ``/pricing``
becomes ``pricing/index.html``). Each page embeds the sidebar rendered in
the persisted state held by the supplied controller, plus the Pygments
stylesheet inline, so the output can be opened straight from disk.

>>> from subscrypts_devdocs.config import load_devdocs_config
>>> builder = SidebarPageBuilder(load_devdocs_config(), controller)  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from subscrypts_devdocs.registry import default_registry

from .container import SidebarContainer, create_environment
from .resources import HostDocument

if typ.TYPE_CHECKING:
    from subscrypts_devdocs.config import DevDocsConfig
    from subscrypts_devdocs.registry import DocumentationRegistry
    from subscrypts_devdocs.state import SidebarStateController


def route_output_path(output_dir: Path, route: str) -> Path:
    """Return the ``index.html`` location for ``route`` under ``output_dir``."""
    relative = route.strip("/")
    if not relative:
        return output_dir / "index.html"
    return output_dir / relative / "index.html"


class SidebarPageBuilder:
    """Render host pages for every registered route."""

    def __init__(
        self,
        config: DevDocsConfig,
        controller: SidebarStateController,
        *,
        registry: DocumentationRegistry | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and load the page template.

        Parameters
        ----------
        config : DevDocsConfig
            Supplies ``output_dir``, the theme copy, and rendering options.
        controller : SidebarStateController
            Persisted sidebar state embedded into every page.
        registry : DocumentationRegistry, optional
            Route table to render; defaults to the packaged registry.
        templates_dir : Path, optional
            Directory containing the Jinja templates.
        """
        self.config = config
        self.controller = controller
        self.registry = registry if registry is not None else default_registry()
        self.templates_dir = templates_dir
        self.env = create_environment(templates_dir)
        self.template = self.env.get_template("page.jinja")

    def render_route(self, route: str) -> str:
        """Return the full HTML page for ``route``."""
        document = HostDocument()
        with SidebarContainer(
            self.controller,
            document,
            route,
            config=self.config,
            registry=self.registry,
            templates_dir=self.templates_dir,
        ) as sidebar:
            return self.template.render(
                theme=self.config.theme,
                route=route,
                page_name=sidebar.documentation.page_name,
                body_overflow=document.body_overflow,
                stylesheet=sidebar.renderer.stylesheet,
                sidebar_html=sidebar.render(),
            )

    def run(self) -> list[Path]:
        """Write one page per registered route and return the written paths.

        Parent directories are created as needed; files are UTF-8 encoded.
        """
        written: list[Path] = []
        for route in self.registry.routes():
            output_path = route_output_path(self.config.output_dir, route)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render_route(route), encoding="utf-8")
            written.append(output_path)
        return written


__all__ = ["SidebarPageBuilder", "route_output_path"]
