"""Cyclopts CLI entrypoint for previewing and driving the developer sidebar.

The ``devdocs`` console script defined here renders the sidebar for a route,
lists the registered documentation, and mutates the persisted sidebar state
stored for the configured origin. Typical usage involves ``devdocs show
--path /pricing`` while authoring content, ``devdocs open`` / ``devdocs
expand-all --path /pricing`` to stage a state, and ``devdocs generate`` to
write static preview pages for every route.

Examples
--------
List every registered route:

>>> from subscrypts_devdocs.cli import main
>>> main()  # doctest: +SKIP

Render the pricing sidebar into a file:

>>> from subscrypts_devdocs.cli import app
>>> app.run(["show", "--path", "/pricing", "--output", "pricing.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_devdocs_config
from .registry import DocumentationRegistry, default_registry
from .sidebar import HostDocument, SidebarContainer, SidebarPageBuilder
from .state import SidebarStateController, TomlFileStorage

if typ.TYPE_CHECKING:
    from .config import DevDocsConfig

app = App(name="devdocs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to devdocs config", env_var="INPUT_CONFIG"),
]
JsonOption = typ.Annotated[
    bool, Parameter(name="--json", help="Emit machine-readable JSON")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _registry(config: DevDocsConfig) -> DocumentationRegistry:
    if config.content_dir is None:
        return default_registry()
    return DocumentationRegistry.from_content_dir(config.content_dir)


def _controller(config: DevDocsConfig) -> SidebarStateController:
    storage = TomlFileStorage(config.origin, path=config.storage_path)
    return SidebarStateController(storage)


def _print_state(controller: SidebarStateController) -> None:
    state = controller.state
    print(f"open: {'true' if state.is_open else 'false'}")
    expanded = ", ".join(sorted(state.expanded_sections)) or "-"
    print(f"expanded: {expanded}")


@app.command(help="Render the sidebar for a route in its persisted state.")
def show(
    *,
    path: typ.Annotated[
        str, Parameter(help="Route pathname to resolve", env_var="INPUT_PATH")
    ] = "/",
    output: typ.Annotated[
        Path | None, Parameter(help="Write HTML here instead of stdout")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Render the sidebar HTML for ``path``.

    Parameters
    ----------
    path : str, optional
        Route pathname; unregistered routes render the empty state.
    output : Path or None, optional
        Destination file. When ``None`` the markup is printed to stdout.
    config : Path or None, optional
        Path to ``devdocs.yaml`` (overridable via ``INPUT_CONFIG``).
    """
    devdocs_config = load_devdocs_config(config)
    with SidebarContainer(
        _controller(devdocs_config),
        HostDocument(),
        path,
        config=devdocs_config,
        registry=_registry(devdocs_config),
    ) as sidebar:
        html = sidebar.render()
    if output is None:
        print(html)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="List registered routes and their page names.")
def routes(*, json_output: JsonOption = False, config: ConfigOption = None) -> None:
    """Print every registered route with its page name and section count."""
    registry = _registry(load_devdocs_config(config))
    entries = [
        {
            "route": route,
            "page_name": registry.resolve(route).page_name,
            "sections": list(registry.resolve(route).section_ids),
        }
        for route in registry.routes()
    ]
    if json_output:
        print(json.dumps(entries))
        return
    for entry in entries:
        print(f"{entry['route']}\t{entry['page_name']} ({len(entry['sections'])})")


@app.command(name="open", help="Open the sidebar.")
def open_sidebar(*, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    controller.open()
    _print_state(controller)


@app.command(name="close", help="Close the sidebar.")
def close_sidebar(*, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    controller.close()
    _print_state(controller)


@app.command(help="Flip the sidebar between open and closed.")
def toggle(*, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    controller.toggle()
    _print_state(controller)


@app.command(help="Expand one section by id.")
def expand(section_id: str, /, *, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    controller.expand_section(section_id)
    _print_state(controller)


@app.command(help="Collapse one section by id.")
def collapse(section_id: str, /, *, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    controller.collapse_section(section_id)
    _print_state(controller)


@app.command(help="Expand every section documented for a route.")
def expand_all(
    *,
    path: typ.Annotated[
        str, Parameter(help="Route whose sections to expand", env_var="INPUT_PATH")
    ] = "/",
    config: ConfigOption = None,
) -> None:
    """Add every section id of the bundle resolved for ``path``."""
    devdocs_config = load_devdocs_config(config)
    bundle = _registry(devdocs_config).resolve(path)
    controller = _controller(devdocs_config)
    controller.expand_all(bundle.section_ids)
    _print_state(controller)


@app.command(help="Collapse every section.")
def collapse_all(*, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    controller.collapse_all()
    _print_state(controller)


@app.command(help="Forget the persisted sidebar state.")
def reset(*, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    controller.reset()
    _print_state(controller)


@app.command(help="Print the persisted sidebar state.")
def status(*, json_output: JsonOption = False, config: ConfigOption = None) -> None:
    controller = _controller(load_devdocs_config(config))
    if json_output:
        state = controller.state
        print(
            json.dumps(
                {
                    "is_open": state.is_open,
                    "expanded_sections": sorted(state.expanded_sections),
                }
            )
        )
        return
    _print_state(controller)


@app.command(help="Write a static preview page for every registered route.")
def generate(
    *,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Render one HTML page per route with the sidebar in its persisted state.

    Parameters
    ----------
    output_dir : Path or None, optional
        Folder receiving the pages; defaults to ``output_dir`` from the
        config.
    config : Path or None, optional
        Path to ``devdocs.yaml`` (overridable via ``INPUT_CONFIG``).
    """
    devdocs_config = load_devdocs_config(config)
    if output_dir is not None:
        devdocs_config.output_dir = output_dir
    builder = SidebarPageBuilder(
        devdocs_config,
        _controller(devdocs_config),
        registry=_registry(devdocs_config),
    )
    for written in builder.run():
        print(f"wrote {_format_path(written)}")


@app.meta.default
def _launcher(
    *tokens: typ.Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    verbose: typ.Annotated[
        bool, Parameter(help="Log debug output to stderr")
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    app(tokens)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``devdocs`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app.meta()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
