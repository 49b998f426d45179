"""Load route documentation YAML into immutable registry bundles."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import (
    CodeExample,
    DocLink,
    DocumentationBundle,
    PropSpec,
    RegistryError,
    Section,
    SectionType,
)
from .paths import normalize_pathname

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parents[1] / "content"


def load_registry_content(
    content_dir: Path | None = None,
) -> dict[str, DocumentationBundle]:
    """Read every ``*.yaml`` document in ``content_dir`` into route bundles.

    Parameters
    ----------
    content_dir : Path, optional
        Directory holding one YAML document per route. Defaults to the
        packaged ``subscrypts_devdocs/content`` directory.

    Returns
    -------
    dict[str, DocumentationBundle]
        Mapping of normalised route path to its bundle, ordered by the
        ``order`` key of each document and then by filename.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    RegistryError
        If a document is malformed, a section is invalid, section ids repeat
        within a bundle, or two documents claim the same route.
    """
    directory = content_dir or DEFAULT_CONTENT_DIR
    if not directory.is_dir():
        msg = f"Registry content directory '{directory}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    documents: list[tuple[int, str, str, DocumentationBundle]] = []
    for path in sorted(directory.glob("*.yaml")):
        with path.open("r", encoding="utf-8") as handle:
            payload = loader.load(handle)
        if not isinstance(payload, dict):
            msg = f"Registry document '{path.name}' must be a mapping."
            raise RegistryError(msg)
        route, bundle = _build_route_bundle(payload, source=path.name)
        order = _order_key(payload, source=path.name)
        documents.append((order, path.name, route, bundle))

    routes: dict[str, DocumentationBundle] = {}
    for _order, name, route, bundle in sorted(documents, key=lambda doc: doc[:2]):
        if route in routes:
            msg = f"Route '{route}' is declared twice (second in '{name}')."
            raise RegistryError(msg)
        routes[route] = bundle
    logger.debug("Loaded %d documentation bundles from %s", len(routes), directory)
    return routes


def _order_key(payload: typ.Mapping[str, typ.Any], *, source: str) -> int:
    """Return the integer ``order`` of a document, defaulting to 0."""
    order = payload.get("order", 0)
    match order:
        case bool():
            pass
        case int():
            return order
        case str() if order.strip().lstrip("-").isdigit():
            return int(order)
    msg = f"Registry document '{source}' has non-integer order {order!r}."
    raise RegistryError(msg)


def _build_route_bundle(
    payload: typ.Mapping[str, typ.Any], *, source: str
) -> tuple[str, DocumentationBundle]:
    """Return the ``(route, bundle)`` pair described by one YAML document."""
    route = payload.get("route")
    page_name = payload.get("page_name")
    if not route or not page_name:
        msg = f"Registry document '{source}' needs both 'route' and 'page_name'."
        raise RegistryError(msg)

    sections: list[Section] = []
    seen: set[str] = set()
    for raw_section in payload.get("sections") or []:
        if not isinstance(raw_section, dict):
            msg = f"Sections in '{source}' must be mappings."
            raise RegistryError(msg)
        try:
            section = _build_section(raw_section, source=source)
        except KeyError as exc:
            msg = f"Section entry in '{source}' is missing required key {exc}."
            raise RegistryError(msg) from exc
        if section.id in seen:
            msg = f"Duplicate section id '{section.id}' in '{source}'."
            raise RegistryError(msg)
        seen.add(section.id)
        sections.append(section)

    bundle = DocumentationBundle(
        page_name=str(page_name),
        page_description=_optional_str(payload.get("page_description")),
        sections=tuple(sections),
    )
    return normalize_pathname(str(route)), bundle


def _build_section(payload: typ.Mapping[str, typ.Any], *, source: str) -> Section:
    """Build a Section from a YAML mapping, validating required fields."""
    section_id = _optional_str(payload.get("id"))
    title = _optional_str(payload.get("title"))
    if not section_id or not title:
        msg = f"Every section in '{source}' needs an 'id' and a 'title'."
        raise RegistryError(msg)
    try:
        section_type = SectionType(payload.get("type"))
    except ValueError as exc:
        known = ", ".join(member.value for member in SectionType)
        msg = (
            f"Section '{section_id}' in '{source}' has unknown type "
            f"{payload.get('type')!r}; expected one of: {known}"
        )
        raise RegistryError(msg) from exc

    return Section(
        id=section_id,
        title=title,
        type=section_type,
        version=_optional_str(payload.get("version")),
        description=_optional_str(payload.get("description")),
        code=_optional_block(payload.get("code")),
        props=_build_props(payload.get("props"), source=source),
        return_values=_build_props(payload.get("return_values"), source=source),
        examples=_build_examples(payload.get("examples"), source=source),
        notes=tuple(
            text for note in payload.get("notes") or [] if (text := str(note).strip())
        ),
        links=tuple(
            DocLink(label=str(link["label"]), url=str(link["url"]))
            for link in _mappings(payload.get("links"), "links", source)
        ),
    )


def _build_props(value: object | None, *, source: str) -> tuple[PropSpec, ...]:
    return tuple(
        PropSpec(
            name=str(item["name"]),
            type=str(item.get("type", "")),
            description=str(item.get("description", "")),
            required=bool(item.get("required", False)),
            default=_optional_str(item.get("default")),
        )
        for item in _mappings(value, "props", source)
    )


def _build_examples(value: object | None, *, source: str) -> tuple[CodeExample, ...]:
    return tuple(
        CodeExample(
            title=str(item["title"]),
            code=str(item["code"]).rstrip("\n"),
            description=_optional_str(item.get("description")),
            language=_optional_str(item.get("language")),
        )
        for item in _mappings(value, "examples", source)
    )


def _mappings(
    value: object | None, field: str, source: str
) -> list[typ.Mapping[str, typ.Any]]:
    """Return ``value`` as a list of mappings, rejecting any other shape."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(i, dict) for i in value):
        msg = f"'{field}' in '{source}' must be a list of mappings."
        raise RegistryError(msg)
    return value


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_block(value: object | None) -> str | None:
    """Return a code block with trailing newlines removed, or None when empty."""
    if value is None:
        return None
    text = str(value).rstrip()
    return text or None


__all__ = ["DEFAULT_CONTENT_DIR", "load_registry_content"]
