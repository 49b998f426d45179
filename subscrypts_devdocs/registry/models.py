"""Immutable dataclasses describing route documentation bundles."""

from __future__ import annotations

import dataclasses as dc
import enum


class RegistryError(ValueError):
    """Raised when registry content is malformed or inconsistent."""


class SectionType(enum.StrEnum):
    """Kinds of SDK capability a documentation section can describe."""

    HOOK = "hook"
    COMPONENT = "component"
    UTILITY = "utility"
    CONFIG = "config"
    CONSTANT = "constant"

    @property
    def label(self) -> str:
        """Return the human-readable badge label."""
        return _SECTION_TYPE_META[self][0]

    @property
    def icon(self) -> str:
        """Return the icon shown next to the section title."""
        return _SECTION_TYPE_META[self][1]


_SECTION_TYPE_META: dict[SectionType, tuple[str, str]] = {
    SectionType.HOOK: ("Hook", "\N{HOOK}"),
    SectionType.COMPONENT: ("Component", "\N{JIGSAW PUZZLE PIECE}"),
    SectionType.UTILITY: ("Utility", "\N{WRENCH}"),
    SectionType.CONFIG: ("Config", "\N{GEAR}\N{VARIATION SELECTOR-16}"),
    SectionType.CONSTANT: ("Constant", "\N{PUSHPIN}"),
}


@dc.dataclass(frozen=True, slots=True)
class PropSpec:
    """A parameter, prop, or return value listed in a section table."""

    name: str
    type: str
    description: str
    required: bool = False
    default: str | None = None


@dc.dataclass(frozen=True, slots=True)
class CodeExample:
    """A titled code snippet shown under "More Examples"."""

    title: str
    code: str
    description: str | None = None
    language: str | None = None


@dc.dataclass(frozen=True, slots=True)
class DocLink:
    """An external reference rendered at the bottom of a section."""

    label: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class Section:
    """One collapsible documentation block for a single SDK capability.

    Attributes
    ----------
    id : str
        Identifier unique within the owning bundle; used as the expansion key.
    title : str
        Heading shown in the section header.
    type : SectionType
        Capability kind, driving the header icon and badge.
    version : str or None
        SDK version that introduced the capability.
    description : str or None
        Markdown prose rendered first when expanded.
    code : str or None
        Primary code example.
    props : tuple[PropSpec, ...]
        Parameters or component props.
    return_values : tuple[PropSpec, ...]
        Values returned by a hook or function.
    examples : tuple[CodeExample, ...]
        Additional named examples, in display order.
    notes : tuple[str, ...]
        Important notes, in display order.
    links : tuple[DocLink, ...]
        External references, in display order.
    """

    id: str
    title: str
    type: SectionType
    version: str | None = None
    description: str | None = None
    code: str | None = None
    props: tuple[PropSpec, ...] = ()
    return_values: tuple[PropSpec, ...] = ()
    examples: tuple[CodeExample, ...] = ()
    notes: tuple[str, ...] = ()
    links: tuple[DocLink, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class DocumentationBundle:
    """Content shown in the sidebar for one route."""

    page_name: str
    page_description: str | None = None
    sections: tuple[Section, ...] = ()

    @property
    def section_ids(self) -> tuple[str, ...]:
        """Return section ids in display order."""
        return tuple(section.id for section in self.sections)

    @property
    def sdk_version(self) -> str | None:
        """Return the version of the first section, if any."""
        if not self.sections:
            return None
        return self.sections[0].version


__all__ = [
    "CodeExample",
    "DocLink",
    "DocumentationBundle",
    "PropSpec",
    "RegistryError",
    "Section",
    "SectionType",
]
