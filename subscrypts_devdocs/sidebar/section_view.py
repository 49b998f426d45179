"""Collapsible view over a single documentation section.

A :class:`SectionView` runs in exactly one expansion mode, chosen when it is
built:

* :class:`Controlled` - the caller owns expansion. The view reports the
  ``is_expanded`` value it was given and forwards toggles to ``on_toggle``.
* :class:`Uncontrolled` - the view owns a local flag, collapsed by default.

Content is exposed as ordered :class:`ContentBlock` items: description,
primary code, parameters, return values, each named example, notes, links.
Blocks whose source field is absent or empty are left out entirely.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from subscrypts_devdocs._constants import DEFAULT_CODE_LANGUAGE

if typ.TYPE_CHECKING:
    from subscrypts_devdocs.registry import Section

    from .renderer import HtmlContentRenderer


@dc.dataclass(frozen=True, slots=True)
class Controlled:
    """Expansion owned by the caller."""

    is_expanded: bool
    on_toggle: typ.Callable[[], None]


@dc.dataclass(frozen=True, slots=True)
class Uncontrolled:
    """Expansion owned by the view, starting from ``initial``."""

    initial: bool = False


ExpansionMode = Controlled | Uncontrolled


class BlockKind(enum.StrEnum):
    """Content block kinds in display order."""

    DESCRIPTION = "description"
    CODE = "code"
    PARAMETERS = "parameters"
    RETURNS = "returns"
    EXAMPLE = "example"
    NOTES = "notes"
    LINKS = "links"


@dc.dataclass(frozen=True, slots=True)
class ContentBlock:
    """One renderable piece of an expanded section.

    ``title`` is the block heading (``None`` for the description) and
    ``payload`` is the source value: a string, a tuple of
    :class:`~subscrypts_devdocs.registry.PropSpec`, a
    :class:`~subscrypts_devdocs.registry.CodeExample`, a tuple of note
    strings, or a tuple of :class:`~subscrypts_devdocs.registry.DocLink`.
    """

    kind: BlockKind
    title: str | None
    payload: typ.Any
    language: str | None = None


class SectionView:
    """Expansion state and ordered content for one section."""

    def __init__(self, section: Section, mode: ExpansionMode | None = None) -> None:
        self.section = section
        self.mode: ExpansionMode = mode or Uncontrolled()
        match self.mode:
            case Controlled(on_toggle=callback):
                self._on_toggle: typ.Callable[[], None] | None = callback
                self._local_expanded = False
            case Uncontrolled(initial=initial):
                self._on_toggle = None
                self._local_expanded = initial

    @property
    def controlled(self) -> bool:
        return isinstance(self.mode, Controlled)

    @property
    def is_expanded(self) -> bool:
        if isinstance(self.mode, Controlled):
            return self.mode.is_expanded
        return self._local_expanded

    def toggle(self) -> None:
        """Request the opposite expansion state.

        Controlled views forward the request and never change on their own;
        uncontrolled views flip their local flag on every call.
        """
        if self._on_toggle is not None:
            self._on_toggle()
            return
        self._local_expanded = not self._local_expanded

    def content_blocks(self) -> list[ContentBlock]:
        """Return the section's non-empty content blocks in display order."""
        section = self.section
        blocks: list[ContentBlock] = []
        if section.description:
            blocks.append(ContentBlock(BlockKind.DESCRIPTION, None, section.description))
        if section.code:
            blocks.append(
                ContentBlock(
                    BlockKind.CODE, "Code Example", section.code, DEFAULT_CODE_LANGUAGE
                )
            )
        if section.props:
            blocks.append(ContentBlock(BlockKind.PARAMETERS, "Parameters", section.props))
        if section.return_values:
            blocks.append(
                ContentBlock(BlockKind.RETURNS, "Returns", section.return_values)
            )
        blocks.extend(
            ContentBlock(
                BlockKind.EXAMPLE,
                example.title,
                example,
                example.language or DEFAULT_CODE_LANGUAGE,
            )
            for example in section.examples
        )
        if section.notes:
            blocks.append(ContentBlock(BlockKind.NOTES, "Important Notes", section.notes))
        if section.links:
            blocks.append(ContentBlock(BlockKind.LINKS, None, section.links))
        return blocks

    def context(self, renderer: HtmlContentRenderer) -> dict[str, typ.Any]:
        """Return the template context for ``section.jinja``.

        Content HTML is only produced for expanded views.
        """
        section = self.section
        blocks: list[dict[str, typ.Any]] = []
        if self.is_expanded:
            for block in self.content_blocks():
                html = ""
                match block.kind:
                    case BlockKind.DESCRIPTION:
                        html = renderer.markdown(block.payload)
                    case BlockKind.CODE:
                        html = renderer.code_block(block.payload, block.language)
                    case BlockKind.EXAMPLE:
                        html = renderer.code_block(block.payload.code, block.language)
                blocks.append({"block": block, "html": html})
        return {
            "id": section.id,
            "title": section.title,
            "version": section.version,
            "type_label": section.type.label,
            "type_icon": section.type.icon,
            "type_value": section.type.value,
            "is_expanded": self.is_expanded,
            "controlled": self.controlled,
            "blocks": blocks,
        }


__all__ = [
    "BlockKind",
    "ContentBlock",
    "Controlled",
    "ExpansionMode",
    "SectionView",
    "Uncontrolled",
]
