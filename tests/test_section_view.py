"""Tests for collapsible section views and their content blocks."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from subscrypts_devdocs.registry import (
    CodeExample,
    DocLink,
    PropSpec,
    Section,
    SectionType,
)
from subscrypts_devdocs.sidebar import (
    BlockKind,
    Controlled,
    HtmlContentRenderer,
    SectionView,
    Uncontrolled,
    create_environment,
)


@pytest.fixture
def full_section() -> Section:
    return Section(
        id="plan-card",
        title="PlanCard",
        type=SectionType.COMPONENT,
        version="1.0.11",
        description="Displays a **single** plan.",
        code="<PlanCard planId=\"1\" />",
        props=(PropSpec("planId", "string", "Plan to show", required=True),),
        return_values=(PropSpec("plan", "Plan", "Loaded plan"),),
        examples=(
            CodeExample("Basic", "<PlanCard planId=\"1\" />"),
            CodeExample("Styled", "<PlanCard className=\"x\" />", language="tsx"),
        ),
        notes=("Requires SubscryptsProvider",),
        links=(DocLink("Docs", "https://example.invalid/plan-card"),),
    )


@pytest.fixture
def renderer() -> HtmlContentRenderer:
    return HtmlContentRenderer()


def _render(view: SectionView, renderer: HtmlContentRenderer) -> BeautifulSoup:
    template = create_environment().from_string(
        '{% from "section.jinja" import section_card %}{{ section_card(section) }}'
    )
    return BeautifulSoup(template.render(section=view.context(renderer)), "html.parser")


def test_content_blocks_follow_display_order(full_section: Section) -> None:
    kinds = [block.kind for block in SectionView(full_section).content_blocks()]
    assert kinds == [
        BlockKind.DESCRIPTION,
        BlockKind.CODE,
        BlockKind.PARAMETERS,
        BlockKind.RETURNS,
        BlockKind.EXAMPLE,
        BlockKind.EXAMPLE,
        BlockKind.NOTES,
        BlockKind.LINKS,
    ]


def test_missing_fields_produce_no_blocks() -> None:
    section = Section(id="bare", title="Bare", type=SectionType.CONSTANT)
    assert SectionView(section).content_blocks() == []


def test_example_language_defaults_to_typescript(full_section: Section) -> None:
    examples = [
        block
        for block in SectionView(full_section).content_blocks()
        if block.kind is BlockKind.EXAMPLE
    ]
    assert [block.language for block in examples] == ["typescript", "tsx"]
    assert [block.title for block in examples] == ["Basic", "Styled"]


def test_uncontrolled_view_owns_state(full_section: Section) -> None:
    view = SectionView(full_section, Uncontrolled())
    assert view.is_expanded is False
    view.toggle()
    assert view.is_expanded is True
    view.toggle()
    assert view.is_expanded is False
    assert SectionView(full_section, Uncontrolled(initial=True)).is_expanded is True


def test_controlled_view_forwards_toggle(full_section: Section) -> None:
    calls: list[str] = []
    view = SectionView(
        full_section,
        Controlled(is_expanded=False, on_toggle=lambda: calls.append("toggle")),
    )
    view.toggle()
    view.toggle()
    assert calls == ["toggle", "toggle"]
    assert view.is_expanded is False, "Controlled view must not change on its own"


def test_collapsed_render_has_header_only(
    full_section: Section, renderer: HtmlContentRenderer
) -> None:
    soup = _render(SectionView(full_section), renderer)
    header = soup.select_one("button.devdocs-section-header")
    assert header is not None
    assert header["aria-expanded"] == "false"
    assert "Since v1.0.11" in header.get_text()
    assert "Component" in header.get_text()
    assert soup.select_one(".devdocs-section-body") is None


def test_expanded_render_includes_blocks(
    full_section: Section, renderer: HtmlContentRenderer
) -> None:
    soup = _render(SectionView(full_section, Uncontrolled(initial=True)), renderer)
    assert soup.select_one("button.devdocs-section-header")["aria-expanded"] == "true"
    titles = [h.get_text(strip=True) for h in soup.select(".devdocs-block-title")]
    assert titles == [
        "Code Example",
        "Parameters",
        "Returns",
        "More Examples",
        "Important Notes",
    ]
    assert soup.select_one(".devdocs-description strong").get_text() == "single"
    assert soup.select_one(".devdocs-prop-required") is not None
    languages = [
        div["data-language"] for div in soup.select("div.codehilite[data-language]")
    ]
    assert languages == ["typescript", "typescript", "tsx"]
    link = soup.select_one(".devdocs-links a")
    assert link["href"] == "https://example.invalid/plan-card"


def test_version_line_omitted_without_version(renderer: HtmlContentRenderer) -> None:
    section = Section(id="bare", title="Bare", type=SectionType.HOOK)
    soup = _render(SectionView(section), renderer)
    assert soup.select_one(".devdocs-section-version") is None
