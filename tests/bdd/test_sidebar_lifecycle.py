"""Behaviour tests for the developer sidebar open/close lifecycle.

The scenarios in ``features/sidebar_lifecycle.feature`` drive a
``SidebarContainer`` mounted on an in-memory ``HostDocument`` and assert on
the scroll lock, the Escape listener counters, and the rendered HTML.

Usage:
    pytest tests/bdd/test_sidebar_lifecycle.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from subscrypts_devdocs.sidebar import HostDocument, SidebarContainer
from subscrypts_devdocs.state import MemoryStorage, SidebarStateController

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "sidebar_lifecycle.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> typ.Iterator[dict[str, typ.Any]]:
    """Share the mounted container across steps and unmount it afterwards."""
    state: dict[str, typ.Any] = {}
    yield state
    container = state.get("container")
    if container is not None:
        container.unmount()


def _container(scenario_state: dict[str, typ.Any]) -> SidebarContainer:
    return scenario_state["container"]


@given(parsers.parse('the host page is at "{pathname}"'))
def given_host_page(scenario_state: dict[str, typ.Any], pathname: str) -> None:
    document = HostDocument()
    controller = SidebarStateController(MemoryStorage())
    container = SidebarContainer(controller, document, pathname)
    container.mount()
    scenario_state["document"] = document
    scenario_state["container"] = container


@when("the sidebar is opened")
def when_opened(scenario_state: dict[str, typ.Any]) -> None:
    _container(scenario_state).open()


@when("the Escape key is pressed")
def when_escape(scenario_state: dict[str, typ.Any]) -> None:
    _container(scenario_state).press_key("Escape")


@when(parsers.parse("the sidebar is dismissed via {exit_path}"))
def when_dismissed(scenario_state: dict[str, typ.Any], exit_path: str) -> None:
    container = _container(scenario_state)
    match exit_path:
        case "toggle":
            container.toggle()
        case "close":
            container.close()
        case "escape":
            container.press_key("Escape")
        case "backdrop":
            container.click_backdrop()
        case _:
            pytest.fail(f"Unknown exit path {exit_path!r}")


@then(parsers.parse('the sidebar shows documentation for "{page_name}"'))
def then_page_name(scenario_state: dict[str, typ.Any], page_name: str) -> None:
    documentation = _container(scenario_state).sidebar_props().documentation
    assert documentation.page_name == page_name, (
        f"Expected page name {page_name!r}, got {documentation.page_name!r}"
    )


@then("the sidebar is open")
def then_open(scenario_state: dict[str, typ.Any]) -> None:
    assert _container(scenario_state).is_open is True


@then("the sidebar is closed")
def then_closed(scenario_state: dict[str, typ.Any]) -> None:
    assert _container(scenario_state).is_open is False


@then("background scrolling is suppressed")
def then_scroll_locked(scenario_state: dict[str, typ.Any]) -> None:
    document: HostDocument = scenario_state["document"]
    assert document.scroll_locked, "Expected body overflow to be hidden while open"
    assert document.key_listener_count == 1


@then("background scrolling is restored")
def then_scroll_restored(scenario_state: dict[str, typ.Any]) -> None:
    document: HostDocument = scenario_state["document"]
    assert not document.scroll_locked
    assert document.key_listener_count == 0


@then("the rendered sidebar shows the empty state")
def then_empty_state(scenario_state: dict[str, typ.Any]) -> None:
    soup = BeautifulSoup(_container(scenario_state).render(), "html.parser")
    empty = soup.select_one(".devdocs-empty")
    assert empty is not None, "Expected the empty-state block to be rendered"
    assert "No Documentation Available" in empty.get_text()
    assert soup.select(".devdocs-section") == []


@then("each open-state resource was acquired and released once")
def then_balanced(scenario_state: dict[str, typ.Any]) -> None:
    counters = scenario_state["document"].counters
    assert counters.scroll_locks_acquired == 1
    assert counters.key_listeners_added == 1
    assert counters.balanced, f"Expected balanced resource counters, got {counters}"
