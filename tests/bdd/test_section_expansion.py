"""Behaviour tests for persisted section expansion.

Backed by ``features/section_expansion.feature``; every scenario shares one
``MemoryStorage`` so reloads observe what earlier controllers wrote.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from subscrypts_devdocs.state import MemoryStorage, SidebarStateController

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "section_expansion.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, typ.Any]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _controller(scenario_state: dict[str, typ.Any]) -> SidebarStateController:
    return scenario_state["controller"]


@given("a fresh sidebar state")
def given_fresh_state(scenario_state: dict[str, typ.Any]) -> None:
    storage = MemoryStorage()
    scenario_state["storage"] = storage
    scenario_state["controller"] = SidebarStateController(storage)


@given(parsers.parse('storage holding an open sidebar with sections "{raw}"'))
def given_corrupt_storage(scenario_state: dict[str, typ.Any], raw: str) -> None:
    storage = MemoryStorage(
        {
            "subscrypts-dev-sidebar-state": "true",
            "subscrypts-dev-sidebar-sections": raw,
        }
    )
    scenario_state["storage"] = storage


@when("the sidebar is opened")
def when_opened(scenario_state: dict[str, typ.Any]) -> None:
    _controller(scenario_state).open()


@when(parsers.parse('section "{section_id}" is expanded'))
def when_expanded(scenario_state: dict[str, typ.Any], section_id: str) -> None:
    _controller(scenario_state).expand_section(section_id)


@when(parsers.parse('section "{section_id}" is collapsed'))
def when_collapsed(scenario_state: dict[str, typ.Any], section_id: str) -> None:
    _controller(scenario_state).collapse_section(section_id)


@when("the sidebar state is reloaded from storage")
def when_reloaded(scenario_state: dict[str, typ.Any]) -> None:
    scenario_state["controller"] = SidebarStateController(scenario_state["storage"])


@then("no sections are expanded")
def then_none_expanded(scenario_state: dict[str, typ.Any]) -> None:
    expanded = _controller(scenario_state).expanded_sections
    assert expanded == frozenset(), f"Expected no expanded sections, got {expanded}"


@then(parsers.parse('sections "{section_ids}" are expanded'))
def then_expanded(scenario_state: dict[str, typ.Any], section_ids: str) -> None:
    expected = frozenset(section_ids.split(","))
    assert _controller(scenario_state).expanded_sections == expected


@then("the sidebar is open")
def then_open(scenario_state: dict[str, typ.Any]) -> None:
    assert _controller(scenario_state).is_open is True


@then("the sidebar is closed")
def then_closed(scenario_state: dict[str, typ.Any]) -> None:
    assert _controller(scenario_state).is_open is False
