"""Persisted open/closed and section-expansion state for the developer sidebar.

:class:`SidebarStateController` owns a :class:`SidebarState` snapshot and
writes it through to a :class:`~subscrypts_devdocs.state.storage.StoragePort`
after every operation. Storage is only read once, at construction; a second
controller on the same storage keeps its own in-memory state and the last
writer wins.

Example
-------
>>> from subscrypts_devdocs.state import MemoryStorage, SidebarStateController
>>> controller = SidebarStateController(MemoryStorage())
>>> controller.open()
>>> controller.toggle_section("plan-card")
>>> controller.state
SidebarState(is_open=True, expanded_sections=frozenset({'plan-card'}))
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import typing as typ

from subscrypts_devdocs._constants import STORAGE_KEY_OPEN, STORAGE_KEY_SECTIONS

from .storage import StorageError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .storage import StoragePort

logger = logging.getLogger(__name__)

StateListener = typ.Callable[["SidebarState"], None]


@dc.dataclass(frozen=True, slots=True)
class SidebarState:
    """Snapshot of the sidebar UI state.

    Attributes
    ----------
    is_open : bool
        Whether the sidebar is shown.
    expanded_sections : frozenset[str]
        Ids of sections rendered expanded. Ids that do not belong to the
        displayed bundle are kept and simply never match a section.
    """

    is_open: bool = False
    expanded_sections: frozenset[str] = frozenset()


class SidebarStateController:
    """Mutate, persist, and broadcast the sidebar state."""

    def __init__(self, storage: StoragePort) -> None:
        """Load the persisted state from ``storage``.

        Parameters
        ----------
        storage : StoragePort
            Backend holding the two persisted entries. Read failures or
            corrupt data fall back to a closed sidebar with nothing expanded.
        """
        self._storage = storage
        self._listeners: list[StateListener] = []
        self._state = self._load()

    @property
    def state(self) -> SidebarState:
        """Return the current state snapshot."""
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def expanded_sections(self) -> frozenset[str]:
        return self._state.expanded_sections

    def is_expanded(self, section_id: str) -> bool:
        """Return whether ``section_id`` is in the expansion set."""
        return section_id in self._state.expanded_sections

    def toggle(self) -> None:
        """Flip the open flag."""
        self._commit(dc.replace(self._state, is_open=not self._state.is_open))

    def open(self) -> None:
        self._commit(dc.replace(self._state, is_open=True))

    def close(self) -> None:
        self._commit(dc.replace(self._state, is_open=False))

    def toggle_section(self, section_id: str) -> None:
        """Add ``section_id`` to the expansion set, or remove it if present."""
        self._commit_sections(self._state.expanded_sections ^ {section_id})

    def expand_section(self, section_id: str) -> None:
        self._commit_sections(self._state.expanded_sections | {section_id})

    def collapse_section(self, section_id: str) -> None:
        self._commit_sections(self._state.expanded_sections - {section_id})

    def expand_all(self, section_ids: cabc.Iterable[str]) -> None:
        """Add every id in ``section_ids`` to the expansion set.

        Callers pass the ids of the bundle currently displayed; ids already
        expanded for other routes are kept.
        """
        self._commit_sections(self._state.expanded_sections | frozenset(section_ids))

    def collapse_all(self) -> None:
        """Clear the expansion set."""
        self._commit_sections(frozenset())

    def reset(self) -> None:
        """Forget the persisted state and return to the defaults."""
        for key in (STORAGE_KEY_OPEN, STORAGE_KEY_SECTIONS):
            try:
                self._storage.remove(key)
            except StorageError as exc:
                logger.warning("Failed to clear dev sidebar state: %s", exc)
        self._state = SidebarState()
        self._notify()

    def subscribe(self, listener: StateListener) -> typ.Callable[[], None]:
        """Call ``listener`` with the new state after every operation.

        Returns
        -------
        Callable[[], None]
            Unsubscribe function; calling it more than once is harmless.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _commit_sections(self, expanded: frozenset[str]) -> None:
        self._commit(dc.replace(self._state, expanded_sections=expanded))

    def _commit(self, state: SidebarState) -> None:
        self._state = state
        self._save()
        self._notify()

    def _notify(self) -> None:
        for listener in tuple(self._listeners):
            listener(self._state)

    def _load(self) -> SidebarState:
        try:
            open_flag = self._storage.get(STORAGE_KEY_OPEN)
            sections_raw = self._storage.get(STORAGE_KEY_SECTIONS)
            expanded = _decode_sections(sections_raw) if sections_raw else frozenset()
        except (StorageError, ValueError) as exc:
            logger.warning("Failed to load dev sidebar state: %s", exc)
            return SidebarState()
        return SidebarState(is_open=open_flag == "true", expanded_sections=expanded)

    def _save(self) -> None:
        try:
            self._storage.set(STORAGE_KEY_OPEN, "true" if self._state.is_open else "false")
            self._storage.set(
                STORAGE_KEY_SECTIONS,
                json.dumps(sorted(self._state.expanded_sections)),
            )
        except StorageError as exc:
            logger.warning("Failed to save dev sidebar state: %s", exc)


def _decode_sections(raw: str) -> frozenset[str]:
    """Decode the persisted JSON array of section ids.

    Raises
    ------
    ValueError
        If ``raw`` is not valid JSON, nests too deeply to decode, or is not
        an array of strings.
    """
    try:
        payload = json.loads(raw)
    except RecursionError as exc:
        msg = "Persisted section ids are nested too deeply to decode"
        raise ValueError(msg) from exc
    if not isinstance(payload, list) or not all(isinstance(i, str) for i in payload):
        msg = f"Expected a JSON array of section ids, got {raw!r}"
        raise ValueError(msg)
    return frozenset(payload)


__all__ = ["SidebarState", "SidebarStateController", "StateListener"]
