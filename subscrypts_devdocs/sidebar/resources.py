"""Host-page resources the sidebar holds while it is open.

Opening the sidebar suppresses background scrolling and listens for the
Escape key on the host document. Both are acquired together by
:func:`enter_open_state`, which hands back an :class:`OpenStateHandle`.
Releasing the handle undoes both acquisitions in reverse order, once, no
matter how many exit paths call it.
"""

from __future__ import annotations

import contextlib
import dataclasses as dc
import typing as typ

from subscrypts_devdocs._constants import ESCAPE_KEY

KeyListener = typ.Callable[[str], None]


@dc.dataclass(slots=True)
class ResourceCounters:
    """Acquire/release tallies kept by :class:`HostDocument`."""

    scroll_locks_acquired: int = 0
    scroll_locks_released: int = 0
    key_listeners_added: int = 0
    key_listeners_removed: int = 0

    @property
    def balanced(self) -> bool:
        """Return True when every acquisition has a matching release."""
        return (
            self.scroll_locks_acquired == self.scroll_locks_released
            and self.key_listeners_added == self.key_listeners_removed
        )


class HostDocument:
    """The page hosting the sidebar: body overflow style and key listeners."""

    def __init__(self, *, body_overflow: str = "") -> None:
        self.body_overflow = body_overflow
        self.counters = ResourceCounters()
        self._key_listeners: list[KeyListener] = []

    @property
    def scroll_locked(self) -> bool:
        return self.body_overflow == "hidden"

    @property
    def key_listener_count(self) -> int:
        return len(self._key_listeners)

    def add_key_listener(self, listener: KeyListener) -> None:
        self._key_listeners.append(listener)
        self.counters.key_listeners_added += 1

    def remove_key_listener(self, listener: KeyListener) -> None:
        if listener not in self._key_listeners:
            return
        self._key_listeners.remove(listener)
        self.counters.key_listeners_removed += 1

    def dispatch_key(self, key: str) -> None:
        """Deliver a key-down event to every listener registered right now."""
        for listener in tuple(self._key_listeners):
            listener(key)


@contextlib.contextmanager
def scroll_lock(document: HostDocument) -> typ.Iterator[None]:
    """Hide body overflow for the duration of the block, then restore it."""
    previous = document.body_overflow
    document.body_overflow = "hidden"
    document.counters.scroll_locks_acquired += 1
    try:
        yield
    finally:
        document.body_overflow = previous
        document.counters.scroll_locks_released += 1


@contextlib.contextmanager
def escape_listener(
    document: HostDocument, on_escape: typ.Callable[[], None]
) -> typ.Iterator[KeyListener]:
    """Register a key listener calling ``on_escape`` for the Escape key."""

    def _handle(key: str) -> None:
        if key == ESCAPE_KEY:
            on_escape()

    document.add_key_listener(_handle)
    try:
        yield _handle
    finally:
        document.remove_key_listener(_handle)


class OpenStateHandle:
    """Disposer for the resources acquired on entering the open state."""

    def __init__(self, stack: contextlib.ExitStack) -> None:
        self._stack = stack
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Release every held resource; later calls do nothing."""
        if self._released:
            return
        self._released = True
        self._stack.close()


def enter_open_state(
    document: HostDocument, on_escape: typ.Callable[[], None]
) -> OpenStateHandle:
    """Acquire the scroll lock and the Escape listener as one unit.

    Parameters
    ----------
    document : HostDocument
        Host page receiving the scroll lock and the key listener.
    on_escape : Callable[[], None]
        Invoked when the Escape key is dispatched while the handle is held.

    Returns
    -------
    OpenStateHandle
        Handle whose :meth:`~OpenStateHandle.release` gives both resources
        back exactly once.
    """
    with contextlib.ExitStack() as stack:
        stack.enter_context(scroll_lock(document))
        stack.enter_context(escape_listener(document, on_escape))
        return OpenStateHandle(stack.pop_all())


__all__ = [
    "HostDocument",
    "KeyListener",
    "OpenStateHandle",
    "ResourceCounters",
    "enter_open_state",
    "escape_listener",
    "scroll_lock",
]
