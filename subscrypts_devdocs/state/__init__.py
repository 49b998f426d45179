"""Persisted UI state for the developer documentation sidebar."""

from .controller import SidebarState, SidebarStateController, StateListener
from .storage import MemoryStorage, StorageError, StoragePort, TomlFileStorage

__all__ = [
    "MemoryStorage",
    "SidebarState",
    "SidebarStateController",
    "StateListener",
    "StorageError",
    "StoragePort",
    "TomlFileStorage",
]
