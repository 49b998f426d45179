"""Storage ports backing the persisted sidebar state.

The controller only talks to :class:`StoragePort`, a string key/value
interface modelled on browser ``localStorage``. Two adapters ship here:

* :class:`MemoryStorage` keeps values in a dict for tests and throwaway
  sessions.
* :class:`TomlFileStorage` persists values per origin in a TOML file
  (``~/.config/subscrypts-devdocs/storage.toml`` by default), preserving any
  formatting or other origins already present in the file.

Adapters raise :class:`StorageError` for every backend failure so callers
handle a single exception type.
"""

from __future__ import annotations

import typing as typ

import tomlkit
import tomlkit.exceptions
import tomlkit.items

from subscrypts_devdocs.config.models import default_storage_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class StorageError(RuntimeError):
    """Raised when a storage backend cannot be read or written."""


class StoragePort(typ.Protocol):
    """Durable string key/value storage scoped to a single origin."""

    def get(self, key: str) -> str | None:
        """Return the stored value for ``key`` or ``None`` when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``; removing a missing key is not an error."""
        ...


class MemoryStorage:
    """Dict-backed storage; shared between controllers that share the instance."""

    def __init__(self, initial: cabc.Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of every stored entry."""
        return dict(self._values)


class TomlFileStorage:
    """Per-origin storage persisted as tables in a TOML document.

    Each origin owns one table under ``[origins]``; keys are the storage keys
    and values are plain strings, for example::

        [origins."http://localhost:5173"]
        subscrypts-dev-sidebar-state = "true"
        subscrypts-dev-sidebar-sections = '["hook-usewallet"]'

    Every call re-reads the file so separate processes see each other's last
    write (last writer wins).
    """

    def __init__(self, origin: str, *, path: Path | None = None) -> None:
        self.origin = origin
        self.path = path if path is not None else default_storage_path()

    def get(self, key: str) -> str | None:
        origins = self._read().get("origins")
        if not isinstance(origins, dict):
            return None
        table = origins.get(self.origin)
        if not isinstance(table, dict):
            return None
        value = table.get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        doc = self._read()
        self._origin_table(doc)[key] = value
        self._write(doc)

    def remove(self, key: str) -> None:
        doc = self._read()
        table = self._origin_table(doc)
        if key not in table:
            return
        table.pop(key)
        self._write(doc)

    def _read(self) -> tomlkit.TOMLDocument:
        try:
            return tomlkit.parse(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return tomlkit.document()
        except OSError as exc:
            msg = f"Unable to read storage file {self.path}"
            raise StorageError(msg) from exc
        except UnicodeDecodeError as exc:
            msg = f"Storage file {self.path} is not valid UTF-8"
            raise StorageError(msg) from exc
        except (tomlkit.exceptions.ParseError, RecursionError) as exc:
            msg = f"Unable to parse storage TOML at {self.path}"
            raise StorageError(msg) from exc

    def _origin_table(self, doc: tomlkit.TOMLDocument) -> tomlkit.items.Table:
        origins = doc.get("origins")
        if not isinstance(origins, tomlkit.items.Table):
            origins = tomlkit.table(is_super_table=True)
            doc["origins"] = origins
        table = origins.get(self.origin)
        if not isinstance(table, tomlkit.items.Table):
            table = tomlkit.table()
            origins[self.origin] = table
        return table

    def _write(self, doc: tomlkit.TOMLDocument) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        except OSError as exc:
            msg = f"Unable to write storage file {self.path}"
            raise StorageError(msg) from exc


__all__ = ["MemoryStorage", "StorageError", "StoragePort", "TomlFileStorage"]
