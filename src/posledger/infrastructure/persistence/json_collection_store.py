"""JSON-file blob store: one file per named collection.

This is the only class that touches the data directory.  Reads are
forgiving: a missing, unreadable or corrupt file yields the caller's
default and a warning in the log, never an exception.  Writes are
atomic per collection (temp file + ``os.replace``) and raise
StorageError on failure, leaving the previous file in place.

Each collection has its own re-entrant lock; ``update`` runs a whole
read-modify-write under it.  There is no cross-collection transaction.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

from posledger.domain.exceptions import SerializationError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCollectionStore:

    def __init__(self, root: Path) -> None:
        self._root = Path(root)
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    # --- Collection access ----------------------------------------------------

    def get(self, name: str, default: T) -> T:
        """Return the decoded collection, or *default* if it is absent or bad."""
        path = self._path(name)
        with self.locked(name):
            if not path.exists():
                return default
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                self._log_decode_failure(name, SerializationError(str(exc)))
                return default
            try:
                value = json.loads(text)
            except json.JSONDecodeError as exc:
                self.quarantine(name, str(exc))
                return default

            if default is not None and not isinstance(value, type(default)):
                self.quarantine(
                    name,
                    f"expected {type(default).__name__}, found {type(value).__name__}",
                )
                return default
            return value

    def set(self, name: str, value: Any) -> None:
        """Atomically replace the collection with *value*."""
        path = self._path(name)
        try:
            payload = json.dumps(value, indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot encode collection '{name}': {exc}") from exc

        with self.locked(name):
            try:
                self._root.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{name}.", suffix=".tmp", dir=self._root
                )
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as handle:
                        handle.write(payload)
                        handle.flush()
                        os.fsync(handle.fileno())
                    os.replace(tmp_name, path)
                except BaseException:
                    Path(tmp_name).unlink(missing_ok=True)
                    raise
            except OSError as exc:
                raise StorageError(f"Cannot write collection '{name}': {exc}") from exc

    def update(self, name: str, fn: Callable[[T], T], default: T) -> T:
        """Read, transform and write a collection as one critical section."""
        with self.locked(name):
            value = fn(self.get(name, default))
            self.set(name, value)
            return value

    def remove(self, name: str) -> None:
        with self.locked(name):
            try:
                self._path(name).unlink(missing_ok=True)
            except OSError as exc:
                raise StorageError(f"Cannot remove collection '{name}': {exc}") from exc

    def clear(self, names: list[str]) -> None:
        for name in names:
            self.remove(name)

    def exists(self, name: str) -> bool:
        return self._path(name).exists()

    def quarantine(self, name: str, reason: str) -> None:
        """Move an undecodable collection aside so it is not overwritten.

        The next ``get`` sees no file and returns the default.
        """
        path = self._path(name)
        with self.locked(name):
            if not path.exists():
                return
            stamp = datetime.now().strftime("%Y%m%d%H%M%S%f")
            target = path.with_name(f"{name}.corrupt-{stamp}.json")
            try:
                os.replace(path, target)
            except OSError as exc:
                logger.warning("Could not move corrupt collection '%s' aside: %s", name, exc)
                return
        logger.warning("Collection '%s' is corrupt (%s); moved to %s", name, reason, target)

    # --- Locking --------------------------------------------------------------

    @contextmanager
    def locked(self, name: str) -> Iterator[None]:
        with self._locks_guard:
            lock = self._locks.setdefault(name, threading.RLock())
        with lock:
            yield

    # --- Internal helpers -----------------------------------------------------

    def _path(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name.startswith("."):
            raise ValueError(f"Invalid collection name: {name!r}")
        return self._root / f"{name}.json"

    def _log_decode_failure(self, name: str, exc: SerializationError) -> None:
        logger.warning(
            "Collection '%s' in %s is unreadable (%s); using an empty collection",
            name, self._root, exc,
        )
