"""Bounded, deduplicated history of generated passwords.

The list is kept most-recent-first.  Storage is pluggable through the
:class:`HistoryStore` protocol so the list logic does not depend on where
entries are kept.
"""

import datetime
import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Protocol

from passforge import HistoryStoreError
from passforge.config import DEFAULT_HISTORY_SIZE

logger = logging.getLogger(__name__)


# ── Storage ────────────────────────────────────────────────────────────────


class HistoryStore(Protocol):
    def load(self) -> list[str]: ...

    def save(self, entries: list[str]) -> None: ...


class MemoryHistoryStore:
    """Keeps entries in process memory."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries = list(entries)

    def load(self) -> list[str]:
        return list(self._entries)

    def save(self, entries: list[str]) -> None:
        self._entries = list(entries)


class JsonFileHistoryStore:
    """Keeps entries as a JSON array in a file.

    A missing file reads as an empty history.  Saving an empty history
    removes the file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> list[str]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise HistoryStoreError(f"Cannot read history from {self.path}: {exc}") from exc

        if not isinstance(data, list) or not all(isinstance(e, str) for e in data):
            raise HistoryStoreError(f"History file {self.path} is not a list of strings")
        return data

    def save(self, entries: list[str]) -> None:
        try:
            if not entries:
                self.path.unlink(missing_ok=True)
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(list(entries)), encoding="utf-8")
        except OSError as exc:
            raise HistoryStoreError(f"Cannot write history to {self.path}: {exc}") from exc


# ── History list ───────────────────────────────────────────────────────────


class PasswordHistory:
    """Most-recent-first list of passwords, capped at *capacity* entries.

    Adding a password that is already present (exact match) does nothing.
    Every change is written through to the store.
    """

    def __init__(
        self,
        store: HistoryStore | None = None,
        capacity: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.store = store if store is not None else MemoryHistoryStore()
        self.capacity = capacity
        # Stores written by other tools may hold duplicates or too many entries.
        self._entries = list(dict.fromkeys(self.store.load()))[:capacity]
        logger.debug("Loaded %d history entries", len(self._entries))

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __contains__(self, password: object) -> bool:
        return password in self._entries

    def add(self, password: str) -> bool:
        """Record *password*; return False if it was already present."""
        if password in self._entries:
            return False
        self._entries.insert(0, password)
        del self._entries[self.capacity:]
        self.store.save(self._entries)
        return True

    def clear(self) -> None:
        self._entries = []
        self.store.save(self._entries)
        logger.info("History cleared")

    def export_text(self) -> str:
        """Entries one per line, most recent first."""
        return "\n".join(self._entries)


# ── Export ─────────────────────────────────────────────────────────────────


def export_filename(day: datetime.date | None = None) -> str:
    """Return ``passwords_<YYYY-MM-DD>.txt`` for *day* (today by default)."""
    day = day or datetime.date.today()
    return f"passwords_{day.isoformat()}.txt"


def write_export(
    history: PasswordHistory,
    directory: Path | str,
    day: datetime.date | None = None,
) -> Path:
    """Write the history export into *directory* and return the file path."""
    if not len(history):
        raise HistoryStoreError("No passwords to download")

    path = Path(directory) / export_filename(day)
    try:
        path.write_text(history.export_text(), encoding="utf-8")
    except OSError as exc:
        raise HistoryStoreError(f"Cannot write export to {path}: {exc}") from exc
    logger.info("Exported %d passwords to %s", len(history), path)
    return path
