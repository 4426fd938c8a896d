"""Key management over an ordered entry sequence."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from envedit.entry import Entry, Value
from envedit.errors import KeyAlreadyExists, KeyNotExists

logger = logging.getLogger(__name__)


@runtime_checkable
class SequenceStore(Protocol):
    """Backing store that hands out and accepts whole entry sequences."""

    def load_sequence(self) -> list[Entry]:
        """Return the current entries in file order."""
        ...

    def save_sequence(self, entries: list[Entry]) -> bool:
        """Persist *entries* in the given order. Returns True on success."""
        ...


class KeyManager:
    """has/get/add/edit/delete on top of a :class:`SequenceStore`.

    Every operation loads a fresh sequence, works on it in memory and hands
    the whole sequence back to the store. Nothing is cached between calls,
    so two managers on the same file follow last-write-wins.
    """

    def __init__(self, store: SequenceStore) -> None:
        self.store = store

    # -- Reads -------------------------------------------------------------

    def has(self, key: str) -> bool:
        return _find(self.store.load_sequence(), key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        entry = _find(self.store.load_sequence(), key)
        return entry.get_value(default) if entry is not None else default

    # -- Mutations ---------------------------------------------------------

    def add(
        self,
        key: str,
        value: Value,
        *,
        group: int | None = None,
        index: float | None = None,
    ) -> bool:
        """Append a new key, opening a new group unless *group* is given."""
        entries = self.store.load_sequence()
        if _find(entries, key) is not None:
            raise KeyAlreadyExists(key)

        target_group = group if group is not None else _max_group(entries) + 1

        if group is None and entries and not entries[-1].is_separator:
            entries.append(Entry.make_separator(target_group, len(entries) + 1))

        if index is None:
            index = _insertion_index(entries, target_group)

        entries.append(Entry(key, value, target_group, index))
        logger.info("Adding key %s (group=%s, index=%s)", key, target_group, index)
        return self._save(entries)

    def edit(self, key: str, value: Value) -> bool:
        entries = self.store.load_sequence()
        entry = _find(entries, key)
        if entry is None:
            raise KeyNotExists(key)
        entry.set_value(value)
        logger.info("Editing key %s", key)
        return self._save(entries)

    def delete(self, key: str) -> bool:
        entries = self.store.load_sequence()
        if _find(entries, key) is None:
            raise KeyNotExists(key)
        remaining = [e for e in entries if e.is_separator or e.key != key]
        logger.info("Deleting key %s", key)
        return self._save(remaining)

    def _save(self, entries: list[Entry]) -> bool:
        ok = self.store.save_sequence(entries)
        if not ok:
            logger.warning("Store rejected save of %d entries", len(entries))
        return ok


def _find(entries: list[Entry], key: str) -> Entry | None:
    for entry in entries:
        if not entry.is_separator and entry.key == key:
            return entry
    return None


def _max_group(entries: list[Entry]) -> int:
    return max((e.group for e in entries), default=0)


def _insertion_index(entries: list[Entry], group: int) -> float:
    """Position just after the last key prefixed with the group, else the tail.

    A key belongs to the group's family when the text before its first
    underscore matches the group name case-insensitively.
    """
    family = str(group).upper()
    for position in range(len(entries) - 1, -1, -1):
        entry = entries[position]
        if entry.is_separator:
            continue
        if entry.key.split("_", 1)[0].upper() == family:
            return position + 0.1
    return len(entries) + 2
