"""EnvEditor — wires the file store, backups and key manager together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from envedit.backups import BackupInfo, BackupManager
from envedit.config import EnvEditConfig
from envedit.entry import Entry, Value
from envedit.keys import KeyManager
from envedit.store import EnvFileStore

logger = logging.getLogger(__name__)


class EnvEditor:
    """Single entry point for editing one env file."""

    def __init__(self, config: EnvEditConfig) -> None:
        self.config = config
        self.backups = BackupManager(config.backup_dir, keep=config.backup.keep)
        self.store = EnvFileStore(
            config.env_file,
            backups=self.backups if config.backup.enabled else None,
        )
        self.keys_manager = KeyManager(self.store)

    @property
    def file_path(self) -> Path:
        return self.config.env_file

    # -- Content -----------------------------------------------------------

    def entries(self) -> list[Entry]:
        return self.store.load_sequence()

    def keys(self) -> dict[str, Value]:
        """Key/value pairs in file order, separators left out."""
        return {e.key: e.value for e in self.entries() if not e.is_separator}

    # -- Keys --------------------------------------------------------------

    def has(self, key: str) -> bool:
        return self.keys_manager.has(key)

    def get(self, key: str, default: Any = None) -> Any:
        return self.keys_manager.get(key, default)

    def add(self, key: str, value: Value, *, group: int | None = None,
            index: float | None = None) -> bool:
        return self.keys_manager.add(key, value, group=group, index=index)

    def edit(self, key: str, value: Value) -> bool:
        return self.keys_manager.edit(key, value)

    def delete(self, key: str) -> bool:
        return self.keys_manager.delete(key)

    # -- Backups -----------------------------------------------------------

    def backup(self) -> Path:
        return self.backups.backup(self.file_path)

    def list_backups(self) -> list[BackupInfo]:
        return self.backups.list_backups(self.file_path.name)

    def restore(self, name: str) -> Path:
        return self.backups.restore(name, self.file_path)

    def delete_backup(self, name: str) -> None:
        self.backups.delete(name)
