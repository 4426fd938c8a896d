"""Error types raised by envedit.

Errors are structured values: a stable ``kind`` plus the offending key,
backup name or path. Turning them into user-facing text is the job of
:mod:`envedit.messages`.
"""

from __future__ import annotations

from pathlib import Path


class EnvEditError(Exception):
    """Base class for all envedit errors."""

    kind: str = "env_edit_error"


class KeyAlreadyExists(EnvEditError):
    kind = "key_already_exists"

    def __init__(self, key: str) -> None:
        super().__init__(f"Key already exists: {key}")
        self.key = key


class KeyNotExists(EnvEditError):
    kind = "key_not_exists"

    def __init__(self, key: str) -> None:
        super().__init__(f"Key does not exist: {key}")
        self.key = key


class BackupNotFound(EnvEditError):
    kind = "backup_not_found"

    def __init__(self, name: str) -> None:
        super().__init__(f"Backup not found: {name}")
        self.name = name


class EnvFileNotFound(EnvEditError):
    kind = "file_not_found"

    def __init__(self, path: Path) -> None:
        super().__init__(f"Env file not found: {path}")
        self.path = path
