"""envedit — structure-preserving editor for KEY=VALUE env files."""

from .entry import Entry, Value, is_blank
from .errors import (
    BackupNotFound,
    EnvEditError,
    EnvFileNotFound,
    KeyAlreadyExists,
    KeyNotExists,
)
from .keys import KeyManager, SequenceStore
from .store import EnvFileStore
from .backups import BackupInfo, BackupManager
from .config import EnvEditConfig, load_config
from .editor import EnvEditor
from .messages import render_error

__all__ = [
    "Entry",
    "Value",
    "is_blank",
    "EnvEditError",
    "KeyAlreadyExists",
    "KeyNotExists",
    "BackupNotFound",
    "EnvFileNotFound",
    "KeyManager",
    "SequenceStore",
    "EnvFileStore",
    "BackupManager",
    "BackupInfo",
    "EnvEditConfig",
    "load_config",
    "EnvEditor",
    "render_error",
]
