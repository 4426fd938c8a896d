"""Configuration loading from environment variables and envedit.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "envedit.toml"
_BACKUP_DIRNAME = ".env-backups"


@dataclass
class BackupConfig:
    """Backup settings. ``directory`` defaults to a folder beside the env file."""

    enabled: bool = True
    directory: Path | None = None
    keep: int = 10


@dataclass
class EnvEditConfig:
    """Top-level envedit configuration."""

    env_file: Path = field(default_factory=lambda: Path.cwd() / ".env")
    backup: BackupConfig = field(default_factory=BackupConfig)
    locale: str = "en"
    log_level: str = "INFO"

    @property
    def backup_dir(self) -> Path:
        return self.backup.directory or self.env_file.parent / _BACKUP_DIRNAME


def _as_bool(value: str | bool) -> bool:
    if isinstance(value, bool):
        return value
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Path | None = None) -> EnvEditConfig:
    """Load configuration from environment variables and optional envedit.toml.

    Priority: environment variables > envedit.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".envedit" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    backup_data = file_data.get("backup", {})
    backup_dir = os.getenv("ENVEDIT_BACKUP_DIR", backup_data.get("directory"))

    return EnvEditConfig(
        env_file=Path(os.getenv("ENVEDIT_FILE", file_data.get("env_file", str(Path.cwd() / ".env")))),
        backup=BackupConfig(
            enabled=_as_bool(os.getenv("ENVEDIT_BACKUP_ENABLED", backup_data.get("enabled", True))),
            directory=Path(backup_dir) if backup_dir else None,
            keep=int(os.getenv("ENVEDIT_BACKUP_KEEP", backup_data.get("keep", 10))),
        ),
        locale=os.getenv("ENVEDIT_LOCALE", file_data.get("locale", "en")),
        log_level=os.getenv("ENVEDIT_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
