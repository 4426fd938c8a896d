"""Timestamped backups of env files.

Each backup is a frontmatter document: YAML metadata describing where the
copy came from, followed by the env file text as the body. The body's
outer whitespace and the file's line-ending style are recorded in the
metadata so a restore reproduces the original bytes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import frontmatter

from envedit.entry import Entry
from envedit.errors import BackupNotFound, EnvFileNotFound
from envedit.store import detect_newline

logger = logging.getLogger(__name__)

_SUFFIX = ".bak"
_STAMP = re.compile(r"-(\d{8}T\d{12})\.bak$")
_ENDINGS = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}
_ENDING_NAMES = {v: k for k, v in _ENDINGS.items()}


@dataclass
class BackupInfo:
    """Metadata of one stored backup."""

    name: str
    path: Path
    source: str
    created_at: str
    keys: int


class BackupManager:
    """Create, list, restore and prune backups in a single directory."""

    def __init__(self, directory: Path, keep: int = 10) -> None:
        self.directory = directory
        self.keep = max(1, keep)

    def backup(self, path: Path) -> Path:
        """Copy *path* into the backup directory, keep the newest ``keep``."""
        if not path.exists():
            raise EnvFileNotFound(path)
        raw = path.read_bytes().decode("utf-8")
        text = raw.replace("\r\n", "\n").replace("\r", "\n")
        self.directory.mkdir(parents=True, exist_ok=True)

        now = datetime.now()
        target = self.directory / f"{path.name}-{now.strftime('%Y%m%dT%H%M%S%f')}{_SUFFIX}"
        leading = text[: len(text) - len(text.lstrip())]
        rest = text[len(leading):]
        post = frontmatter.Post(
            text.strip(),
            source=str(path),
            created_at=now.isoformat(timespec="seconds"),
            keys=_count_keys(text),
            line_endings=_ENDING_NAMES[detect_newline(raw)],
            leading=leading,
            trailing=rest[len(rest.rstrip()):],
        )
        target.write_text(frontmatter.dumps(post), encoding="utf-8")
        logger.info("Backed up %s to %s", path, target.name)

        self._prune(path.name)
        return target

    def list_backups(self, source_name: str | None = None) -> list[BackupInfo]:
        """All backups, newest first, optionally only those of one file name."""
        found = []
        for path in self._backup_files(source_name):
            post = frontmatter.load(str(path))
            found.append(
                BackupInfo(
                    name=path.name,
                    path=path,
                    source=str(post.metadata.get("source", "")),
                    created_at=str(post.metadata.get("created_at", "")),
                    keys=int(post.metadata.get("keys", 0)),
                )
            )
        return found

    def read(self, name: str) -> str:
        """Original text of backup *name*, with its original line endings."""
        post = frontmatter.load(str(self._path_of(name)))
        text = (
            str(post.metadata.get("leading", ""))
            + post.content.replace("\r\n", "\n")
            + str(post.metadata.get("trailing", ""))
        )
        newline = _ENDINGS.get(str(post.metadata.get("line_endings", "lf")), "\n")
        return text.replace("\n", newline)

    def restore(self, name: str, target: Path) -> Path:
        """Overwrite *target* with backup *name*; the current file is backed up first."""
        text = self.read(name)
        if target.exists():
            self.backup(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8", newline="")
        logger.info("Restored %s from %s", target, name)
        return target

    def delete(self, name: str) -> None:
        self._path_of(name).unlink()
        logger.info("Deleted backup %s", name)

    # -- Internals ---------------------------------------------------------

    def _path_of(self, name: str) -> Path:
        path = self.directory / name
        if Path(name).name != name or not _STAMP.search(name) or not path.is_file():
            raise BackupNotFound(name)
        return path

    def _backup_files(self, source_name: str | None) -> list[Path]:
        if not self.directory.is_dir():
            return []
        files = []
        for path in self.directory.glob(f"*{_SUFFIX}"):
            match = _STAMP.search(path.name)
            if not match:
                continue
            if source_name is not None and path.name[: match.start()] != source_name:
                continue
            files.append((match.group(1), path))
        return [path for _, path in sorted(files, reverse=True)]

    def _prune(self, source_name: str) -> None:
        for old in self._backup_files(source_name)[self.keep:]:
            old.unlink()
            logger.debug("Pruned old backup %s", old.name)


def _count_keys(text: str) -> int:
    return sum(
        1
        for line in text.splitlines()
        if not Entry.parse_line(line, 0, 0).is_separator
    )
