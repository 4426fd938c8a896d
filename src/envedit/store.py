"""File-backed entry store."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from envedit.entry import Entry

if TYPE_CHECKING:
    from envedit.backups import BackupManager

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def detect_newline(text: str) -> str:
    """First line terminator used in *text*, "\n" when there is none."""
    match = _LINE_BREAK.search(text)
    return match.group(0) if match else "\n"


class EnvFileStore:
    """Reads and writes an env file as a sequence of :class:`Entry`.

    Groups start at 1 and advance after every separator line; an entry's
    index is its 0-based line number. Saving keeps the line terminator the
    file already uses.
    """

    def __init__(self, path: Path, backups: BackupManager | None = None) -> None:
        self.path = path
        self.backups = backups

    def read_text(self) -> str:
        if not self.path.exists():
            return ""
        return self.path.read_bytes().decode("utf-8")

    def load_sequence(self) -> list[Entry]:
        if not self.path.exists():
            logger.debug("Env file %s does not exist yet", self.path)
            return []
        entries: list[Entry] = []
        group = 1
        for number, line in enumerate(_LINE_BREAK.split(self.read_text())):
            entry = Entry.parse_line(line, group, number)
            entries.append(entry)
            if entry.is_separator:
                group += 1
        return entries

    def save_sequence(self, entries: list[Entry]) -> bool:
        try:
            content = detect_newline(self.read_text()).join(entry.serialize() for entry in entries)
            if self.backups is not None and self.path.exists():
                self.backups.backup(self.path)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8", newline="")
        except OSError:
            logger.exception("Failed to write %s", self.path)
            return False
        logger.debug("Wrote %d entries to %s", len(entries), self.path)
        return True
