"""Entry point: python -m envedit <command> [args]"""

from __future__ import annotations

import logging
import sys

from envedit.config import load_config
from envedit.editor import EnvEditor
from envedit.errors import EnvEditError
from envedit.messages import render_error

_USAGE = """Usage: python -m envedit <command> [args]
  list                   — Show all lines with group/index
  get KEY [DEFAULT]      — Print the value of KEY
  has KEY                — Exit 0 if KEY exists
  add KEY VALUE [GROUP]  — Add a new key
  edit KEY VALUE         — Change the value of KEY
  delete KEY             — Remove KEY
  backup                 — Back up the env file
  backups                — List backups
  restore NAME           — Restore backup NAME"""

# command -> (min args, max args)
_ARITY = {
    "list": (0, 0),
    "get": (1, 2),
    "has": (1, 1),
    "add": (2, 3),
    "edit": (2, 2),
    "delete": (1, 1),
    "backup": (0, 0),
    "backups": (0, 0),
    "restore": (1, 1),
}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _usage() -> int:
    print(_USAGE)
    return 1


def _run(editor: EnvEditor, cmd: str, args: list[str]) -> int:
    if cmd == "list":
        for entry in editor.entries():
            print(f"{entry.group:>3} {entry.index:>6} | {entry.serialize()}")
        return 0
    if cmd == "get":
        value = editor.get(args[0], args[1] if len(args) > 1 else None)
        if value is None:
            # Blank values print as an empty line; only a missing key fails.
            if not editor.has(args[0]):
                return 1
            value = ""
        print(value)
        return 0
    if cmd == "has":
        return 0 if editor.has(args[0]) else 1
    if cmd == "add":
        group = int(args[2]) if len(args) > 2 else None
        return 0 if editor.add(args[0], args[1], group=group) else 1
    if cmd == "edit":
        return 0 if editor.edit(args[0], args[1]) else 1
    if cmd == "delete":
        return 0 if editor.delete(args[0]) else 1
    if cmd == "backup":
        print(editor.backup().name)
        return 0
    if cmd == "backups":
        for info in editor.list_backups():
            print(f"{info.name}  {info.created_at}  {info.keys} keys")
        return 0
    if cmd == "restore":
        editor.restore(args[0])
        return 0
    return _usage()


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] not in _ARITY:
        return _usage()

    cmd, args = argv[0], argv[1:]
    low, high = _ARITY[cmd]
    if not low <= len(args) <= high:
        return _usage()

    config = load_config()
    _setup_logging(config.log_level)
    editor = EnvEditor(config)

    try:
        return _run(editor, cmd, args)
    except EnvEditError as e:
        print(render_error(e, config.locale), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
