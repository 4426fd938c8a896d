"""Tests for the command-line entry point and error rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from envedit.__main__ import main
from envedit.errors import BackupNotFound, EnvEditError, KeyAlreadyExists, KeyNotExists
from envedit.messages import render_error


@pytest.fixture
def env_file(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / ".env"
    path.write_text("APP_NAME=demo\nAPP_ENV=local\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENVEDIT_FILE", str(path))
    monkeypatch.setenv("ENVEDIT_BACKUP_DIR", str(tmp_path / "backups"))
    monkeypatch.delenv("ENVEDIT_LOCALE", raising=False)
    return path


class TestRenderError:
    def test_english(self):
        assert render_error(KeyAlreadyExists("A")) == "The key 'A' already exists."
        assert render_error(KeyNotExists("B")) == "The key 'B' does not exist."
        assert render_error(BackupNotFound("x.bak")) == "No backup named 'x.bak' was found."

    def test_greek(self):
        assert render_error(KeyNotExists("B"), "el") == "Το κλειδί 'B' δεν υπάρχει."

    def test_unknown_locale_falls_back(self):
        assert render_error(KeyNotExists("B"), "xx") == "The key 'B' does not exist."

    def test_unknown_kind(self):
        assert render_error(EnvEditError("boom")) == "boom"


class TestCommands:
    def test_usage(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert main(["frobnicate"]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_wrong_arity(self, env_file: Path, capsys):
        assert main(["get"]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_get(self, env_file: Path, capsys):
        assert main(["get", "APP_NAME"]) == 0
        assert capsys.readouterr().out.strip() == "demo"

    def test_get_default(self, env_file: Path, capsys):
        assert main(["get", "MISSING", "fallback"]) == 0
        assert capsys.readouterr().out.strip() == "fallback"

    def test_get_missing(self, env_file: Path):
        assert main(["get", "MISSING"]) == 1

    def test_get_blank_value(self, env_file: Path, capsys):
        env_file.write_text("APP_NAME=demo\nAPP_DEBUG=\n", encoding="utf-8")
        assert main(["get", "APP_DEBUG"]) == 0
        assert capsys.readouterr().out == "\n"

    def test_has(self, env_file: Path):
        assert main(["has", "APP_ENV"]) == 0
        assert main(["has", "NOPE"]) == 1

    def test_add_edit_delete(self, env_file: Path):
        assert main(["add", "MAIL_HOST", "smtp"]) == 0
        assert main(["edit", "MAIL_HOST", "smtp2"]) == 0
        assert "MAIL_HOST=smtp2" in env_file.read_text(encoding="utf-8")
        assert main(["delete", "MAIL_HOST"]) == 0
        assert "MAIL_HOST" not in env_file.read_text(encoding="utf-8")

    def test_add_with_group(self, env_file: Path):
        assert main(["add", "APP_URL", "http://x", "1"]) == 0
        assert env_file.read_text(encoding="utf-8").endswith("\nAPP_URL=http://x")

    def test_error_is_rendered(self, env_file: Path, capsys):
        assert main(["add", "APP_NAME", "x"]) == 1
        assert capsys.readouterr().err.strip() == "The key 'APP_NAME' already exists."

    def test_error_uses_locale(self, env_file: Path, capsys, monkeypatch):
        monkeypatch.setenv("ENVEDIT_LOCALE", "el")
        assert main(["delete", "NOPE"]) == 1
        assert capsys.readouterr().err.strip() == "Το κλειδί 'NOPE' δεν υπάρχει."

    def test_list(self, env_file: Path, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "APP_NAME=demo" in out
        assert "APP_ENV=local" in out

    def test_backup_restore(self, env_file: Path, capsys):
        original = env_file.read_text(encoding="utf-8")
        assert main(["backup"]) == 0
        name = capsys.readouterr().out.strip()
        assert main(["edit", "APP_NAME", "changed"]) == 0

        assert main(["restore", name]) == 0
        assert env_file.read_text(encoding="utf-8") == original

        assert main(["backups"]) == 0
        assert name in capsys.readouterr().out

    def test_restore_unknown(self, env_file: Path, capsys):
        assert main(["restore", "nope.bak"]) == 1
        assert "nope.bak" in capsys.readouterr().err
