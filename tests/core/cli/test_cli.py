"""Tests for the CLI entry point."""

import sys
from uuid import UUID

import pytest
from click.testing import CliRunner
from loguru import logger

from freewrite.core.cli import main


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def invoke(tmp_path):
    runner = CliRunner()
    base = ["--config", str(tmp_path / "config.yaml"), "--dir", str(tmp_path / "entries")]

    def _invoke(*args, input=None):
        return runner.invoke(main, [*base, *args], input=input)

    return _invoke


class TestCliGroup:
    def test_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Freewrite: just write" in result.output
        for command in ("init", "list", "new", "show", "write", "delete", "export"):
            assert command in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_unparseable_config_is_clean_error(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("paths: [unclosed\n")
        result = CliRunner().invoke(main, ["--config", str(config_file), "--dir", str(tmp_path / "entries"), "list"])
        assert result.exit_code == 1
        assert "Could not parse config file" in result.output
        assert "Traceback" not in result.output

    def test_bad_extension_is_clean_error(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FREEWRITE_ENTRIES__EXTENSION", "a/b")
        result = CliRunner().invoke(main, ["--config", str(tmp_path / "config.yaml"), "--dir", str(tmp_path / "entries"), "list"])
        assert result.exit_code == 1
        assert "Invalid entries.extension" in result.output


class TestEntryCommands:
    def test_list_empty(self, invoke):
        result = invoke("list")
        assert result.exit_code == 0
        assert "No entries yet" in result.output

    def test_init_creates_welcome(self, invoke):
        result = invoke("init")
        assert result.exit_code == 0
        assert "Created welcome entry" in result.output

        listing = invoke("list")
        assert "Welcome to Freewrite" in listing.output
        assert listing.output.startswith("*")

        again = invoke("init")
        assert "nothing to do" in again.output

    def test_new_write_show(self, invoke):
        created = invoke("new")
        assert created.exit_code == 0
        entry_id = UUID(created.output.strip())

        written = invoke("write", str(entry_id), input="\n\nit was a bright cold day")
        assert written.exit_code == 0
        assert "6 words" in written.output

        shown = invoke("show", str(entry_id))
        assert shown.exit_code == 0
        assert shown.output == "\n\nit was a bright cold day"

        listing = invoke("list")
        assert "it was a bright cold day" in listing.output

    def test_write_from_file(self, invoke, tmp_path):
        entry_id = invoke("new").output.strip()
        source = tmp_path / "draft.txt"
        source.write_text("from a file", encoding="utf-8")

        result = invoke("write", entry_id, "--file", str(source))
        assert result.exit_code == 0
        assert invoke("show", entry_id).output == "from a file"

    def test_delete_with_yes(self, invoke):
        entry_id = invoke("new").output.strip()
        result = invoke("delete", entry_id, "--yes")
        assert result.exit_code == 0

        missing = invoke("show", entry_id)
        assert missing.exit_code == 1
        assert "Entry not found" in missing.output

    def test_delete_declined(self, invoke):
        entry_id = invoke("new").output.strip()
        result = invoke("delete", entry_id, input="n\n")
        assert result.exit_code == 1
        assert invoke("show", entry_id).exit_code == 0

    def test_invalid_id(self, invoke):
        result = invoke("show", "not-an-id")
        assert result.exit_code == 2
        assert "not a valid entry id" in result.output

    def test_bracketed_id_accepted(self, invoke):
        entry_id = invoke("new").output.strip()
        assert invoke("show", f"[{entry_id.upper()}]").exit_code == 0


class TestExportCommand:
    def test_export_stdout(self, invoke):
        entry_id = invoke("new").output.strip()
        invoke("write", entry_id, input="\n\nexported words\n")
        result = invoke("export", entry_id, "--format", "txt")
        assert result.exit_code == 0
        assert result.output == "exported words\n"

    def test_export_to_directory(self, invoke, tmp_path):
        entry_id = invoke("new").output.strip()
        invoke("write", entry_id, input="\n\nexported words\n")
        result = invoke("export", entry_id, "-o", str(tmp_path / "out"))
        assert result.exit_code == 0
        assert (tmp_path / "out" / "exported-words.md").read_text(encoding="utf-8") == "exported words"
