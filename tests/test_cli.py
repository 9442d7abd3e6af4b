"""Tests for the toolbox-config CLI (check, upgrade, note-types commands)."""

import io
import json

import pytest

from toolboxconfig.cli import main
from toolboxconfig.defaults import DEFAULT_USERNOTE_TYPES
from toolboxconfig.settings import SETTINGS_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Never read the user's real settings file."""
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(tmp_path / "missing-settings.yaml"))


@pytest.fixture
def page(tmp_path, full_text):
    path = tmp_path / "toolbox.json"
    path.write_text(full_text)
    return path


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCheckCommand:
    """Tests for `toolbox-config check`."""

    def test_valid_page(self, page, capsys):
        """A valid page reports its version."""
        assert _run(["check", str(page)]) == 0
        assert capsys.readouterr().out.strip() == "ok (version 1)"

    def test_invalid_page(self, tmp_path, capsys):
        """Schema violations exit 1 with the first issue on stderr."""
        path = tmp_path / "bad.json"
        path.write_text('{"version": 1, "bogus": 1}')

        assert _run(["check", str(path)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("ConfigValidationError: document: must not have additional properties")

    def test_unparseable_page(self, tmp_path, capsys):
        """Malformed JSON exits 1."""
        path = tmp_path / "bad.json"
        path.write_text("{")

        assert _run(["check", str(path)]) == 1
        assert capsys.readouterr().err.startswith("ConfigParseError:")

    def test_missing_file(self, tmp_path, capsys):
        """Unreadable files exit 1."""
        assert _run(["check", str(tmp_path / "nope.json")]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_undecodable_page(self, tmp_path, capsys):
        """A page that is not UTF-8 text exits 1 with a parse error."""
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"version": 1, "banMacro": "\xff"}')

        assert _run(["check", str(path)]) == 1
        assert capsys.readouterr().err.startswith("ConfigParseError:")

    def test_stdin(self, monkeypatch, minimal_text, capsys):
        """- reads the page from stdin."""
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(minimal_text.encode())))

        assert _run(["check", "-"]) == 0
        assert "ok" in capsys.readouterr().out


class TestUpgradeCommand:
    """Tests for `toolbox-config upgrade`."""

    def test_writes_output_file(self, page, tmp_path, full_document):
        """The normalized page is written to --output."""
        out = tmp_path / "out.json"

        assert _run(["upgrade", str(page), "-o", str(out)]) == 0
        assert json.loads(out.read_text()) == full_document

    def test_unwritable_output(self, page, tmp_path, capsys):
        """A failed write names the output file, not the input."""
        out = tmp_path / "missing" / "out.json"

        assert _run(["upgrade", str(page), "-o", str(out)]) == 1
        assert capsys.readouterr().err.startswith(f"Cannot write {out}")

    def test_materialize_note_types(self, tmp_path, minimal_text, capsys):
        """--materialize-note-types writes the defaults."""
        path = tmp_path / "toolbox.json"
        path.write_text(minimal_text)

        assert _run(["upgrade", str(path), "--materialize-note-types"]) == 0
        assert json.loads(capsys.readouterr().out)["noteTypes"] == DEFAULT_USERNOTE_TYPES

    def test_indent(self, tmp_path, minimal_text, capsys):
        """--indent pretty-prints."""
        path = tmp_path / "toolbox.json"
        path.write_text(minimal_text)

        assert _run(["upgrade", str(path), "--indent", "2"]) == 0
        assert capsys.readouterr().out == '{\n  "version": 1\n}\n'

    def test_rejects_future_version(self, tmp_path, capsys):
        """Pages from a newer schema cannot be upgraded."""
        path = tmp_path / "toolbox.json"
        path.write_text('{"version": 2}')

        assert _run(["upgrade", str(path)]) == 1
        assert capsys.readouterr().err.startswith("ConfigVersionError:")


class TestNoteTypesCommand:
    """Tests for `toolbox-config note-types`."""

    def test_lists_configured_types(self, page, capsys):
        """Each type is printed tab separated."""
        assert _run(["note-types", str(page)]) == 0
        assert capsys.readouterr().out.splitlines() == ["a\tb\tc", "d\te\tf", "g\th\ti"]

    def test_lists_defaults(self, tmp_path, minimal_text, capsys):
        """Unconfigured pages list the default types."""
        path = tmp_path / "toolbox.json"
        path.write_text(minimal_text)

        assert _run(["note-types", str(path)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == len(DEFAULT_USERNOTE_TYPES)


class TestSettingsOption:
    """Tests for --settings."""

    def test_invalid_settings_file(self, page, tmp_path, capsys):
        """Bad settings exit 2."""
        settings = tmp_path / "settings.yaml"
        settings.write_text("note_types: sometimes\n")

        assert _run(["--settings", str(settings), "check", str(page)]) == 2
        assert "Invalid settings" in capsys.readouterr().err

    def test_settings_indent_applies(self, tmp_path, minimal_text, capsys):
        """The settings file indent is used by upgrade."""
        settings = tmp_path / "settings.yaml"
        settings.write_text("indent: 1\n")
        path = tmp_path / "toolbox.json"
        path.write_text(minimal_text)

        assert _run(["-s", str(settings), "upgrade", str(path)]) == 0
        assert capsys.readouterr().out == '{\n "version": 1\n}\n'

    def test_no_command_prints_help(self, capsys):
        """No subcommand exits 1 with usage."""
        assert _run([]) == 1
        assert "usage" in capsys.readouterr().out
