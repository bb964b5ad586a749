"""Tests for the boostnote-export command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from boostnote_export.cli import app
from boostnote_export.paths import VaultPaths

from helpers import write_attachment, write_note

runner = CliRunner()


@pytest.fixture()
def base_args(vault_dir: Path, export_dir: Path) -> list[str]:
    return ["--vault", str(vault_dir), "--export-dir", str(export_dir)]


class TestListFolders:
    def test_lists_folders(self, base_args: list[str]):
        result = runner.invoke(app, [*base_args, "list-folders"])
        assert result.exit_code == 0
        assert "Work" in result.output
        assert "Personal" in result.output

    def test_missing_vault(self, tmp_path: Path):
        result = runner.invoke(app, ["--vault", str(tmp_path / "nope"), "list-folders"])
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestListNotes:
    def test_all_notes(self, base_args: list[str], paths: VaultPaths):
        write_note(paths, "a", title="Alpha", folder="f1")
        write_note(paths, "b", title="Beta", folder="f2")
        result = runner.invoke(app, [*base_args, "list-notes"])
        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "Beta" in result.output

    def test_filtered(self, base_args: list[str], paths: VaultPaths):
        write_note(paths, "a", title="Alpha", folder="f1")
        write_note(paths, "b", title="Beta", folder="f2")
        result = runner.invoke(app, [*base_args, "list-notes", "--folder", "Work"])
        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "Beta" not in result.output

    def test_unknown_folder(self, base_args: list[str]):
        result = runner.invoke(app, [*base_args, "list-notes", "--folder", "Nope"])
        assert result.exit_code == 1
        assert "Nope" in result.output


class TestExportNotes:
    def test_export_all(self, base_args: list[str], paths: VaultPaths):
        write_attachment(paths, "img.png")
        write_note(paths, "a", title="Alpha", content="![x](:storage/img.png)")
        result = runner.invoke(app, [*base_args, "export-notes"])
        assert result.exit_code == 0
        assert (paths.export_notes_dir / "Alpha.md").exists()
        assert (paths.export_attachments_dir / "img.png").exists()

    def test_add_tags_rejected(self, base_args: list[str], paths: VaultPaths):
        write_note(paths, "a", title="Alpha")
        result = runner.invoke(app, [*base_args, "export-notes", "--add-tags", "x,y"])
        assert result.exit_code == 1
        assert "not supported" in result.output
        assert not paths.export_notes_dir.exists()

    def test_clear_and_archive(self, base_args: list[str], paths: VaultPaths):
        paths.export_notes_dir.mkdir(parents=True)
        (paths.export_notes_dir / "Stale.md").write_text("stale", encoding="utf-8")
        write_note(paths, "a", title="Alpha")

        result = runner.invoke(app, [*base_args, "export-notes", "--clear-export-dirs", "--archive"])

        assert result.exit_code == 0
        assert not (paths.export_notes_dir / "Stale.md").exists()
        assert (paths.export_notes_dir / "Alpha.md").exists()
        assert paths.archived_record_path("a").exists()

    def test_dangling_folder_fails(self, base_args: list[str], paths: VaultPaths):
        write_note(paths, "a", title="Alpha", folder="dangling")
        result = runner.invoke(app, [*base_args, "export-notes"])
        assert result.exit_code == 1
        assert "dangling" in result.output

    def test_no_folder_metadata(self, base_args: list[str], paths: VaultPaths):
        write_note(paths, "a", title="Alpha", folder="dangling")
        result = runner.invoke(app, [*base_args, "export-notes", "--no-folder-metadata"])
        assert result.exit_code == 0
        assert "folder:" not in (paths.export_notes_dir / "Alpha.md").read_text(encoding="utf-8")

    def test_second_archive_fails(self, base_args: list[str], paths: VaultPaths):
        write_note(paths, "a", title="Alpha")
        assert runner.invoke(app, [*base_args, "export-notes", "--archive"]).exit_code == 0
        # Put the record back so it is read again
        paths.archived_record_path("a").rename(paths.note_record_path("a"))
        paths.archived_record_path("a").write_text("{}", encoding="utf-8")
        result = runner.invoke(app, [*base_args, "export-notes", "--archive"])
        assert result.exit_code == 1
        assert "already archived" in result.output
