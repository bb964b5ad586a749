"""Vault: one located vault plus its lazily loaded folder catalog."""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path

from boostnote_export.archiver import archive_note
from boostnote_export.cleaner import clear_export_dirs
from boostnote_export.exporter import export_notes
from boostnote_export.filters import filter_by_folder_name
from boostnote_export.folders import FolderCatalog
from boostnote_export.note import Note
from boostnote_export.paths import VaultPaths
from boostnote_export.reader import read_notes

logger = logging.getLogger(__name__)


class Vault:
    """Entry point tying the pipeline stages to one vault and export root.

    Example::

        vault = Vault("~/Boostnote", "~/export")
        notes = vault.notes_in_folder(vault.read_notes(), "Work")
        vault.export(notes, archive=True)
    """

    def __init__(self, vault_dir: Path | str, export_dir: Path | str) -> None:
        self.paths = VaultPaths.locate(vault_dir, export_dir)

    @cached_property
    def catalog(self) -> FolderCatalog:
        """Folder catalog, read from disk on first access only."""
        logger.debug("Loading folder catalog from %s", self.paths.config_file)
        return FolderCatalog.load(self.paths.config_file)

    def read_notes(self) -> list[Note]:
        return read_notes(self.paths)

    def notes_in_folder(self, notes: list[Note], folder_name: str) -> list[Note]:
        return filter_by_folder_name(notes, self.catalog, folder_name)

    def export(self, notes: list[Note], *, archive: bool = False, include_folder: bool = True) -> list[Path]:
        return export_notes(notes, self.paths, self.catalog, archive=archive, include_folder=include_folder)

    def archive(self, note: Note) -> list[Path]:
        return archive_note(note, self.paths)

    def clear_export_dirs(self) -> None:
        clear_export_dirs(self.paths)

    def __repr__(self) -> str:
        return f"Vault({self.paths.vault_dir})"
