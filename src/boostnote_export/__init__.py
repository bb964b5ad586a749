"""Boostnote vault to Markdown export library."""

from boostnote_export.archiver import archive_note
from boostnote_export.cleaner import clear_export_dirs
from boostnote_export.errors import (
    AlreadyArchivedError,
    ArchiveError,
    ConfigurationError,
    FolderNotFoundError,
    NoteNotFoundError,
    PartialArchiveError,
    VaultError,
)
from boostnote_export.exporter import export_notes, render_metadata
from boostnote_export.filters import filter_by_folder_name
from boostnote_export.folders import FolderCatalog, NoteFolder
from boostnote_export.note import Note
from boostnote_export.parser import adjust_content, extract_attachment_refs, normalize_name, strip_markers
from boostnote_export.paths import VaultPaths
from boostnote_export.reader import read_notes
from boostnote_export.vault import Vault

__all__ = [
    "Note",
    "NoteFolder",
    "FolderCatalog",
    "Vault",
    "VaultPaths",
    "read_notes",
    "filter_by_folder_name",
    "export_notes",
    "render_metadata",
    "archive_note",
    "clear_export_dirs",
    "extract_attachment_refs",
    "strip_markers",
    "adjust_content",
    "normalize_name",
    "VaultError",
    "ConfigurationError",
    "FolderNotFoundError",
    "ArchiveError",
    "NoteNotFoundError",
    "AlreadyArchivedError",
    "PartialArchiveError",
]
