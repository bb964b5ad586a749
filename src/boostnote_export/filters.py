"""Folder-based note selection."""

from __future__ import annotations

from boostnote_export.folders import FolderCatalog
from boostnote_export.note import Note


def filter_by_folder_name(notes: list[Note], catalog: FolderCatalog, folder_name: str) -> list[Note]:
    """Return the notes in *folder_name*, keeping their order.

    An unknown folder name raises :class:`~boostnote_export.errors.FolderNotFoundError`;
    a known folder without notes yields ``[]``.
    """
    folder_id = catalog.find_by_name(folder_name).id
    return [n for n in notes if n.note_folder_id == folder_id]
