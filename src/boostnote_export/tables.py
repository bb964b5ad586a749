"""Tabular views over folders and notes as :mod:`polars` DataFrames."""

from __future__ import annotations

import polars as pl

from boostnote_export.folders import FolderCatalog
from boostnote_export.note import Note

_FOLDER_SCHEMA = {"id": pl.Utf8, "name": pl.Utf8, "color": pl.Utf8}
_NOTE_SCHEMA = {"id": pl.Utf8, "name": pl.Utf8, "createdAt": pl.Utf8, "folder": pl.Utf8}


def folders_frame(catalog: FolderCatalog) -> pl.DataFrame:
    return pl.DataFrame([f.to_dict() for f in catalog], schema=_FOLDER_SCHEMA)


def notes_frame(notes: list[Note], catalog: FolderCatalog) -> pl.DataFrame:
    """One row per note; ``folder`` is null when the folder id is unknown."""
    rows = []
    for note in notes:
        folder = catalog.get(note.note_folder_id)
        rows.append(
            {
                "id": note.id,
                "name": note.name,
                "createdAt": note.created_at,
                "folder": folder.name if folder else None,
            }
        )
    return pl.DataFrame(rows, schema=_NOTE_SCHEMA)
