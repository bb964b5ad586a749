"""Markdown exporter.

Each note becomes ``exported-notes/<name>.md``::

    ---
    createdAt: 2020-01-01T10:00:00.000Z
    updatedAt: 2020-01-02T10:00:00.000Z
    tags: #work, #ideas
    folder: Work
    ---

    # Note title
    ...

``tags`` appears only when the note has tags, ``folder`` only when
requested.  Referenced attachments are copied to ``exported-notes/Files/``
under their original relative path, and the Markdown file gets the note's
original timestamps.
"""

from __future__ import annotations

import logging
import os
import shutil
from datetime import datetime
from pathlib import Path

from boostnote_export.archiver import archive_note
from boostnote_export.folders import FolderCatalog
from boostnote_export.note import Note
from boostnote_export.paths import VaultPaths

logger = logging.getLogger(__name__)


def render_metadata(note: Note, catalog: FolderCatalog, include_folder: bool = True) -> str:
    """Build the ``---`` delimited header block for *note*.

    Raises :class:`~boostnote_export.errors.FolderNotFoundError` when
    *include_folder* is set and the note's folder id is unknown.
    """
    fields: list[tuple[str, str]] = [
        ("createdAt", note.created_at),
        ("updatedAt", note.updated_at),
    ]
    if note.tags:
        fields.append(("tags", ", ".join(f"#{_escape(tag)}" for tag in note.tags)))
    if include_folder:
        fields.append(("folder", catalog.find_by_id(note.note_folder_id).name))

    body = "\n".join(f"{key}: {value}" for key, value in fields)
    return f"---\n{body}\n---"


def export_notes(
    notes: list[Note],
    paths: VaultPaths,
    catalog: FolderCatalog,
    *,
    archive: bool = False,
    include_folder: bool = True,
) -> list[Path]:
    """Write every note (and its attachments) into the export tree.

    With *archive*, each note is moved to the archive right after its own
    export succeeds.  Any I/O or vault error aborts the run.

    Notes whose names collide overwrite the earlier file; a warning names
    each collision.  Returns the written Markdown paths in input order.
    """
    _ensure_dirs(paths.export_dirs)
    if archive:
        _ensure_dirs(paths.archive_dirs)

    written: list[Path] = []
    seen: set[Path] = set()
    for note in notes:
        file_path = paths.export_notes_dir / note.filename
        if file_path in seen:
            logger.warning(
                "Note %s shares the file name %s with an earlier note; overwriting it",
                note.id,
                file_path.name,
            )
        seen.add(file_path)
        written.append(export_note(note, paths, catalog, include_folder=include_folder))
        if archive:
            archive_note(note, paths)

    logger.info("Exported %d notes to %s", len(written), paths.export_notes_dir)
    return written


def export_note(
    note: Note,
    paths: VaultPaths,
    catalog: FolderCatalog,
    *,
    include_folder: bool = True,
) -> Path:
    """Export a single note; see :func:`export_notes`."""
    file_path = paths.export_notes_dir / note.filename
    header = render_metadata(note, catalog, include_folder)
    file_path.write_text(f"{header}\n\n{note.content}", encoding="utf-8")

    for relative in note.attachments:
        target = paths.export_attachment_path(relative)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(paths.attachment_path(relative), target)

    _restore_times(file_path, note)
    logger.debug("Exported %s -> %s", note.id, file_path)
    return file_path


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _escape(value: str) -> str:
    return value.replace('"', '\\"')


def _ensure_dirs(directories: tuple[Path, ...]) -> None:
    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)


def _parse_timestamp(value: str) -> float | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value).timestamp()
    except ValueError:
        return None


def _restore_times(file_path: Path, note: Note) -> None:
    """Set access time from ``createdAt`` and modification time from ``updatedAt``."""
    accessed = _parse_timestamp(note.created_at)
    modified = _parse_timestamp(note.updated_at)
    if accessed is None or modified is None:
        logger.warning(
            "Note %s has no usable createdAt/updatedAt (%r, %r); keeping export-time file times",
            note.id,
            note.created_at,
            note.updated_at,
        )
        return
    os.utime(file_path, (accessed, modified))
