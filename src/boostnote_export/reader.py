"""Note reader: turns ``notes/*.cson`` records into :class:`Note` objects."""

from __future__ import annotations

import logging
from pathlib import Path

from boostnote_export.note import Note
from boostnote_export.parser import adjust_content, extract_attachment_refs, normalize_name
from boostnote_export.paths import NOTE_SUFFIX, VaultPaths
from boostnote_export.records import NoteRecord, decode_note_record

logger = logging.getLogger(__name__)


def read_notes(paths: VaultPaths) -> list[Note]:
    """Read every note record in the vault.

    Malformed records, unnamed notes, and missing attachments are logged and
    left out; only I/O errors while reading a file stop the whole read.
    """
    notes: list[Note] = []
    for path in sorted(paths.notes_dir.glob(f"*{NOTE_SUFFIX}")):
        note = read_note(path, paths)
        if note is not None:
            notes.append(note)
    logger.info("Read %d notes from %s", len(notes), paths.notes_dir)
    return notes


def read_note(path: Path, paths: VaultPaths) -> Note | None:
    """Read a single record; return ``None`` when it has to be skipped."""
    note_id = path.stem
    data = path.read_bytes()
    try:
        record = decode_note_record(data.decode("utf-8"))
    except Exception as exc:  # noqa: BLE001
        # One broken record must not abort the rest of the vault
        logger.warning("Skipping note %s: missing content/title or unreadable record (%s)", note_id, exc)
        return None

    # Attachments come from the raw content, before markers are stripped
    attachments = _existing_attachments(record, paths)

    name = normalize_name(record.title)
    if not name:
        logger.warning("Skipping note %s: title %r leaves an empty file name", note_id, record.title)
        return None

    return Note(
        id=note_id,
        name=name,
        note_folder_id=record.folder,
        created_at=record.created_at,
        updated_at=record.updated_at,
        type=record.type,
        title=record.title,
        content=adjust_content(record.content, name),
        tags=list(record.tags),
        is_starred=record.is_starred,
        is_trashed=record.is_trashed,
        attachments=attachments,
    )


def _existing_attachments(record: NoteRecord, paths: VaultPaths) -> list[str]:
    root = paths.attachments_dir.resolve()
    found: list[str] = []
    for relative in extract_attachment_refs(record.content):
        if _is_attachment(root, relative):
            found.append(relative)
        else:
            logger.warning("Note (%s): attachment not found: %s", record.title, root / relative)
    return found


def _is_attachment(root: Path, relative: str) -> bool:
    # A loose marker in prose can capture an over-long or NUL-bearing path
    try:
        candidate = (root / relative).resolve()
        return candidate.is_relative_to(root) and candidate.is_file()
    except (OSError, ValueError):
        return False
