"""Move a note record and its attachments out of the live vault.

Archiving runs in two phases:

Staging
    Every check that can fail without touching the vault: the archive must
    not already hold the record, the source record must exist, every
    attachment must be movable, and every destination directory must be
    writable.  Destination directories are created after the file checks
    pass, so a missing or conflicting file leaves no empty directories.

Commit
    Rename the record, then each attachment.  A rename failing after the
    record has moved raises :class:`PartialArchiveError` listing exactly
    which files moved and which did not.

There is no journal, so a crash mid-commit still needs manual cleanup.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from boostnote_export.errors import (
    AlreadyArchivedError,
    ArchiveError,
    NoteNotFoundError,
    PartialArchiveError,
)
from boostnote_export.note import Note
from boostnote_export.paths import VaultPaths

logger = logging.getLogger(__name__)


def archive_note(note: Note, paths: VaultPaths) -> list[Path]:
    """Archive *note*; return the source paths that were moved (record first)."""
    record_src = paths.note_record_path(note.id)
    record_dst = paths.archived_record_path(note.id)

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------

    if record_dst.exists():
        raise AlreadyArchivedError(f"Can't archive already archived file: {record_dst}")
    if not record_src.exists():
        raise NoteNotFoundError(f"Can't archive absent file: {record_src}")

    staged = _stage_attachments(note, paths)
    targets = {record_dst.parent, *(dst.parent for _, dst in staged)}
    for directory in sorted(targets):
        directory.mkdir(parents=True, exist_ok=True)
    _check_writable(targets)

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    record_src.rename(record_dst)
    moved = [record_src]
    for i, (src, dst) in enumerate(staged):
        try:
            src.rename(dst)
        except OSError as exc:
            raise PartialArchiveError(note.id, moved, [s for s, _ in staged[i:]]) from exc
        moved.append(src)

    logger.info("Archived note %s (%d attachments)", note.id, len(moved) - 1)
    return moved


def _stage_attachments(note: Note, paths: VaultPaths) -> list[tuple[Path, Path]]:
    staged: list[tuple[Path, Path]] = []
    for relative in dict.fromkeys(note.attachments):
        src = paths.attachment_path(relative)
        dst = paths.archived_attachment_path(relative)

        if not src.exists():
            if dst.exists():
                # Left over from an earlier, partially failed archive run
                logger.warning("File is already moved: %s", src)
                continue
            raise ArchiveError(f"Attachment of note {note.id} is missing from vault and archive: {src}")
        if dst.exists():
            raise ArchiveError(f"Refusing to overwrite archived attachment: {dst}")
        staged.append((src, dst))
    return staged


def _check_writable(directories: set[Path]) -> None:
    for directory in sorted(directories):
        if not os.access(directory, os.W_OK):
            raise ArchiveError(f"Archive directory is not writable: {directory}")
