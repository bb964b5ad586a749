"""Exception hierarchy for vault export and archiving."""

from __future__ import annotations

from pathlib import Path


class VaultError(Exception):
    """Base class for every fatal vault error."""


class ConfigurationError(VaultError):
    """Raised when the vault layout or folder config is missing or invalid."""


class FolderNotFoundError(ConfigurationError):
    """Raised when a folder lookup by name or id has no match."""


class ArchiveError(VaultError):
    """Raised when a note cannot be moved into the archive."""


class NoteNotFoundError(ArchiveError):
    """The note record to archive is absent from the live vault."""


class AlreadyArchivedError(ArchiveError):
    """A record with the same id already exists in the archive."""


class PartialArchiveError(ArchiveError):
    """The note record moved but one or more attachments did not.

    The vault is left half-migrated; ``moved`` and ``pending`` list the exact
    source paths so the operator can finish the move by hand.
    """

    def __init__(self, note_id: str, moved: list[Path], pending: list[Path]) -> None:
        self.note_id = note_id
        self.moved = list(moved)
        self.pending = list(pending)
        super().__init__(
            f"Note {note_id!r} was only partially archived; manual reconciliation needed. "
            f"Moved: {[str(p) for p in self.moved]}. "
            f"Not moved: {[str(p) for p in self.pending]}."
        )
