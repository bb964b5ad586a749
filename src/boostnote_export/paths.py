"""VaultPaths: resolves and validates every directory the exporter touches."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from boostnote_export.errors import ConfigurationError

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".cson"
CONFIG_FILENAME = "boostnote.json"


@dataclass(frozen=True)
class VaultPaths:
    """Fixed layout of a vault and of the export/archive trees derived from it."""

    vault_dir: Path
    notes_dir: Path
    attachments_dir: Path
    config_file: Path
    archive_notes_dir: Path
    archive_attachments_dir: Path
    export_notes_dir: Path
    export_attachments_dir: Path

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def locate(cls, vault_dir: Path | str, export_dir: Path | str) -> "VaultPaths":
        """Derive all paths and fail fast if a required source path is missing.

        Export and archive destinations are not checked; they are created on
        demand by the exporter and archiver.
        """
        vault_dir = Path(vault_dir).expanduser()
        export_dir = Path(export_dir).expanduser()
        if not vault_dir.is_dir():
            raise ConfigurationError(f"Boostnote dir does not exist: {vault_dir}")

        export_notes_dir = export_dir / "exported-notes"
        paths = cls(
            vault_dir=vault_dir,
            notes_dir=vault_dir / "notes",
            attachments_dir=vault_dir / "attachments",
            config_file=vault_dir / CONFIG_FILENAME,
            archive_notes_dir=vault_dir / "archived-notes",
            archive_attachments_dir=vault_dir / "archived-attachments",
            export_notes_dir=export_notes_dir,
            export_attachments_dir=export_notes_dir / "Files",
        )
        paths._check_sources()
        logger.debug("Vault located at %s, exporting to %s", vault_dir, export_dir)
        return paths

    def _check_sources(self) -> None:
        required = {
            "notes dir": self.notes_dir,
            "attachments dir": self.attachments_dir,
            "config file": self.config_file,
        }
        for label, path in required.items():
            if not path.exists():
                raise ConfigurationError(f"{label.capitalize()} ({path}) does not exist.")

    # ------------------------------------------------------------------
    # Per-note helpers
    # ------------------------------------------------------------------

    def note_record_path(self, note_id: str) -> Path:
        return self.notes_dir / f"{note_id}{NOTE_SUFFIX}"

    def archived_record_path(self, note_id: str) -> Path:
        return self.archive_notes_dir / f"{note_id}{NOTE_SUFFIX}"

    def attachment_path(self, relative: str) -> Path:
        return self.attachments_dir / relative

    def export_attachment_path(self, relative: str) -> Path:
        return self.export_attachments_dir / relative

    def archived_attachment_path(self, relative: str) -> Path:
        return self.archive_attachments_dir / relative

    @property
    def export_dirs(self) -> tuple[Path, Path]:
        return (self.export_notes_dir, self.export_attachments_dir)

    @property
    def archive_dirs(self) -> tuple[Path, Path]:
        return (self.archive_notes_dir, self.archive_attachments_dir)
