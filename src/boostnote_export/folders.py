"""Folder catalog loaded from ``boostnote.json``."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from boostnote_export.errors import ConfigurationError, FolderNotFoundError
from boostnote_export.records import FolderEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteFolder:
    id: str
    name: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "color": self.color}


class FolderCatalog:
    """Immutable set of folders with name and id lookups.

    Build it once per run with :meth:`load` and pass it to whatever needs
    folder names; nothing in the package keeps a global copy.
    """

    def __init__(self, folders: Iterable[NoteFolder] = ()) -> None:
        self._folders: tuple[NoteFolder, ...] = tuple(folders)

    @classmethod
    def load(cls, config_file: Path) -> "FolderCatalog":
        """Read *config_file* and map each ``folders`` entry to a :class:`NoteFolder`."""
        try:
            raw = json.loads(Path(config_file).read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigurationError(f"Cannot read folder config {config_file}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {config_file}: {exc}") from exc

        entries = raw.get("folders") if isinstance(raw, dict) else None
        if not isinstance(entries, list):
            raise ConfigurationError(f"{config_file} has no 'folders' list")

        try:
            parsed = [FolderEntry.model_validate(entry) for entry in entries]
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid folder entry in {config_file}: {exc}") from exc

        catalog = cls(NoteFolder(id=e.id, name=e.name, color=e.color) for e in parsed)
        logger.debug("Loaded %d folders from %s", len(catalog), config_file)
        return catalog

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def folders(self) -> tuple[NoteFolder, ...]:
        return self._folders

    def find_by_name(self, name: str) -> NoteFolder:
        """Case-insensitive exact match on the folder name."""
        wanted = name.lower()
        for folder in self._folders:
            if folder.name.lower() == wanted:
                return folder
        raise FolderNotFoundError(f"Can't find a folder by name: {name}")

    def find_by_id(self, folder_id: str) -> NoteFolder:
        folder = self.get(folder_id)
        if folder is None:
            raise FolderNotFoundError(f"Can't find a folder by ID: {folder_id}")
        return folder

    def get(self, folder_id: str) -> NoteFolder | None:
        """Lenient lookup used for display, where a dangling id is not an error."""
        for folder in self._folders:
            if folder.id == folder_id:
                return folder
        return None

    def __iter__(self) -> Iterator[NoteFolder]:
        return iter(self._folders)

    def __len__(self) -> int:
        return len(self._folders)

    def __repr__(self) -> str:
        return f"FolderCatalog({len(self._folders)} folders)"
