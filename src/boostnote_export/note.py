"""Core Note dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Note:
    """A single vault note, ready to export."""

    id: str
    #: Filesystem-safe form of ``title``; never empty
    name: str
    note_folder_id: str
    created_at: str
    updated_at: str
    type: str
    title: str
    #: Body with ``:storage/`` markers stripped and heading/TOC adjusted
    content: str
    tags: list[str] = field(default_factory=list)
    is_starred: bool = False
    is_trashed: bool = False
    #: Paths relative to the attachments dir, each checked to exist at read time
    attachments: list[str] = field(default_factory=list)

    @property
    def filename(self) -> str:
        return f"{self.name}.md"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "note_folder_id": self.note_folder_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "type": self.type,
            "title": self.title,
            "tags": self.tags,
            "isStarred": self.is_starred,
            "isTrashed": self.is_trashed,
            "attachments": self.attachments,
        }
