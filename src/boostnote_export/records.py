"""Typed schemas for the vault's on-disk records.

``NoteRecord`` mirrors one ``notes/<id>.cson`` document and ``FolderEntry``
one item of the ``folders`` list in ``boostnote.json``.  Decoding fails
closed: a record missing a required field raises instead of yielding a
half-populated object.
"""

from __future__ import annotations

from typing import Any

import cson
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FolderEntry(BaseModel):
    """One folder declared in ``boostnote.json``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(alias="key", min_length=1)
    name: str
    color: str = ""


class NoteRecord(BaseModel):
    """One note record; ``title`` and ``content`` are required and non-empty."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    folder: str = ""
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    type: str = ""
    tags: list[str] = Field(default_factory=list)
    is_starred: bool = Field(default=False, alias="isStarred")
    is_trashed: bool = Field(default=False, alias="isTrashed")

    @field_validator("folder", "created_at", "updated_at", "type", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _none_as_no_tags(cls, value: Any) -> Any:
        return [] if value is None else value


def decode_note_record(text: str) -> NoteRecord:
    """Parse CSON *text* and validate it against :class:`NoteRecord`.

    Raises whatever the CSON parser raises for malformed input, ``TypeError``
    when the document is not an object, and
    :class:`pydantic.ValidationError` for schema violations.
    """
    raw = cson.loads(text)
    if not isinstance(raw, dict):
        raise TypeError(f"Note record must be an object, got {type(raw).__name__}")
    return NoteRecord.model_validate(raw)
