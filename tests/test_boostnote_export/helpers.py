"""Record and attachment writers shared by the test modules."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from boostnote_export.paths import VaultPaths

CREATED_AT = "2020-01-01T10:00:00.000Z"
UPDATED_AT = "2020-01-02T12:30:00.000Z"

FOLDERS = [
    {"key": "f1", "name": "Work", "color": "#E10051"},
    {"key": "f2", "name": "Personal", "color": "#3FD941"},
    {"key": "f3", "name": "Empty", "color": "#2BA5F7"},
]


def write_note(paths: VaultPaths, note_id: str, *, drop: tuple[str, ...] = (), **fields: Any) -> Path:
    """Write ``notes/<note_id>.cson`` with sensible defaults overridden by *fields*."""
    record: dict[str, Any] = {
        "createdAt": CREATED_AT,
        "updatedAt": UPDATED_AT,
        "type": "MARKDOWN_NOTE",
        "folder": "f1",
        "title": note_id.title(),
        "content": f"Body of {note_id}",
        "tags": [],
        "isStarred": False,
        "isTrashed": False,
    }
    record.update(fields)
    for key in drop:
        record.pop(key, None)
    path = paths.note_record_path(note_id)
    # JSON is a subset of CSON
    path.write_text(json.dumps(record, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def write_attachment(paths: VaultPaths, relative: str, data: bytes = b"\x89PNG fake") -> Path:
    path = paths.attachment_path(relative)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
