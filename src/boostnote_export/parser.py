"""Attachment-marker, heading, and file-name rules for note content.

Boostnote links attachments as ``![alt](:storage/<path>)``.  Two pure
functions handle the marker and must be called in this order:

1. :func:`extract_attachment_refs` on the raw content
2. :func:`strip_markers` (via :func:`adjust_content`)

Once the markers are stripped nothing identifies an attachment any more.
"""

from __future__ import annotations

import re
import unicodedata

MARKER = ":storage/"

# Marker path runs up to the first ")"; paths containing ")" are not supported
_MARKER_RE = re.compile(r":storage/([^)]*)")
# Content already opening with an H1 or a [TOC] marker gets no extra heading
_HEADING_OR_TOC_RE = re.compile(r"^(#\s|\[TOC\])")
_TOC_RE = re.compile(r"^\[TOC\]\s*")

# File-name normalisation; \w is Unicode-aware so any script survives.
# \w misses combining marks, so those are allowed explicitly
_UNSAFE_NAME_CHARS_RE = re.compile(r"[^\w\s.\-\u0300-\u036f]")
_REPEATED_HYPHENS_RE = re.compile(r"-{2,}")
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def extract_attachment_refs(content: str) -> list[str]:
    """Return every ``:storage/`` path in *content* (de-duped, ordered)."""
    return list(dict.fromkeys(m.group(1) for m in _MARKER_RE.finditer(content)))


def strip_markers(content: str) -> str:
    """Remove every ``:storage/`` prefix, leaving bare relative paths."""
    return content.replace(MARKER, "")


def adjust_content(content: str, name: str) -> str:
    """Strip markers, then drop a leading ``[TOC]`` or prepend ``# name``."""
    content = strip_markers(content)
    if _TOC_RE.match(content):
        return _TOC_RE.sub("", content, count=1)
    if not _HEADING_OR_TOC_RE.match(content):
        return f"# {name}\n\n{content}"
    return content


def normalize_name(title: str) -> str:
    """Reduce *title* to a filesystem-safe name; may return ``""``.

    Idempotent: ``normalize_name(normalize_name(t)) == normalize_name(t)``.
    """
    name = _UNSAFE_NAME_CHARS_RE.sub("", unicodedata.normalize("NFC", title))
    name = _REPEATED_HYPHENS_RE.sub("-", name)
    name = _WHITESPACE_RUN_RE.sub(" ", name.strip())
    # Removing a character can leave a base letter next to a mark
    return unicodedata.normalize("NFC", name)
