"""Removal of previously generated export trees."""

from __future__ import annotations

import logging
import shutil

from boostnote_export.paths import VaultPaths

logger = logging.getLogger(__name__)


def clear_export_dirs(paths: VaultPaths) -> None:
    """Delete the export notes and attachments trees; missing trees are fine."""
    for directory in paths.export_dirs:
        if directory.exists():
            shutil.rmtree(directory)
            logger.info("Removed %s", directory)
        else:
            logger.debug("Nothing to remove at %s", directory)
