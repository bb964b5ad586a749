"""Runtime settings and logging setup.

Environment variables (all optional; CLI options take precedence):
    BOOSTNOTE_DIR          – vault root holding ``boostnote.json`` (default: cwd)
    BOOSTNOTE_EXPORT_DIR   – directory receiving ``exported-notes/`` (default: cwd)
    LOG_LEVEL              – logging level name (default: ``INFO``)

A ``.env`` file in the working directory (or a parent) is loaded first.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    vault_dir: Path
    export_dir: Path
    log_level: str = "INFO"


def load_settings(
    vault_dir: Path | str | None = None,
    export_dir: Path | str | None = None,
    log_level: str | None = None,
) -> Settings:
    """Merge explicit arguments over environment values over defaults."""
    load_dotenv(find_dotenv(usecwd=True))
    cwd = Path.cwd()
    return Settings(
        vault_dir=Path(vault_dir or os.getenv("BOOSTNOTE_DIR") or cwd).expanduser(),
        export_dir=Path(export_dir or os.getenv("BOOSTNOTE_EXPORT_DIR") or cwd).expanduser(),
        log_level=(log_level or os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the root logger and return the package logger."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    return logging.getLogger("boostnote_export")
