"""Shared fixtures: a throwaway Boostnote vault laid out under ``tmp_path``."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from boostnote_export.folders import FolderCatalog
from boostnote_export.paths import VaultPaths

from helpers import FOLDERS


@pytest.fixture()
def vault_dir(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    (root / "notes").mkdir(parents=True)
    (root / "attachments").mkdir()
    (root / "boostnote.json").write_text(
        json.dumps({"folders": FOLDERS, "version": "1.0"}), encoding="utf-8"
    )
    return root


@pytest.fixture()
def export_dir(tmp_path: Path) -> Path:
    return tmp_path / "export"


@pytest.fixture()
def paths(vault_dir: Path, export_dir: Path) -> VaultPaths:
    return VaultPaths.locate(vault_dir, export_dir)


@pytest.fixture()
def catalog(paths: VaultPaths) -> FolderCatalog:
    return FolderCatalog.load(paths.config_file)
