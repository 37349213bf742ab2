from __future__ import annotations

from pathlib import Path

import pytest

from tests._project_fixtures import Project


@pytest.fixture
def project(tmp_path: Path) -> Project:
    root = tmp_path / "repo"
    source_dir = root / "src"
    destination_dir = root / "dest"
    source_dir.mkdir(parents=True)
    destination_dir.mkdir(parents=True)
    return Project(root=root, source_dir=source_dir, destination_dir=destination_dir)
