"""Shared pytest fixtures for pathglob tests."""
import os
from pathlib import Path
from typing import List

import pytest

from pathglob.fs import MemoryFileSystem
from pathglob.infrastructure.cache_manager import set_global_cache
from pathglob.infrastructure.config_manager import set_global_config
from pathglob.infrastructure.logger import set_global_logger

TEST_DIR = "/test"

# Layout used by most expansion tests, rooted at TEST_DIR
TREE_FILES: List[str] = [
    "d",
    "dir1/abc",
    "dir2/dir1/123",
    "dir2/dir1/456",
    "dir2/dir2/file1",
    "dir2/dir2/file2",
    "dir2/dir2/file3",
    "dir2/dir2/xyz",
    "dir2/file1",
    "dir2/file2",
    "dir2/file3",
    "dir3/file1",
    "dir3/xyz",
    "file1",
    "[dir",
    "[dir]",
    "{dir",
    "{dir1",
    "{dir1}",
]


@pytest.fixture
def tree_fs() -> MemoryFileSystem:
    """Case-insensitive tree under /test, working directory /test/dir2/dir1."""
    return MemoryFileSystem(
        files=[f"{TEST_DIR}/{f}" for f in TREE_FILES],
        cwd=f"{TEST_DIR}/dir2/dir1",
        case_sensitive=False,
    )


@pytest.fixture
def small_fs() -> MemoryFileSystem:
    """Four-file tree at the root."""
    return MemoryFileSystem(
        files=["/file1", "/dir2/file1", "/dir2/dir2/file1", "/dir3/file1", "/dir3/xyz"]
    )


@pytest.fixture
def disk_tree(tmp_path: Path) -> Path:
    """Create a small directory tree on disk."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("print('app')")
    (tmp_path / "src" / "util.py").write_text("")
    (tmp_path / "src" / "pkg").mkdir()
    (tmp_path / "src" / "pkg" / "mod.py").write_text("")
    (tmp_path / "src" / "pkg" / "data.json").write_text("{}")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "index.md").write_text("# Docs")
    (tmp_path / "README.md").write_text("# Readme")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset global cache, config and logger between tests."""
    yield
    set_global_cache(None)
    set_global_config(None)
    set_global_logger(None)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove PATHGLOB_* variables inherited from the test runner."""
    for key in list(os.environ):
        if key.startswith("PATHGLOB_"):
            monkeypatch.delenv(key)
