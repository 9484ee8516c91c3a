"""
pathglob Filesystem: Local disk binding.

Entries are resolved with os.path and enumerated with os.scandir. Children
are returned sorted by name so that expansion order does not depend on the
order the operating system happens to report.

Existence checks follow the host filesystem's case rules. On a
case-sensitive filesystem the engine's no-wildcard shortcut (taken only when
ignoring case) therefore still compares literal paths case-sensitively.
"""

import os
from typing import List, Optional

from pathglob.fs.base import DirectoryEntry, FileEntry, FileSystem, FileSystemEntry


def _name_of(path: str) -> str:
    return os.path.basename(path.rstrip(os.sep)) or path


class LocalFile(FileEntry):
    """File on the local disk."""

    def __init__(self, path: str):
        self._path = os.path.abspath(path)

    @property
    def name(self) -> str:
        return _name_of(self._path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def exists(self) -> bool:
        return os.path.isfile(self._path)


class LocalDirectory(DirectoryEntry):
    """Directory on the local disk."""

    def __init__(self, path: str):
        self._path = os.path.abspath(path)

    @property
    def name(self) -> str:
        return _name_of(self._path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def exists(self) -> bool:
        return os.path.isdir(self._path)

    @property
    def parent(self) -> Optional["LocalDirectory"]:
        parent = os.path.dirname(self._path)
        if parent == self._path:
            return None
        return LocalDirectory(parent)

    def _scan(self) -> List[os.DirEntry]:
        with os.scandir(self._path) as it:
            return sorted(it, key=lambda e: e.name)

    def list_directories(self) -> List[DirectoryEntry]:
        return [LocalDirectory(e.path) for e in self._scan() if e.is_dir()]

    def list_entries(self) -> List[FileSystemEntry]:
        return [LocalDirectory(e.path) if e.is_dir() else LocalFile(e.path) for e in self._scan()]


class LocalFileSystem(FileSystem):
    """FileSystem backed by the operating system."""

    def directory(self, path: str) -> LocalDirectory:
        return LocalDirectory(path)

    def file(self, path: str) -> LocalFile:
        return LocalFile(path)

    def dirname(self, path: str) -> Optional[str]:
        parent = os.path.dirname(path)
        # os.path.dirname is a fixed point on roots ("/", "C:\\")
        if parent == path:
            return None
        return parent

    def basename(self, path: str) -> str:
        return os.path.basename(path)

    def getcwd(self) -> str:
        return os.getcwd()
