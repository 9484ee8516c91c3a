"""
pathglob Filesystem: In-memory binding.

A tree of directory and file nodes addressed by POSIX-style paths:
- Backslashes are accepted as separators
- Relative paths resolve against a configurable working directory
- Parent directories are created implicitly when a file is added
- Lookups can be case-insensitive; entries then report the stored spelling
- Children enumerate sorted by name

Used by the match predicate to test a path without touching the disk, and as
a deterministic backend for tests.

Example:
    >>> fs = MemoryFileSystem(files=["/src/app.py", "/src/lib/util.py"])
    >>> [e.path for e in fs.directory("/src").list_entries()]
    ['/src/app.py', '/src/lib']
"""

import errno
import posixpath
from typing import Dict, Iterable, List, Optional

from pathglob.fs.base import DirectoryEntry, FileEntry, FileSystem, FileSystemEntry

ROOT = "/"


class _Node:
    """Stored directory or file."""

    __slots__ = ("path", "is_dir", "children")

    def __init__(self, path: str, is_dir: bool):
        self.path = path
        self.is_dir = is_dir
        self.children: Dict[str, "_Node"] = {}

    @property
    def name(self) -> str:
        return posixpath.basename(self.path) or self.path


class MemoryFileSystem(FileSystem):
    """FileSystem held entirely in memory."""

    def __init__(
        self,
        files: Iterable[str] = (),
        directories: Iterable[str] = (),
        cwd: str = ROOT,
        case_sensitive: bool = True,
    ):
        """Initialize the tree.

        Args:
            files: File paths to create (parents are created implicitly)
            directories: Directory paths to create
            cwd: Working directory; created if missing
            case_sensitive: Whether path lookups respect case
        """
        self.case_sensitive = case_sensitive
        self._cwd = ROOT
        self._nodes: Dict[str, _Node] = {self._key(ROOT): _Node(ROOT, True)}

        for directory in directories:
            self.add_directory(directory)
        for file in files:
            self.add_file(file)

        self._cwd = self.add_directory(cwd)

    def _key(self, path: str) -> str:
        return path if self.case_sensitive else path.lower()

    def normalize(self, path: str) -> str:
        """Return the absolute normalized form of path."""
        path = path.replace("\\", "/")
        if not path.startswith("/"):
            path = posixpath.join(self._cwd, path)
        path = posixpath.normpath(path)
        # normpath keeps a leading "//"
        return "/" + path.lstrip("/")

    def _lookup(self, path: str) -> Optional[_Node]:
        return self._nodes.get(self._key(self.normalize(path)))

    def _create(self, path: str, is_dir: bool) -> _Node:
        parts = [p for p in path.split("/") if p]
        node = self._nodes[self._key(ROOT)]

        for i, part in enumerate(parts):
            last = i == len(parts) - 1
            child = node.children.get(self._key(part))

            if child is None:
                child_path = posixpath.join(node.path, part)
                child = _Node(child_path, is_dir or not last)
                node.children[self._key(part)] = child
                self._nodes[self._key(child_path)] = child
            elif not child.is_dir and not last:
                raise NotADirectoryError(errno.ENOTDIR, "Not a directory", child.path)
            elif last and child.is_dir != is_dir:
                raise FileExistsError(errno.EEXIST, "Entry exists with another type", child.path)

            node = child

        return node

    def add_directory(self, path: str) -> str:
        """Create a directory and any missing parents.

        Returns:
            Stored path of the directory
        """
        return self._create(self.normalize(path), is_dir=True).path

    def add_file(self, path: str) -> str:
        """Create a file and any missing parent directories.

        Returns:
            Stored path of the file
        """
        normalized = self.normalize(path)
        if normalized == ROOT:
            raise IsADirectoryError(errno.EISDIR, "Is a directory", path)
        return self._create(normalized, is_dir=False).path

    def directory(self, path: str) -> "MemoryDirectory":
        return MemoryDirectory(self, self.normalize(path))

    def file(self, path: str) -> "MemoryFile":
        return MemoryFile(self, self.normalize(path))

    def dirname(self, path: str) -> Optional[str]:
        path = path.replace("\\", "/")
        parent = posixpath.dirname(path)
        if parent == path:
            return None
        return parent

    def basename(self, path: str) -> str:
        return posixpath.basename(path.replace("\\", "/"))

    def getcwd(self) -> str:
        return self._cwd

    def _children(self, path: str) -> List[_Node]:
        node = self._lookup(path)
        if node is None:
            raise FileNotFoundError(errno.ENOENT, "No such directory", path)
        if not node.is_dir:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        return sorted(node.children.values(), key=lambda n: n.name)


class _MemoryEntry:
    """Shared behaviour of memory files and directories."""

    is_dir: bool

    def __init__(self, fs: MemoryFileSystem, path: str):
        self._fs = fs
        self._path = path

    def _node(self) -> Optional[_Node]:
        node = self._fs._lookup(self._path)
        if node is not None and node.is_dir == self.is_dir:
            return node
        return None

    @property
    def name(self) -> str:
        return posixpath.basename(self.path) or self.path

    @property
    def path(self) -> str:
        node = self._node()
        return node.path if node is not None else self._path

    @property
    def exists(self) -> bool:
        return self._node() is not None


class MemoryFile(_MemoryEntry, FileEntry):
    """File in a MemoryFileSystem."""


class MemoryDirectory(_MemoryEntry, DirectoryEntry):
    """Directory in a MemoryFileSystem."""

    @property
    def parent(self) -> Optional["MemoryDirectory"]:
        if self.path == ROOT:
            return None
        return MemoryDirectory(self._fs, posixpath.dirname(self.path))

    def _wrap(self, node: _Node) -> FileSystemEntry:
        if node.is_dir:
            return MemoryDirectory(self._fs, node.path)
        return MemoryFile(self._fs, node.path)

    def list_directories(self) -> List[DirectoryEntry]:
        return [MemoryDirectory(self._fs, n.path) for n in self._fs._children(self._path) if n.is_dir]

    def list_entries(self) -> List[FileSystemEntry]:
        return [self._wrap(n) for n in self._fs._children(self._path)]
