"""pathglob - glob pattern expansion over pluggable filesystems.

Expands patterns built from ``?``, ``*``, ``**``, ``[...]`` and ``{a,b}``
into matching files and directories, and tests paths against patterns
without touching the disk.

Example:
    >>> from pathglob import expand_names, is_match
    >>> list(expand_names("/etc/{host,pass}*"))
    >>> is_match("src/**/*.py", "src/pkg/mod.py")
    True
"""

from pathglob.core.constants import PATHGLOB_VERSION
from pathglob.core.validators import ValidationError
from pathglob.fs import (
    DirectoryEntry,
    FileEntry,
    FileSystem,
    FileSystemEntry,
    LocalFileSystem,
    MemoryFileSystem,
)
from pathglob.glob import Glob, expand, expand_names, is_match
from pathglob.options import GlobOptions

__version__ = PATHGLOB_VERSION

__all__ = [
    "Glob",
    "GlobOptions",
    "expand",
    "expand_names",
    "is_match",
    "ValidationError",
    "FileSystem",
    "FileSystemEntry",
    "FileEntry",
    "DirectoryEntry",
    "LocalFileSystem",
    "MemoryFileSystem",
]
