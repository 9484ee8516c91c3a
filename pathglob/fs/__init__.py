"""pathglob Filesystem Bindings.

- FileSystem / FileSystemEntry / FileEntry / DirectoryEntry: collaborator interface
- LocalFileSystem: Operating system binding
- MemoryFileSystem: In-memory binding
"""

from .base import DirectoryEntry, FileEntry, FileSystem, FileSystemEntry
from .local import LocalDirectory, LocalFile, LocalFileSystem
from .memory import MemoryDirectory, MemoryFile, MemoryFileSystem

__all__ = [
    # Interface
    "FileSystem",
    "FileSystemEntry",
    "FileEntry",
    "DirectoryEntry",
    # Local disk
    "LocalFileSystem",
    "LocalDirectory",
    "LocalFile",
    # In memory
    "MemoryFileSystem",
    "MemoryDirectory",
    "MemoryFile",
]
