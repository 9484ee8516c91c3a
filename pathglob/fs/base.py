"""
pathglob Filesystem: Collaborator Interface.

The expansion engine never touches storage directly. It talks to a FileSystem
that resolves paths to entries and decomposes path strings:

- FileSystemEntry: name, full path and existence of one entry
- FileEntry / DirectoryEntry: the two entry kinds; directories enumerate
- FileSystem: entry factory plus dirname/basename/getcwd

Any of these operations may raise; the engine decides whether a failure
propagates or only ends one branch of the walk.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class FileSystemEntry(ABC):
    """A file or directory as seen by the expansion engine."""

    is_dir: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Final path component."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Full normalized path."""

    @property
    @abstractmethod
    def exists(self) -> bool:
        """Whether the entry exists with this kind (file vs directory)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class FileEntry(FileSystemEntry):
    """A non-directory entry."""

    is_dir = False


class DirectoryEntry(FileSystemEntry):
    """A directory entry that can enumerate its children.

    Enumeration returns lists so that failures surface at the call site
    rather than part-way through iteration.
    """

    is_dir = True

    @property
    @abstractmethod
    def parent(self) -> Optional["DirectoryEntry"]:
        """Containing directory, or None for a root."""

    @abstractmethod
    def list_directories(self) -> List["DirectoryEntry"]:
        """Immediate subdirectories in enumeration order.

        Raises:
            FileNotFoundError: If the directory does not exist
            PermissionError: If the directory cannot be read
        """

    @abstractmethod
    def list_entries(self) -> List[FileSystemEntry]:
        """Immediate files and subdirectories in enumeration order.

        Raises:
            FileNotFoundError: If the directory does not exist
            PermissionError: If the directory cannot be read
        """


class FileSystem(ABC):
    """Filesystem capability consumed by the expansion engine."""

    @abstractmethod
    def directory(self, path: str) -> DirectoryEntry:
        """Resolve path as a directory entry (which may not exist)."""

    @abstractmethod
    def file(self, path: str) -> FileEntry:
        """Resolve path as a file entry (which may not exist)."""

    @abstractmethod
    def dirname(self, path: str) -> Optional[str]:
        """Directory part of path.

        Returns:
            None when path is a root that cannot be decomposed further, an
            empty string when path is a bare relative name
        """

    @abstractmethod
    def basename(self, path: str) -> str:
        """Final component of path."""

    @abstractmethod
    def getcwd(self) -> str:
        """Current working directory used to anchor relative patterns."""
