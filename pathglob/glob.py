#!/usr/bin/env python3
"""Glob expansion over a pluggable filesystem.

A pattern is expanded one path segment at a time, right to left: the parent
part of the pattern is expanded recursively into candidate directories and
the last segment is matched against their children. Supported syntax:

- ``?`` one character, ``*`` any run of characters within a segment
- ``**`` as a whole segment: zero or more directory levels
- ``[...]`` character classes (``^`` negation, ranges)
- ``{a,b}`` alternation, nestable, may span separators
- ``.`` and ``..`` segments

Results are produced lazily. Parent directories come before their matches,
group alternatives follow declaration order, and children follow the
filesystem's enumeration order.

Example:
    >>> glob = Glob("src/**/*.{py,pyi}")
    >>> for path in glob.expand_names():
    ...     print(path)
    >>> is_match("**/dir1/*.txt", "/a/dir1/notes.txt")
    True
"""

from typing import Iterable, Iterator, List, Optional

from pathglob.core.constants import (
    CURRENT_DIRECTORY,
    GLOB_CHARACTERS,
    PARENT_DIRECTORY,
    RECURSIVE_WILDCARD,
)
from pathglob.core.validators import validate_pattern
from pathglob.fs.base import DirectoryEntry, FileSystem, FileSystemEntry
from pathglob.fs.local import LocalFileSystem
from pathglob.fs.memory import ROOT, MemoryFileSystem
from pathglob.infrastructure.cache_manager import get_pattern_cache
from pathglob.infrastructure.logger import get_logger
from pathglob.options import GlobOptions
from pathglob.rules.groups import expand_groups, has_unbalanced_close
from pathglob.rules.patterns import MatcherKind, SegmentMatcher, compile_segment


def _has_glob_characters(path: str) -> bool:
    return any(c in GLOB_CHARACTERS for c in path)


def _unique(entries: Iterable[FileSystemEntry]) -> Iterator[FileSystemEntry]:
    """Drop entries whose full path was already produced."""
    seen = set()
    for entry in entries:
        if entry.path not in seen:
            seen.add(entry.path)
            yield entry


class Glob:
    """Finds files and directories whose paths match a pattern.

    Two instances are equal when their pattern text is equal; options and
    filesystem do not take part in equality.
    """

    def __init__(
        self,
        pattern: str = "",
        options: Optional[GlobOptions] = None,
        file_system: Optional[FileSystem] = None,
    ):
        """Initialize a glob.

        Args:
            pattern: Pattern to expand
            options: Expansion options (defaults to GlobOptions())
            file_system: Filesystem to walk (defaults to the local disk)

        Raises:
            ValidationError: If the pattern or options are invalid
        """
        validate_pattern(pattern)

        self.pattern = pattern
        self.options = options if options is not None else GlobOptions()
        self.options.validate()
        self._file_system = file_system if file_system is not None else LocalFileSystem()
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        """Whether cancel() has been called."""
        return self._cancelled

    def cancel(self) -> None:
        """Stop producing further results from running expansions.

        Results already handed out stay valid.
        """
        self._cancelled = True

    def expand(self) -> Iterator[FileSystemEntry]:
        """Expand the pattern.

        Returns:
            Lazy, one-shot iterator of matching entries
        """
        return self._expand(self.pattern, self.options.directories_only, self._file_system)

    def expand_names(self) -> Iterator[str]:
        """Expand the pattern.

        Returns:
            Lazy, one-shot iterator of matching full paths
        """
        return (entry.path for entry in self.expand())

    def is_match(self, path: str) -> bool:
        """Check whether path would appear in this pattern's expansion.

        The check runs against an in-memory filesystem that holds only path,
        so nothing is read from disk. The candidate is taken to be a file,
        or a directory when only directories are matched.

        Args:
            path: Candidate path, absolute or relative to "/"

        Returns:
            True if the expansion contains path
        """
        if not path:
            return False

        fs = MemoryFileSystem(case_sensitive=not self.options.ignore_case)
        if self.options.directories_only or fs.normalize(path) == ROOT:
            target = fs.add_directory(path)
        else:
            target = fs.add_file(path)

        matches = self._expand(self.pattern, self.options.directories_only, fs)
        return any(entry.path == target for entry in matches)

    def _report(self, message: str, **context) -> None:
        get_logger().warning(message, pattern=self.pattern, **context)
        if self.options.error_sink is not None:
            self.options.error_sink(message)

    def _matcher(self, segment: str) -> SegmentMatcher:
        if self.options.cache_compiled_matchers:
            matcher = get_pattern_cache().get_or_compile(segment, self.options.ignore_case)
        else:
            matcher = compile_segment(segment, self.options.ignore_case)

        if matcher.kind is MatcherKind.LITERAL:
            self._report(
                f"Error compiling segment pattern '{segment}', matching it literally",
                operation="compile",
                path=segment,
            )
        return matcher

    def _expand(self, path: str, directories_only: bool, fs: FileSystem) -> Iterator[FileSystemEntry]:
        if self._cancelled or not path:
            return

        # Literal paths go straight to an existence check. That check is
        # assumed to ignore case, so the shortcut is only taken when case
        # does not matter.
        if self.options.ignore_case and not _has_glob_characters(path):
            try:
                entry: FileSystemEntry = fs.directory(path)
                if not entry.exists and not directories_only:
                    entry = fs.file(path)
                exists = entry.exists
            except Exception as e:
                self._report(f"Error getting entry for '{path}': {e}", operation="resolve", path=path)
                if self.options.throw_on_error:
                    raise
                return

            if exists:
                yield entry
            return

        try:
            parent = fs.dirname(path)
        except Exception as e:
            self._report(f"Error getting directory name for '{path}': {e}", operation="dirname", path=path)
            if self.options.throw_on_error:
                raise
            return

        if parent is None:
            try:
                root = fs.directory(path)
            except Exception as e:
                self._report(f"Error getting directory for '{path}': {e}", operation="directory", path=path)
                if self.options.throw_on_error:
                    raise
                return

            yield root
            return

        if parent == "":
            try:
                parent = fs.getcwd()
            except Exception as e:
                self._report(f"Error getting current working directory: {e}", operation="getcwd", path=path)
                if self.options.throw_on_error:
                    raise
                return

        child = fs.basename(path)

        # A group opened in an earlier segment closes in this one, so the
        # split above cut through it. Expand the whole path and start over.
        if has_unbalanced_close(child):
            groups = expand_groups(path)
            if groups != [path]:
                for group in groups:
                    yield from self._expand(group, directories_only, fs)
                return

        if child == RECURSIVE_WILDCARD:
            for directory in _unique(self._expand(parent, True, fs)):
                yield directory
                yield from self._walk_subdirectories(directory, 1)
            return

        matchers = [self._matcher(segment) for segment in expand_groups(child)]
        wants_parent = any(m.source == PARENT_DIRECTORY for m in matchers)
        wants_self = any(m.source == CURRENT_DIRECTORY for m in matchers)

        for parent_dir in _unique(self._expand(parent, True, fs)):
            try:
                entries: List[FileSystemEntry] = (
                    parent_dir.list_directories() if directories_only else parent_dir.list_entries()
                )
            except Exception as e:
                self._report(
                    f"Error finding file system entries in {parent_dir.path}: {e}",
                    operation="list",
                    path=parent_dir.path,
                )
                if self.options.throw_on_error:
                    raise
                continue

            for entry in entries:
                if self._cancelled:
                    return
                if any(m.matches(entry.name) for m in matchers):
                    yield entry

            if wants_parent:
                yield parent_dir.parent or parent_dir
            if wants_self:
                yield parent_dir

    def _walk_subdirectories(self, root: DirectoryEntry, level: int) -> Iterator[DirectoryEntry]:
        """Yield every directory below root depth-first, honoring max_depth."""
        max_depth = self.options.max_depth
        if self._cancelled or (max_depth >= 0 and level > max_depth):
            return

        try:
            subdirectories = root.list_directories()
        except OSError:
            return

        for subdirectory in subdirectories:
            yield subdirectory
            yield from self._walk_subdirectories(subdirectory, level + 1)

    def __str__(self) -> str:
        return self.pattern

    def __repr__(self) -> str:
        return f"Glob({self.pattern!r})"

    def __hash__(self) -> int:
        return hash(self.pattern)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Glob):
            return NotImplemented
        return self.pattern == other.pattern


def expand(
    pattern: str,
    options: Optional[GlobOptions] = None,
    file_system: Optional[FileSystem] = None,
) -> Iterator[FileSystemEntry]:
    """Expand pattern into matching filesystem entries."""
    return Glob(pattern, options, file_system).expand()


def expand_names(
    pattern: str,
    options: Optional[GlobOptions] = None,
    file_system: Optional[FileSystem] = None,
) -> Iterator[str]:
    """Expand pattern into matching full paths."""
    return Glob(pattern, options, file_system).expand_names()


def is_match(pattern: str, path: str, options: Optional[GlobOptions] = None) -> bool:
    """Check whether path matches pattern without touching the disk."""
    return Glob(pattern, options).is_match(path)
