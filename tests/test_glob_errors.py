#!/usr/bin/env python3
"""Tests for filesystem error handling during expansion."""

import errno
import io
import logging
from unittest.mock import patch

import pytest

from pathglob import Glob, GlobOptions
from pathglob.fs import MemoryDirectory
from pathglob.infrastructure.logger import Logger, set_global_logger


def expand_collecting(pattern, fs, **options):
    messages = []
    glob = Glob(pattern, GlobOptions(error_sink=messages.append, **options), fs)
    return list(glob.expand_names()), messages


def failing_listing(failing_path, method):
    original = getattr(MemoryDirectory, method)

    def list_or_fail(self):
        if self.path == failing_path:
            raise PermissionError(13, "Permission denied", failing_path)
        return original(self)

    return patch.object(MemoryDirectory, method, autospec=True, side_effect=list_or_fail)


class TestSkipOnError:
    """Errors are reported and the branch is skipped by default."""

    def test_resolve_error(self, tree_fs):
        """A failing existence check yields nothing."""
        with patch.object(tree_fs, "directory", side_effect=ValueError("bad path")):
            results, messages = expand_collecting("/test/dir1", tree_fs)

        assert results == []
        assert messages == ["Error getting entry for '/test/dir1': bad path"]

    def test_dirname_error(self, tree_fs):
        """A failing dirname yields nothing."""
        with patch.object(tree_fs, "dirname", side_effect=OSError("no dirname")):
            results, messages = expand_collecting("*", tree_fs)

        assert results == []
        assert messages == ["Error getting directory name for '*': no dirname"]

    def test_root_directory_error(self, tree_fs):
        """A failing root lookup yields nothing."""
        with patch.object(tree_fs, "dirname", return_value=None), patch.object(
            tree_fs, "directory", side_effect=OSError("no root")
        ):
            results, messages = expand_collecting("*", tree_fs)

        assert results == []
        assert messages == ["Error getting directory for '*': no root"]

    def test_getcwd_error(self, tree_fs):
        """A failing working directory lookup yields nothing."""
        with patch.object(tree_fs, "getcwd", side_effect=OSError("cwd gone")):
            results, messages = expand_collecting("*", tree_fs)

        assert results == []
        assert messages == ["Error getting current working directory: cwd gone"]

    def test_listing_error_skips_one_parent(self, tree_fs):
        """Other parents are still searched after a listing fails."""
        with failing_listing("/test/dir1", "list_entries"):
            results, messages = expand_collecting("/test/dir{1,3}/*", tree_fs)

        assert results == ["/test/dir3/file1", "/test/dir3/xyz"]
        assert len(messages) == 1
        assert messages[0].startswith("Error finding file system entries in /test/dir1:")

    def test_listing_error_without_sink(self, tree_fs):
        """Errors are skipped when no sink is configured."""
        with failing_listing("/test/dir1", "list_entries"):
            results = list(Glob("/test/dir{1,3}/*", file_system=tree_fs).expand_names())

        assert results == ["/test/dir3/file1", "/test/dir3/xyz"]

    def test_walk_skips_unreadable_directories(self, tree_fs):
        """** silently prunes directories that cannot be listed."""
        with failing_listing("/test/dir2", "list_directories"):
            results, messages = expand_collecting("/test/**", tree_fs)

        assert results == ["/test", "/test/dir1", "/test/dir2", "/test/dir3"]
        assert messages == []

    def test_walk_prunes_other_os_errors(self, tree_fs):
        """Any OSError below ** prunes only that branch."""
        original = MemoryDirectory.list_directories

        def list_or_loop(self):
            if self.path == "/test/dir2":
                raise OSError(errno.ELOOP, "Too many levels of symbolic links", self.path)
            return original(self)

        with patch.object(
            MemoryDirectory, "list_directories", autospec=True, side_effect=list_or_loop
        ):
            results, messages = expand_collecting("/test/**/file1", tree_fs)

        assert results == ["/test/file1", "/test/dir2/file1", "/test/dir3/file1"]
        assert messages == []

    def test_errors_are_logged(self, tree_fs):
        """Errors are logged at warning level with context."""
        stream = io.StringIO()
        set_global_logger(Logger("pathglob", level="WARNING", handlers=[logging.StreamHandler(stream)]))

        with patch.object(tree_fs, "getcwd", side_effect=OSError("cwd gone")):
            list(Glob("*", file_system=tree_fs).expand())

        output = stream.getvalue()
        assert "Error getting current working directory: cwd gone" in output
        assert "operation=getcwd" in output
        assert "pattern=*" in output


class TestThrowOnError:
    """With throw_on_error the original exception propagates."""

    def test_resolve_error(self, tree_fs):
        """Existence check errors propagate."""
        with patch.object(tree_fs, "directory", side_effect=ValueError("bad path")):
            with pytest.raises(ValueError, match="bad path"):
                expand_collecting("/test/dir1", tree_fs, throw_on_error=True)

    def test_dirname_error(self, tree_fs):
        """dirname errors propagate."""
        with patch.object(tree_fs, "dirname", side_effect=OSError("no dirname")):
            with pytest.raises(OSError, match="no dirname"):
                expand_collecting("*", tree_fs, throw_on_error=True)

    def test_getcwd_error(self, tree_fs):
        """getcwd errors propagate."""
        with patch.object(tree_fs, "getcwd", side_effect=OSError("cwd gone")):
            with pytest.raises(OSError, match="cwd gone"):
                expand_collecting("*", tree_fs, throw_on_error=True)

    def test_listing_error(self, tree_fs):
        """Listing errors propagate after being reported."""
        messages = []
        options = GlobOptions(throw_on_error=True, error_sink=messages.append)
        glob = Glob("/test/dir{1,3}/*", options, tree_fs)

        with failing_listing("/test/dir1", "list_entries"):
            with pytest.raises(PermissionError):
                list(glob.expand_names())

        assert len(messages) == 1

    def test_walk_errors_still_pruned(self, tree_fs):
        """Unreadable directories below ** are pruned even in strict mode."""
        with failing_listing("/test/dir2", "list_directories"):
            results, _ = expand_collecting("/test/**", tree_fs, throw_on_error=True)

        assert results == ["/test", "/test/dir1", "/test/dir2", "/test/dir3"]


class TestCompileFallback:
    """Segments that do not compile are reported and matched literally."""

    @pytest.mark.parametrize("cached", [True, False])
    def test_reported_to_sink(self, tree_fs, cached):
        """The fallback reaches the error sink and matching still works."""
        results, messages = expand_collecting(
            "/test/[dir", tree_fs, ignore_case=False, cache_compiled_matchers=cached
        )

        assert results == ["/test/[dir"]
        assert messages == ["Error compiling segment pattern '[dir', matching it literally"]

    def test_not_raised_in_strict_mode(self, tree_fs):
        """The fallback is not an error even with throw_on_error."""
        results, messages = expand_collecting("/test/[dir", tree_fs, throw_on_error=True)

        assert results == ["/test/[dir"]
        assert len(messages) == 1

    def test_compiled_segments_not_reported(self, tree_fs):
        """Segments that compile produce no messages."""
        _, messages = expand_collecting("/test/[dir]", tree_fs)
        assert messages == []

    def test_logged_with_context(self, tree_fs):
        """The fallback is logged with the compile operation."""
        stream = io.StringIO()
        set_global_logger(Logger("pathglob", level="WARNING", handlers=[logging.StreamHandler(stream)]))

        list(Glob("/test/[dir", file_system=tree_fs).expand())

        assert "operation=compile path=[dir" in stream.getvalue()
