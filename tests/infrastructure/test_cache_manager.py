#!/usr/bin/env python3
"""Tests for the compiled matcher cache."""

import threading

from pathglob import Glob, GlobOptions
from pathglob.infrastructure.cache_manager import (
    PatternCache,
    get_pattern_cache,
    set_global_cache,
)
from pathglob.rules.patterns import MatcherKind


class TestPatternCache:
    """Tests for PatternCache."""

    def test_get_or_compile_reuses_matcher(self):
        """The same key returns the same matcher object."""
        cache = PatternCache()
        matcher = cache.get_or_compile("*.py", True)

        assert cache.get_or_compile("*.py", True) is matcher
        assert len(cache) == 1

    def test_case_sensitivity_is_part_of_key(self):
        """Case-sensitive and insensitive matchers are cached separately."""
        cache = PatternCache()
        insensitive = cache.get_or_compile("file*", True)
        sensitive = cache.get_or_compile("file*", False)

        assert insensitive is not sensitive
        assert insensitive.matches("FILE1")
        assert not sensitive.matches("FILE1")
        assert ("file*", True) in cache
        assert ("file*", False) in cache

    def test_literal_fallback_cached(self):
        """Uncompilable segments are cached as literal matchers."""
        cache = PatternCache()
        assert cache.get_or_compile("[dir", True).kind is MatcherKind.LITERAL
        assert ("[dir", True) in cache

    def test_get_missing(self):
        """get returns None for unknown keys."""
        assert PatternCache().get("*", True) is None

    def test_stats(self):
        """Hits and misses are counted."""
        cache = PatternCache()
        cache.get_or_compile("a*", True)
        cache.get_or_compile("a*", True)
        cache.get_or_compile("a*", True)

        stats = cache.get_stats()
        assert stats["entries"] == 1
        assert stats["hits"] == 2
        assert stats["misses"] == 1
        assert abs(stats["hit_rate"] - 2 / 3) < 0.001

    def test_stats_empty(self):
        """Empty caches report a zero hit rate."""
        assert PatternCache().get_stats()["hit_rate"] == 0

    def test_clear(self):
        """clear drops entries and statistics."""
        cache = PatternCache()
        cache.get_or_compile("a*", True)
        cache.clear()

        assert len(cache) == 0
        assert cache.get_stats()["misses"] == 0

    def test_concurrent_population(self):
        """Concurrent callers all receive working matchers."""
        cache = PatternCache()
        results = []

        def worker():
            for i in range(50):
                results.append(cache.get_or_compile(f"file{i % 10}*", True).matches(f"FILE{i % 10}x"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 400
        assert all(results)
        assert len(cache) == 10


class TestGlobalCache:
    """Tests for the process-wide cache."""

    def test_singleton(self):
        """get_pattern_cache returns one instance."""
        assert get_pattern_cache() is get_pattern_cache()

    def test_set_global_cache(self):
        """set_global_cache replaces the instance."""
        cache = PatternCache()
        set_global_cache(cache)
        assert get_pattern_cache() is cache

    def test_expansion_populates_cache(self, tree_fs):
        """Expansion compiles segments through the global cache."""
        cache = PatternCache()
        set_global_cache(cache)

        list(Glob("/test/dir2/file[13]", file_system=tree_fs).expand())

        assert ("file[13]", True) in cache

    def test_uncached_expansion_skips_cache(self, tree_fs):
        """Disabling caching leaves the global cache untouched."""
        cache = PatternCache()
        set_global_cache(cache)

        options = GlobOptions(cache_compiled_matchers=False)
        list(Glob("/test/dir2/file[13]", options, tree_fs).expand())

        assert len(cache) == 0
