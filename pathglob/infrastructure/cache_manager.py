#!/usr/bin/env python3
"""Process-wide cache of compiled segment matchers.

This module memoizes segment compilation with:
- Keys of (segment pattern, case sensitivity)
- Append-only storage that lives for the process
- Lock-free population (concurrent writers may duplicate work, last wins)
- Hit/miss statistics

The set of distinct segment patterns a process sees is small in practice, so
entries are never evicted.

Example:
    >>> cache = get_pattern_cache()
    >>> matcher = cache.get_or_compile("*.py", ignore_case=True)
    >>> cache.get_or_compile("*.py", ignore_case=True) is matcher
    True
"""

from typing import Any, Dict, Optional, Tuple

from pathglob.rules.patterns import SegmentMatcher, compile_segment

CacheKey = Tuple[str, bool]


class PatternCache:
    """Unbounded cache mapping segment patterns to compiled matchers."""

    def __init__(self):
        """Initialize an empty cache."""
        self._entries: Dict[CacheKey, SegmentMatcher] = {}

        # Statistics
        self._hits = 0
        self._misses = 0

    def get(self, segment: str, ignore_case: bool) -> Optional[SegmentMatcher]:
        """Get a cached matcher.

        Args:
            segment: Raw segment pattern
            ignore_case: Case sensitivity the matcher was built with

        Returns:
            Cached matcher or None
        """
        matcher = self._entries.get((segment, ignore_case))
        if matcher is None:
            self._misses += 1
        else:
            self._hits += 1
        return matcher

    def set(self, segment: str, ignore_case: bool, matcher: SegmentMatcher) -> None:
        """Store a matcher.

        Args:
            segment: Raw segment pattern
            ignore_case: Case sensitivity the matcher was built with
            matcher: Compiled matcher
        """
        self._entries[(segment, ignore_case)] = matcher

    def get_or_compile(self, segment: str, ignore_case: bool) -> SegmentMatcher:
        """Return the cached matcher for a segment, compiling it on a miss.

        Args:
            segment: Raw segment pattern
            ignore_case: Whether names compare case-insensitively

        Returns:
            Compiled matcher
        """
        matcher = self.get(segment, ignore_case)
        if matcher is None:
            matcher = compile_segment(segment, ignore_case)
            self.set(segment, ignore_case, matcher)
        return matcher

    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Cache statistics
        """
        total_requests = self._hits + self._misses
        hit_rate = self._hits / total_requests if total_requests > 0 else 0
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": hit_rate,
        }

    def __len__(self) -> int:
        """Return number of cached matchers."""
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries


# Global cache instance
_global_cache: Optional[PatternCache] = None


def get_pattern_cache() -> PatternCache:
    """Get or create the global pattern cache.

    Returns:
        Global PatternCache instance
    """
    global _global_cache
    if _global_cache is None:
        _global_cache = PatternCache()
    return _global_cache


def set_global_cache(cache: PatternCache) -> None:
    """Set the global pattern cache.

    Args:
        cache: Pattern cache to use globally
    """
    global _global_cache
    _global_cache = cache
