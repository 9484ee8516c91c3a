"""pathglob Pattern Rules.

Pattern handling for a single path segment:
- expand_groups: Brace alternation expansion
- compile_segment: Segment glob to matcher (regex or literal fallback)
"""

from .groups import expand_groups, has_unbalanced_close
from .patterns import MatcherKind, SegmentMatcher, compile_segment, glob_to_regex

__all__ = [
    # Group expansion
    "expand_groups",
    "has_unbalanced_close",
    # Segment compilation
    "MatcherKind",
    "SegmentMatcher",
    "compile_segment",
    "glob_to_regex",
]
