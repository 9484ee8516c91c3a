#!/usr/bin/env python3
r"""Segment pattern compilation for the directory walk.

This module turns a single path-segment pattern into a matcher:
- ``*`` matches any run of characters, ``?`` exactly one
- ``[...]`` character classes are passed through to the regex engine
- Every other regex metacharacter is escaped
- Case-sensitive and case-insensitive modes
- Literal fallback when the translated pattern does not compile
- Bounded evaluation time per candidate name

Example:
    >>> matcher = compile_segment("file[13]", ignore_case=True)
    >>> matcher.matches("FILE1")
    True
    >>> glob_to_regex("*.py")
    '^.*\\.py$'
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import regex

from pathglob.core.constants import REGEX_SPECIAL_CHARS, Limits


class MatcherKind(Enum):
    """How a segment is compared against entry names."""

    REGEX = "regex"  # Compiled anchored expression
    LITERAL = "literal"  # Plain string comparison


@dataclass(frozen=True)
class SegmentMatcher:
    """Compiled form of one path-segment pattern."""

    source: str
    kind: MatcherKind
    ignore_case: bool
    compiled: Optional[regex.Pattern] = None

    def matches(self, name: str) -> bool:
        """Check if an entry name matches this segment.

        Args:
            name: File or directory name (no separators)

        Returns:
            True if the whole name matches; False on mismatch or when the
            regex evaluation times out
        """
        if self.kind is MatcherKind.LITERAL:
            if self.ignore_case:
                return self.source.lower() == name.lower()
            return self.source == name

        try:
            return self.compiled.fullmatch(name, timeout=Limits.MATCH_TIMEOUT_SECONDS) is not None
        except TimeoutError:
            return False

    @property
    def pattern(self) -> str:
        """Regex text for REGEX matchers, raw segment text otherwise."""
        if self.compiled is not None:
            return self.compiled.pattern
        return self.source


def glob_to_regex(segment: str) -> str:
    """Translate a segment glob into an anchored regular expression.

    Args:
        segment: Segment pattern without separators

    Returns:
        Regex source anchored with ``^`` and ``$``
    """
    parts = ["^"]
    character_class = False

    for c in segment:
        if character_class:
            if c == "]":
                character_class = False
            parts.append(c)
            continue

        if c == "*":
            parts.append(".*")
        elif c == "?":
            parts.append(".")
        elif c == "[":
            character_class = True
            parts.append(c)
        elif c in REGEX_SPECIAL_CHARS:
            parts.append("\\" + c)
        else:
            parts.append(c)

    parts.append("$")
    return "".join(parts)


def compile_segment(segment: str, ignore_case: bool) -> SegmentMatcher:
    """Build a matcher for one segment pattern.

    Args:
        segment: Segment pattern without separators
        ignore_case: Whether names compare case-insensitively

    Returns:
        REGEX matcher, or LITERAL matcher over the raw segment if the
        translated expression is not a valid regex
    """
    flags = regex.IGNORECASE if ignore_case else 0

    try:
        compiled = regex.compile(glob_to_regex(segment), flags)
    except regex.error:
        return SegmentMatcher(source=segment, kind=MatcherKind.LITERAL, ignore_case=ignore_case)

    return SegmentMatcher(
        source=segment, kind=MatcherKind.REGEX, ignore_case=ignore_case, compiled=compiled
    )
