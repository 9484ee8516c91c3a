#!/usr/bin/env python3
"""Brace group expansion for glob patterns.

Expands ``{a,b,...}`` alternation into the list of literal alternatives:
- Nested groups are expanded recursively
- Text before and after a group is preserved
- Results follow declaration order, first option first
- Unbalanced braces leave the input untouched

Example:
    >>> expand_groups("{a,b}/{c,d}")
    ['a/c', 'a/d', 'b/c', 'b/d']
    >>> expand_groups("dir{1,2{x,y}}")
    ['dir1', 'dir2x', 'dir2y']
"""

from typing import List


def expand_groups(text: str) -> List[str]:
    """Expand every brace group in text.

    Args:
        text: Pattern or pattern fragment

    Returns:
        List of expanded alternatives in left-to-right order; ``[text]`` when
        there is nothing to expand or the braces do not balance
    """
    if "{" not in text:
        return [text]

    level = 0
    option: List[str] = []
    options: List[str] = []
    prefix = ""
    postfix = ""

    for i, c in enumerate(text):
        if c == "{":
            level += 1
            if level == 1:
                prefix = "".join(option)
                option.clear()
            else:
                option.append(c)
        elif c == ",":
            if level == 1:
                options.append("".join(option))
                option.clear()
            else:
                option.append(c)
        elif c == "}":
            level -= 1
            if level < 0:
                return [text]
            if level == 0:
                options.append("".join(option))
                postfix = text[i + 1 :]
                break
            option.append(c)
        else:
            option.append(c)

    # Never closed
    if level > 0:
        return [text]

    post_groups = expand_groups(postfix)

    return [
        prefix + expanded + post
        for opt in options
        for expanded in expand_groups(opt)
        for post in post_groups
    ]


def has_unbalanced_close(segment: str) -> bool:
    """Check whether a path segment closes more groups than it opens.

    This happens when a group that began in an earlier segment spans the
    separator, e.g. the last segment of ``/{a,b/c}``.

    Args:
        segment: Single path segment

    Returns:
        True if ``}`` outnumbers ``{``
    """
    return segment.count("}") > segment.count("{")
