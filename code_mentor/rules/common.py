"""Shared helpers for heuristic rules."""

import re
from typing import Callable, List

from ..models import Issue

# A rule inspects raw source text and returns zero or more issues
Rule = Callable[[str], List[Issue]]


def split_lines(code: str) -> List[str]:
    return code.split("\n")


def find_line(code: str, *needles: str) -> int:
    """
    1-based number of the first line containing any needle.

    Returns 0 when nothing matches.
    """
    for idx, line in enumerate(split_lines(code)):
        if any(needle in line for needle in needles):
            return idx + 1
    return 0


def find_line_matching(code: str, pattern: "re.Pattern") -> int:
    """1-based number of the first line where pattern matches, 0 otherwise."""
    for idx, line in enumerate(split_lines(code)):
        if pattern.search(line):
            return idx + 1
    return 0
