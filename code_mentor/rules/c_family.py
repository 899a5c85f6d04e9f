"""Heuristic rules shared by C and C++ snippets."""

import re
from typing import List

from ..models import Issue, IssueType, Severity, RuleKind
from .common import find_line, split_lines

INDEX_PATTERN = re.compile(r"\w+\[\w+\]", re.ASCII)
UNINITIALIZED_PATTERNS = (
    re.compile(r"int\s+\w+;", re.ASCII),
    re.compile(r"float\s+\w+;", re.ASCII),
)

TERMINATORS = (";", "{", "}")
NON_STATEMENT_PREFIXES = ("#", "//")
# Lines mentioning these are assumed to open a block without a terminator
CONTROL_KEYWORDS = ("if", "for", "while")


def check_missing_semicolons(code: str) -> List[Issue]:
    issues = []
    for idx, line in enumerate(split_lines(code)):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.endswith(TERMINATORS) or stripped.startswith(NON_STATEMENT_PREFIXES):
            continue
        if any(keyword in stripped for keyword in CONTROL_KEYWORDS):
            continue
        issues.append(Issue(
            type=IssueType.SYNTAX,
            severity=Severity.HIGH,
            line=idx + 1,
            message="Missing semicolon",
            explanation=(
                "In C/C++, most statements must end with a semicolon. "
                "Did you forget one here?"
            ),
            kind=RuleKind.MISSING_SEMICOLON,
        ))
    return issues


def check_array_bounds(code: str) -> List[Issue]:
    if not INDEX_PATTERN.search(code) or "if" in code or "while" in code:
        return []
    return [Issue(
        type=IssueType.LOGIC,
        severity=Severity.MEDIUM,
        line=1,
        message="Potential array bounds violation",
        explanation=(
            "Are you checking if the index is within valid bounds? Accessing "
            "outside array bounds causes undefined behavior in C/C++."
        ),
        kind=RuleKind.ARRAY_BOUNDS,
    )]


def check_memory_leak(code: str) -> List[Issue]:
    allocates = "malloc" in code or "new" in code
    releases = "free" in code or "delete" in code
    if not allocates or releases:
        return []
    return [Issue(
        type=IssueType.LOGIC,
        severity=Severity.HIGH,
        line=find_line(code, "malloc", "new"),
        message="Potential memory leak",
        explanation=(
            "You allocated memory but never freed it. Every malloc() needs a "
            "free(), and every new needs a delete."
        ),
        kind=RuleKind.MEMORY_LEAK,
    )]


def check_uninitialized(code: str) -> List[Issue]:
    if not any(pattern.search(code) for pattern in UNINITIALIZED_PATTERNS):
        return []
    return [Issue(
        type=IssueType.LOGIC,
        severity=Severity.MEDIUM,
        line=1,
        message="Potentially uninitialized variable",
        explanation=(
            "In C/C++, variables are not automatically initialized. "
            "Always assign a value before using it."
        ),
        kind=RuleKind.UNINITIALIZED_VARIABLE,
    )]


C_FAMILY_RULES = (
    check_missing_semicolons,
    check_array_bounds,
    check_memory_leak,
    check_uninitialized,
)
