"""Heuristic rules for Python snippets."""

import re
from typing import List

from ..models import Issue, IssueType, Severity, RuleKind
from .common import find_line, find_line_matching, split_lines

RANGE_PATTERN = re.compile(r"range\(\w+\)", re.ASCII)
ASSIGNMENT_PATTERN = re.compile(r"(\w+)\s*=\s*.+", re.ASCII)
LEADING_TOKEN_PATTERN = re.compile(r"\S+\s+")

IGNORED_NAME = "_"


def check_base_case(code: str) -> List[Issue]:
    """Factorial base case that handles n == 1 but not n == 0."""
    if "factorial" not in code or "n == 1" not in code or "n <= 1" in code:
        return []
    return [Issue(
        type=IssueType.LOGIC,
        severity=Severity.HIGH,
        line=find_line(code, "n == 1"),
        message="Incomplete base case in recursive function",
        explanation=(
            "Your base case only handles n=1, but what happens when n=0? "
            "The function will recurse infinitely."
        ),
        kind=RuleKind.INCOMPLETE_BASE_CASE,
    )]


def check_indentation(code: str) -> List[Issue]:
    """Unindented statement directly after a block-opening colon."""
    if not LEADING_TOKEN_PATTERN.match(code) or "def " not in code:
        return []

    lines = split_lines(code)
    for i, line in enumerate(lines):
        if not line.strip() or line.startswith((" ", "def", "#")):
            continue
        if i > 0 and lines[i - 1].strip().endswith(":"):
            return [Issue(
                type=IssueType.SYNTAX,
                severity=Severity.HIGH,
                line=i + 1,
                message="Indentation error",
                explanation=(
                    "Python requires consistent indentation. Code inside a "
                    "function or after a colon must be indented."
                ),
                kind=RuleKind.INDENTATION,
            )]
    return []


def check_infinite_loop(code: str) -> List[Issue]:
    if "while True" not in code or "break" in code:
        return []
    return [Issue(
        type=IssueType.LOGIC,
        severity=Severity.MEDIUM,
        line=find_line(code, "while True"),
        message="Potential infinite loop",
        explanation=(
            'You have a "while True" loop without a break statement. '
            "How will this loop ever stop?"
        ),
        kind=RuleKind.INFINITE_LOOP,
    )]


def check_off_by_one(code: str) -> List[Issue]:
    if not RANGE_PATTERN.search(code):
        return []
    return [Issue(
        type=IssueType.CONCEPT,
        severity=Severity.LOW,
        line=find_line_matching(code, RANGE_PATTERN),
        message="Potential off-by-one error",
        explanation=(
            "Remember: range(n) goes from 0 to n-1, not 0 to n. "
            "Is this what you intended?"
        ),
        kind=RuleKind.OFF_BY_ONE,
    )]


def check_unused_variables(code: str) -> List[Issue]:
    """One issue per assignment whose name never appears again."""
    issues = []
    for match in ASSIGNMENT_PATTERN.finditer(code):
        name = match.group(1)
        if name == IGNORED_NAME:
            continue
        usage = len(re.findall(r"\b%s\b" % re.escape(name), code, re.ASCII))
        if usage != 1:
            continue
        issues.append(Issue(
            type=IssueType.STYLE,
            severity=Severity.LOW,
            line=find_line(code, match.group(0)),
            message=f"Variable '{name}' is assigned but never used",
            explanation="Did you forget to use this variable, or is it unnecessary?",
            kind=RuleKind.UNUSED_VARIABLE,
        ))
    return issues


def check_missing_return(code: str) -> List[Issue]:
    if "def " not in code or "return" in code or "print" in code:
        return []
    return [Issue(
        type=IssueType.LOGIC,
        severity=Severity.MEDIUM,
        line=find_line(code, "def "),
        message="Function may not return a value",
        explanation=(
            "Your function does not have a return statement. "
            "Should it return something?"
        ),
        kind=RuleKind.MISSING_RETURN,
    )]


PYTHON_RULES = (
    check_base_case,
    check_indentation,
    check_infinite_loop,
    check_off_by_one,
    check_unused_variables,
    check_missing_return,
)
