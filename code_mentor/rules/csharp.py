"""Heuristic rules for C# snippets."""

from typing import List

from ..models import Issue, IssueType, Severity, RuleKind
from .common import find_line

DISPOSABLE_CONSTRUCTIONS = ("new StreamReader", "new FileStream")
DISPOSABLE_TYPES = ("StreamReader", "FileStream")
GENERIC_CATCH = "catch (Exception"


def check_null_reference(code: str) -> List[Issue]:
    if "." not in code or "if" in code or "?." in code:
        return []
    return [Issue(
        type=IssueType.LOGIC,
        severity=Severity.MEDIUM,
        line=1,
        message="Potential null reference exception",
        explanation=(
            "Are you checking if the object is null before accessing its "
            "members? Consider using null-conditional operator (?.) or null checks."
        ),
        kind=RuleKind.NULL_REFERENCE,
    )]


def check_undisposed_resource(code: str) -> List[Issue]:
    constructs = any(ctor in code for ctor in DISPOSABLE_CONSTRUCTIONS)
    if not constructs or "using" in code:
        return []
    return [Issue(
        type=IssueType.STYLE,
        severity=Severity.MEDIUM,
        line=find_line(code, *DISPOSABLE_TYPES),
        message="Resource not properly disposed",
        explanation=(
            "Use a using statement to ensure resources are properly disposed. "
            "This prevents resource leaks."
        ),
        kind=RuleKind.UNDISPOSED_RESOURCE,
    )]


def check_generic_catch(code: str) -> List[Issue]:
    if GENERIC_CATCH not in code:
        return []
    return [Issue(
        type=IssueType.STYLE,
        severity=Severity.LOW,
        line=find_line(code, GENERIC_CATCH),
        message="Catching generic Exception",
        explanation=(
            "Consider catching more specific exception types. This makes your "
            "error handling more precise and maintainable."
        ),
        kind=RuleKind.GENERIC_CATCH,
    )]


CSHARP_RULES = (
    check_null_reference,
    check_undisposed_resource,
    check_generic_catch,
)
