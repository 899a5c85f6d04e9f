"""Stage 1: Issue Detection - run the language's rule battery over a snippet."""

from typing import List

from ..models import Issue, IssueType, Severity, RuleKind
from ..rules import get_battery


NO_ISSUES_MESSAGE = "No obvious issues detected!"
NO_ISSUES_EXPLANATION = (
    "Your code structure looks good. Consider testing it with different "
    "inputs to verify it works as expected."
)


def no_issues_found() -> Issue:
    """The fallback issue returned when no rule fires."""
    return Issue(
        type=IssueType.SUCCESS,
        severity=Severity.NONE,
        message=NO_ISSUES_MESSAGE,
        explanation=NO_ISSUES_EXPLANATION,
        kind=RuleKind.NO_ISSUES,
    )


def detect_issues(code: str, language) -> List[Issue]:
    """
    Stage 1: Detect issues in a code snippet.

    Strategy: shallow text and regex heuristics, false positives OK.
    Unknown languages and languages without a battery never raise; they
    fall through to the success issue.

    Args:
        code: Source text to inspect
        language: Language tag (str or Language)

    Returns:
        Issues in battery order, or a single success issue
    """
    code = code or ""
    issues: List[Issue] = []
    for rule in get_battery(language):
        issues.extend(rule(code))

    if not issues:
        return [no_issues_found()]
    return issues
