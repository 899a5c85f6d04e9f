"""Plain-text rendering of issues, feedback and progress."""

from typing import Dict, List, Mapping, Tuple

from ..models import AnalysisResult, Feedback, Issue, ProgressEntry, Severity

# severity -> (colour, css classes)
SEVERITY_STYLES: Dict[Severity, Tuple[str, str]] = {
    Severity.HIGH: ("red", "text-red-600 bg-red-50 border-red-200"),
    Severity.MEDIUM: ("yellow", "text-yellow-600 bg-yellow-50 border-yellow-200"),
    Severity.LOW: ("blue", "text-blue-600 bg-blue-50 border-blue-200"),
    Severity.NONE: ("green", "text-green-600 bg-green-50 border-green-200"),
}

SEVERITY_ORDER = [Severity.HIGH, Severity.MEDIUM, Severity.LOW, Severity.NONE]

EMPTY_PROGRESS_MESSAGE = "Start analyzing code to track your progress!"


def severity_style(severity) -> Tuple[str, str]:
    """Display style for a severity; anything unknown renders like 'none'."""
    if not isinstance(severity, Severity):
        try:
            severity = Severity(str(severity))
        except ValueError:
            severity = Severity.NONE
    return SEVERITY_STYLES[severity]


def format_issue(issue: Issue) -> str:
    location = f"line {issue.line}" if issue.line else "unknown line"
    return (
        f"- **{issue.severity.value.upper()}** [{issue.type.value}] "
        f"{issue.message} ({location})\n"
        f"  {issue.explanation}"
    )


def format_issues(issues: List[Issue]) -> str:
    parts = ["## Issues Found\n"]

    by_severity: Dict[Severity, List[Issue]] = {}
    for issue in issues:
        by_severity.setdefault(issue.severity, []).append(issue)

    for sev in SEVERITY_ORDER:
        if sev not in by_severity:
            continue
        colour, _ = SEVERITY_STYLES[sev]
        parts.append(f"\n### {sev.value.upper()} ({len(by_severity[sev])}) [{colour}]\n")
        for issue in by_severity[sev]:
            parts.append(format_issue(issue))

    return "\n".join(parts)


def format_feedback(feedback: Feedback) -> str:
    lines = ["## Feedback", "", feedback.summary]

    if feedback.teaching:
        lines.append("")
        lines.append("### Key Concepts")
        for point in feedback.teaching:
            lines.append(f"- **{point.concept}**: {point.explanation}")
            if point.example:
                lines.append(f"  Example: {point.example}")

    if feedback.questions:
        lines.append("")
        lines.append("### Think About It")
        for question in feedback.questions:
            lines.append(f"- {question}")

    if feedback.next_steps:
        lines.append("")
        lines.append("### Next Steps")
        for idx, step in enumerate(feedback.next_steps, 1):
            lines.append(f"{idx}. {step}")

    return "\n".join(lines)


def format_report(result: AnalysisResult) -> str:
    header = (
        f"# Code Mentor Report ({result.language_name}, {result.skill_level})\n"
    )
    return "\n".join([
        header,
        format_issues(list(result.issues)),
        "",
        format_feedback(result.feedback),
    ])


def _progress_bar(completion: float, width: int) -> str:
    filled = int(round(completion / 100 * width))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def format_progress(progress: Mapping[str, ProgressEntry], width: int = 20) -> str:
    if not progress:
        return EMPTY_PROGRESS_MESSAGE

    lines = ["## Your Progress", ""]
    for issue_type, entry in progress.items():
        lines.append(
            f"{issue_type.capitalize()} Issues {_progress_bar(entry.completion, width)} "
            f"{entry.resolved}/{entry.encountered} resolved, "
            f"{entry.encountered} encountered"
        )
    return "\n".join(lines)


def result_to_dict(result: AnalysisResult) -> dict:
    """JSON-safe view of an analysis result."""
    return {
        "language": result.language,
        "skill_level": result.skill_level,
        "timestamp": result.timestamp,
        "issues": [issue.to_dict() for issue in result.issues],
        "feedback": result.feedback.to_dict(),
    }
