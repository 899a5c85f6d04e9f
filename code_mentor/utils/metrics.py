"""Metrics calculation for a single analysis."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models import Issue, IssueType, Severity


@dataclass
class AnalysisMetrics:
    """Counts derived from one detected issue list."""

    total_issues: int = 0

    # Severity breakdown
    high_count: int = 0
    medium_count: int = 0
    low_count: int = 0

    # Type breakdown (issue type value -> count)
    type_counts: Dict[str, int] = field(default_factory=dict)

    is_clean: bool = False  # Only the success fallback was returned

    # Timing
    analysis_duration_ms: Optional[int] = None


def calculate_metrics(
    issues: List[Issue],
    duration_ms: Optional[int] = None
) -> AnalysisMetrics:
    """
    Calculate metrics from detected issues.

    Args:
        issues: Issues returned by detect
        duration_ms: Analysis duration in milliseconds

    Returns:
        AnalysisMetrics object with calculated statistics
    """
    is_clean = bool(issues) and all(i.type is IssueType.SUCCESS for i in issues)
    real_issues = [] if is_clean else list(issues)

    severity_counts = {Severity.HIGH: 0, Severity.MEDIUM: 0, Severity.LOW: 0}
    type_counts: Dict[str, int] = {}
    for issue in real_issues:
        if issue.severity in severity_counts:
            severity_counts[issue.severity] += 1
        type_counts[issue.type.value] = type_counts.get(issue.type.value, 0) + 1

    return AnalysisMetrics(
        total_issues=len(real_issues),
        high_count=severity_counts[Severity.HIGH],
        medium_count=severity_counts[Severity.MEDIUM],
        low_count=severity_counts[Severity.LOW],
        type_counts=type_counts,
        is_clean=is_clean,
        analysis_duration_ms=duration_ms,
    )


def format_metrics_report(metrics: AnalysisMetrics) -> str:
    lines = [
        "## Analysis Metrics",
        "",
        f"- Issues found: {metrics.total_issues}",
    ]

    if metrics.is_clean:
        lines.append("- No obvious issues detected")
    else:
        lines += [
            "",
            "### Severity Breakdown",
            f"- High: {metrics.high_count}",
            f"- Medium: {metrics.medium_count}",
            f"- Low: {metrics.low_count}",
            "",
            "### By Type",
        ]
        for issue_type, count in sorted(metrics.type_counts.items()):
            lines.append(f"- {issue_type.capitalize()}: {count}")

    if metrics.analysis_duration_ms:
        duration_sec = metrics.analysis_duration_ms / 1000
        lines.append("")
        lines.append("### Performance")
        lines.append(f"- Analysis duration: {duration_sec:.2f}s")

    return "\n".join(lines)
