"""Data models for code analysis and feedback."""

from .issue import Severity, IssueType, Language, RuleKind, Issue
from .feedback import SkillLevel, TeachingPoint, Feedback, AnalysisResult, is_beginner
from .progress import ProgressEntry

__all__ = [
    "Severity",
    "IssueType",
    "Language",
    "RuleKind",
    "Issue",
    "SkillLevel",
    "TeachingPoint",
    "Feedback",
    "AnalysisResult",
    "is_beginner",
    "ProgressEntry",
]
