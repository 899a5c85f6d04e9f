"""Progress persistence and report rendering."""

from .progress_store import ProgressStorage, MemoryStorage, JsonFileStorage
from .progress_tracker import ProgressTracker, PROGRESS_KEY
from .report_formatter import (
    SEVERITY_STYLES,
    severity_style,
    format_issue,
    format_issues,
    format_feedback,
    format_report,
    format_progress,
    result_to_dict,
)

__all__ = [
    "ProgressStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "ProgressTracker",
    "PROGRESS_KEY",
    "SEVERITY_STYLES",
    "severity_style",
    "format_issue",
    "format_issues",
    "format_feedback",
    "format_report",
    "format_progress",
    "result_to_dict",
]
