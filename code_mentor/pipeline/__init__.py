"""Analysis pipeline stages."""

from .stage1_detect import detect_issues, no_issues_found
from .stage2_feedback import synthesize_feedback
from .session import run_analysis, run_analysis_sync

__all__ = [
    "detect_issues",
    "no_issues_found",
    "synthesize_feedback",
    "run_analysis",
    "run_analysis_sync",
]
