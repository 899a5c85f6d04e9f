"""Rule-based coding feedback for learners."""

from .pipeline import (
    detect_issues,
    synthesize_feedback,
    run_analysis,
    run_analysis_sync,
)

# Short aliases for the two core operations
detect = detect_issues
synthesize = synthesize_feedback

__all__ = [
    "detect",
    "synthesize",
    "detect_issues",
    "synthesize_feedback",
    "run_analysis",
    "run_analysis_sync",
]
