"""Analysis session: delay, detect, synthesize, record progress."""

import asyncio
import time
from typing import Optional

from ..models import AnalysisResult, Language, SkillLevel
from ..tools import ProgressTracker
from ..utils.logging import get_logger
from .stage1_detect import detect_issues
from .stage2_feedback import synthesize_feedback

logger = get_logger(__name__)


def _tag(value) -> str:
    if isinstance(value, (Language, SkillLevel)):
        return value.value
    return str(value)


async def run_analysis(
    code: str,
    language,
    skill_level,
    tracker: Optional[ProgressTracker] = None,
    delay: float = 0.0,
) -> Optional[AnalysisResult]:
    """
    Run one analysis request end to end.

    Args:
        code: Source snippet
        language: Declared language tag
        skill_level: Learner skill level tag
        tracker: Optional progress tracker to record issue types on
        delay: Artificial delay in seconds before analysing

    Returns:
        AnalysisResult, or None when the code is blank
    """
    if not code or not code.strip():
        logger.info("Nothing to analyze: code is empty")
        return None

    if delay > 0:
        await asyncio.sleep(delay)

    logger.info(f"Analyzing {_tag(language)} snippet ({len(code.splitlines())} lines)")
    issues = detect_issues(code, language)
    feedback = synthesize_feedback(issues, skill_level)
    logger.info(f"Analysis complete: {len(issues)} issue(s)")

    result = AnalysisResult(
        issues=tuple(issues),
        feedback=feedback,
        language=_tag(language),
        skill_level=_tag(skill_level),
        timestamp=int(time.time() * 1000),
    )

    if tracker is not None:
        tracker.record(result.issues)

    return result


# Synchronous wrapper for non-async contexts
def run_analysis_sync(
    code: str,
    language,
    skill_level,
    tracker: Optional[ProgressTracker] = None,
    delay: float = 0.0,
) -> Optional[AnalysisResult]:
    """Synchronous wrapper for run_analysis."""
    return asyncio.run(run_analysis(code, language, skill_level, tracker, delay))
