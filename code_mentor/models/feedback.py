"""Data models for coaching feedback and analysis results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .issue import Issue, Language


class SkillLevel(Enum):
    """Learner's self-reported skill level."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def is_beginner(skill_level) -> bool:
    """Only the beginner / not-beginner split changes the wording."""
    if isinstance(skill_level, SkillLevel):
        return skill_level is SkillLevel.BEGINNER
    return str(skill_level) == SkillLevel.BEGINNER.value


@dataclass(frozen=True)
class TeachingPoint:
    """A concept explained in response to an issue."""
    concept: str
    explanation: str
    example: Optional[str] = None


@dataclass(frozen=True)
class Feedback:
    """Coaching response built from a list of issues."""
    summary: str
    teaching: Tuple[TeachingPoint, ...] = ()
    questions: Tuple[str, ...] = ()
    next_steps: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "teaching": [
                {k: v for k, v in vars(point).items() if v is not None}
                for point in self.teaching
            ],
            "questions": list(self.questions),
            "next_steps": list(self.next_steps),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """One analysis request: detected issues plus the feedback built from them."""
    issues: Tuple[Issue, ...]
    feedback: Feedback
    language: str
    skill_level: str
    timestamp: int = 0  # epoch milliseconds

    @property
    def language_name(self) -> str:
        lang = Language.from_value(self.language)
        return lang.display_name if lang else self.language

    @property
    def issue_types(self) -> List[str]:
        return [issue.type.value for issue in self.issues]
