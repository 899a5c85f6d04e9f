"""Stage 2: Feedback Synthesis - turn detected issues into coaching."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..models import (
    Feedback,
    Issue,
    IssueType,
    RuleKind,
    Severity,
    TeachingPoint,
    is_beginner,
)


SUCCESS_SUMMARY_BEGINNER = "Great work! Your code looks solid. Keep practicing!"
SUCCESS_SUMMARY = "Code structure is sound. Consider edge cases and optimization."
IMPROVEMENT_SUMMARY = "Your code runs, but there are some improvements we can make."

SUCCESS_NEXT_STEPS = (
    "Test your code with various inputs",
    "Think about edge cases (empty input, very large numbers, etc.)",
    "Consider time and space complexity",
)
LOGIC_NEXT_STEPS = (
    "Fix the logical issues identified above",
    "Test your code with edge cases",
    "Add comments explaining your logic",
)
GENERAL_NEXT_STEPS = (
    "Run your code with test cases",
    "Consider code readability and style",
    "Think about performance optimization",
)


@dataclass(frozen=True)
class Lesson:
    """Teaching point plus optional reflective question for one skill band."""
    point: TeachingPoint
    question: Optional[str] = None


@dataclass(frozen=True)
class LessonPlan:
    """What to teach for a rule kind, split by beginner / everyone else."""
    required_type: Optional[IssueType]
    beginner: Optional[Lesson]
    other: Optional[Lesson]

    def lesson_for(self, beginner: bool) -> Optional[Lesson]:
        return self.beginner if beginner else self.other


_LOOP_TERMINATION = Lesson(
    TeachingPoint(
        concept="Loop Termination",
        explanation=(
            "Every loop needs a way to exit. Without a break statement or a "
            "condition that becomes false, your loop will run forever."
        ),
        example=(
            "Add a break statement when a certain condition is met, or use a "
            "condition that will eventually become false."
        ),
    ),
    question="Under what condition should this loop stop? How can you express that in code?",
)

_MEMORY_MANAGEMENT = Lesson(
    TeachingPoint(
        concept="Memory Management",
        explanation=(
            "In C/C++, memory you allocate must be manually freed. Failing to "
            "do so causes memory leaks."
        ),
        example="int* ptr = new int[10]; // ... use it ... delete[] ptr;",
    ),
    question="Where in your code should you free the allocated memory?",
)

_NULL_SAFETY = Lesson(
    TeachingPoint(
        concept="Null Safety",
        explanation=(
            "In C#, accessing members of a null object throws a "
            "NullReferenceException. Always check for null or use null-safe operators."
        ),
        example='string result = myObject?.ToString() ?? "default";',
    ),
    question="What happens if the object is null when you try to access its properties?",
)

LESSONS: Dict[RuleKind, LessonPlan] = {
    RuleKind.INCOMPLETE_BASE_CASE: LessonPlan(
        required_type=IssueType.LOGIC,
        beginner=Lesson(
            TeachingPoint(
                concept="Recursive Base Cases",
                explanation=(
                    "Every recursive function needs a base case - a condition "
                    "where it stops calling itself. Your base case should handle "
                    "ALL stopping conditions, not just one value."
                ),
                example="For factorial, both 0! and 1! equal 1, so use: if n <= 1: return 1",
            ),
            question="What would happen if someone calls factorial(0)? Walk through the steps.",
        ),
        other=Lesson(
            TeachingPoint(
                concept="Edge Case Handling",
                explanation=(
                    "Your base case needs to handle edge cases. Consider: what "
                    "are all the valid inputs that should stop the recursion?"
                ),
                example="n <= 1 covers both 0 and 1, preventing infinite recursion.",
            ),
        ),
    ),
    RuleKind.INFINITE_LOOP: LessonPlan(
        required_type=IssueType.LOGIC,
        beginner=_LOOP_TERMINATION,
        other=_LOOP_TERMINATION,
    ),
    RuleKind.MEMORY_LEAK: LessonPlan(
        required_type=IssueType.LOGIC,
        beginner=_MEMORY_MANAGEMENT,
        other=_MEMORY_MANAGEMENT,
    ),
    RuleKind.MISSING_SEMICOLON: LessonPlan(
        required_type=IssueType.SYNTAX,
        beginner=Lesson(
            TeachingPoint(
                concept="Statement Terminators",
                explanation=(
                    "In C/C++/Java/C#, most statements end with a semicolon. It "
                    "tells the compiler where one statement ends and another begins."
                ),
                example="int x = 5; // semicolon required",
            ),
        ),
        other=None,
    ),
    RuleKind.NULL_REFERENCE: LessonPlan(
        required_type=None,
        beginner=_NULL_SAFETY,
        other=_NULL_SAFETY,
    ),
}


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def _summary(high_count: int, beginner: bool) -> str:
    if high_count <= 0:
        return IMPROVEMENT_SUMMARY
    issues = _plural(high_count, "critical issue")
    if beginner:
        return (
            f"I found {issues} that will prevent your code from running "
            "correctly. Let's work through them together!"
        )
    return f"{issues} detected. Review the base cases and control flow."


def _lessons(issues: Sequence[Issue], beginner: bool) -> Tuple[List[TeachingPoint], List[str]]:
    teaching: List[TeachingPoint] = []
    questions: List[str] = []
    for issue in issues:
        for kind in issue.resolved_kinds:
            plan = LESSONS.get(kind)
            if plan is None:
                continue
            if plan.required_type is not None and issue.type is not plan.required_type:
                continue
            lesson = plan.lesson_for(beginner)
            if lesson is None:
                continue
            teaching.append(lesson.point)
            if lesson.question:
                questions.append(lesson.question)
    return teaching, questions


def synthesize_feedback(issues: Sequence[Issue], skill_level) -> Feedback:
    """
    Stage 2: Build coaching feedback from detected issues.

    Args:
        issues: Output of detect_issues (order is preserved)
        skill_level: "beginner", "intermediate" or "advanced"; only the
            beginner / not-beginner split is observable

    Returns:
        Feedback with summary, teaching points, questions and 3 next steps
    """
    beginner = is_beginner(skill_level)

    if issues and issues[0].type is IssueType.SUCCESS:
        return Feedback(
            summary=SUCCESS_SUMMARY_BEGINNER if beginner else SUCCESS_SUMMARY,
            next_steps=SUCCESS_NEXT_STEPS,
        )

    high_count = sum(1 for issue in issues if issue.severity is Severity.HIGH)
    has_logic = any(issue.type is IssueType.LOGIC for issue in issues)
    teaching, questions = _lessons(issues, beginner)

    return Feedback(
        summary=_summary(high_count, beginner),
        teaching=tuple(teaching),
        questions=tuple(questions),
        next_steps=LOGIC_NEXT_STEPS if has_logic else GENERAL_NEXT_STEPS,
    )
