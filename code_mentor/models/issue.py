"""Data models for detected issues."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Severity(Enum):
    """Issue severity levels."""
    HIGH = "high"       # Code will not run correctly
    MEDIUM = "medium"   # Likely bug or resource problem
    LOW = "low"         # Style, reminders
    NONE = "none"       # Only used with IssueType.SUCCESS


class IssueType(Enum):
    """Categories of detected concerns."""
    LOGIC = "logic"
    SYNTAX = "syntax"
    CONCEPT = "concept"
    STYLE = "style"
    SUCCESS = "success"


class Language(Enum):
    """Declared source languages."""
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    JAVA = "java"
    C = "c"
    CPP = "cpp"
    CSHARP = "csharp"

    @property
    def display_name(self) -> str:
        return _LANGUAGE_NAMES[self]

    @classmethod
    def from_value(cls, value) -> Optional["Language"]:
        """Resolve a language tag, returning None for unknown values."""
        if isinstance(value, cls):
            return value
        # exact tags only: "Python" is not "python"
        try:
            return cls(value)
        except ValueError:
            return None


_LANGUAGE_NAMES = {
    Language.PYTHON: "Python",
    Language.JAVASCRIPT: "JavaScript",
    Language.JAVA: "Java",
    Language.C: "C",
    Language.CPP: "C++",
    Language.CSHARP: "C#",
}


class RuleKind(Enum):
    """Stable tag naming the heuristic that produced an issue."""
    INCOMPLETE_BASE_CASE = "incomplete-base-case"
    INDENTATION = "indentation"
    INFINITE_LOOP = "infinite-loop"
    OFF_BY_ONE = "off-by-one"
    UNUSED_VARIABLE = "unused-variable"
    MISSING_RETURN = "missing-return"
    MISSING_SEMICOLON = "missing-semicolon"
    ARRAY_BOUNDS = "array-bounds"
    MEMORY_LEAK = "memory-leak"
    UNINITIALIZED_VARIABLE = "uninitialized-variable"
    NULL_REFERENCE = "null-reference"
    UNDISPOSED_RESOURCE = "undisposed-resource"
    GENERIC_CATCH = "generic-catch"
    NO_ISSUES = "no-issues"

    @classmethod
    def from_message(cls, message: str) -> List["RuleKind"]:
        """
        Guess the rules from a rendered message.

        Only used for issues built without a kind, e.g. loaded from JSON.
        Every matching fragment counts, in trigger order.
        """
        return [kind for fragment, kind in _MESSAGE_FRAGMENTS if fragment in message]


# Fragments the feedback triggers historically matched on
_MESSAGE_FRAGMENTS = (
    ("base case", RuleKind.INCOMPLETE_BASE_CASE),
    ("infinite loop", RuleKind.INFINITE_LOOP),
    ("memory leak", RuleKind.MEMORY_LEAK),
    ("semicolon", RuleKind.MISSING_SEMICOLON),
    ("null reference", RuleKind.NULL_REFERENCE),
)


@dataclass(frozen=True)
class Issue:
    """A single detected concern about a code snippet."""
    type: IssueType
    severity: Severity
    message: str
    explanation: str
    line: Optional[int] = None   # 1-based, best effort; 0 when not located
    kind: Optional[RuleKind] = None

    @property
    def resolved_kinds(self) -> List[RuleKind]:
        if self.kind is not None:
            return [self.kind]
        return RuleKind.from_message(self.message)

    def to_dict(self) -> dict:
        data = {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
            "explanation": self.explanation,
        }
        if self.line is not None:
            data["line"] = self.line
        if self.kind is not None:
            data["kind"] = self.kind.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Issue":
        kind = data.get("kind")
        return cls(
            type=IssueType(data.get("type", "success")),
            severity=Severity(data.get("severity", "none")),
            message=data.get("message", ""),
            explanation=data.get("explanation", ""),
            line=data.get("line"),
            kind=RuleKind(kind) if kind else None,
        )
