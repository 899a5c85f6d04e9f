"""Data models for learner progress."""

from dataclasses import dataclass


@dataclass
class ProgressEntry:
    """Counters for one issue type."""
    encountered: int = 0
    resolved: int = 0

    @property
    def completion(self) -> float:
        """Resolved share as a percentage, capped at 100."""
        if self.encountered <= 0:
            return 0.0
        return min(self.resolved / self.encountered * 100, 100.0)

    def to_dict(self) -> dict:
        return {"encountered": self.encountered, "resolved": self.resolved}

    @classmethod
    def from_dict(cls, data: dict) -> "ProgressEntry":
        return cls(
            encountered=int(data.get("encountered", 0)),
            resolved=int(data.get("resolved", 0)),
        )
