"""Per-issue-type progress counters on top of a storage backend."""

import json
from typing import Dict, Iterable, Optional

from ..models import Issue, IssueType, ProgressEntry
from ..utils.logging import get_logger
from .progress_store import ProgressStorage

PROGRESS_KEY = "code-mentor-progress"

logger = get_logger(__name__)


class ProgressTracker:
    """
    Tracks how often each issue type was encountered and resolved.

    Storage failures are logged and never raised: losing progress must not
    block an analysis.
    """

    def __init__(self, storage: ProgressStorage, key: str = PROGRESS_KEY):
        self.storage = storage
        self.key = key
        self._progress: Dict[str, ProgressEntry] = {}

    def load(self) -> Dict[str, ProgressEntry]:
        """Load saved progress, starting empty if none can be read."""
        try:
            raw = self.storage.get(self.key)
        except Exception as e:  # backend errors vary by client
            logger.warning(f"Failed to load progress: {e}")
            return self.snapshot()

        if raw is None:
            logger.info("No previous progress found")
            return self.snapshot()

        try:
            data = json.loads(raw)
            self._progress = {
                issue_type: ProgressEntry.from_dict(entry)
                for issue_type, entry in data.items()
            }
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring malformed progress record: {e}")
            self._progress = {}

        return self.snapshot()

    def save(self) -> bool:
        """Persist current counters. Returns False if storage failed."""
        payload = json.dumps(
            {issue_type: entry.to_dict() for issue_type, entry in self._progress.items()}
        )
        try:
            self.storage.set(self.key, payload)
            return True
        except Exception as e:  # backend errors vary by client
            logger.error(f"Failed to save progress: {e}")
            return False

    def record(self, issues: Iterable[Issue]) -> Dict[str, ProgressEntry]:
        """Count one encounter per issue, keyed by issue type."""
        for issue in issues:
            entry = self._progress.setdefault(issue.type.value, ProgressEntry())
            entry.encountered += 1
        self.save()
        return self.snapshot()

    def mark_resolved(self, issue_type, count: int = 1) -> Optional[ProgressEntry]:
        """Mark issues of a type as resolved, capped at the encountered count."""
        key = issue_type.value if isinstance(issue_type, IssueType) else str(issue_type)
        entry = self._progress.get(key)
        if entry is None:
            logger.warning(f"No encountered issues of type '{key}' to resolve")
            return None
        entry.resolved = min(entry.resolved + max(count, 0), entry.encountered)
        self.save()
        return ProgressEntry(entry.encountered, entry.resolved)

    def reset(self):
        self._progress.clear()
        self.save()

    def snapshot(self) -> Dict[str, ProgressEntry]:
        return {
            issue_type: ProgressEntry(entry.encountered, entry.resolved)
            for issue_type, entry in self._progress.items()
        }

    def __len__(self) -> int:
        return len(self._progress)
