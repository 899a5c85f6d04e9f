"""Key/value storage backends for persisted learner progress."""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol, Union


class ProgressStorage(Protocol):
    """Minimal get/set store the progress tracker writes through."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """
    Keeps values in a dict.

    Useful for tests and for sessions that should not touch disk.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    @property
    def values(self) -> Dict[str, str]:
        """Get copy of stored values."""
        return self._values.copy()

    def __len__(self) -> int:
        return len(self._values)


class JsonFileStorage:
    """Stores every key in a single JSON object on disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
