"""Small persistent key/value store for visual preferences.

Backs the date/time format choice across sessions. Entry content is never
written here.
"""

import json
import logging
from pathlib import Path
from typing import Any

_log = logging.getLogger("cadence")


class PreferenceStore:
    """JSON-file preference store; writes through on every ``set``."""

    __slots__ = ("_path", "_values")

    def __init__(self, path: Path | None) -> None:
        self._path = path
        self._values: dict[str, Any] = self._load()

    @property
    def path(self) -> Path | None:
        return self._path

    def _load(self) -> dict[str, Any]:
        if self._path is None or not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            _log.warning("Ignoring unreadable preferences %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            _log.warning("Ignoring preferences %s: not an object", self._path)
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._values, indent=2, sort_keys=True))
