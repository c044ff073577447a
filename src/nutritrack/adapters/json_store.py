"""Key-value store backed by one JSON file per key."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal get/set storage contract."""

    def get(self, key: str) -> object | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: object) -> None:
        """Store a JSON-serialisable value under a key."""


@dataclass
class JsonFileStore(KeyValueStore):
    """Stores each key as <root>/<key>.json, rewritten on every set."""

    root: Path

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> object | None:
        """Return the decoded document, or None if missing or unreadable."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            _logger.warning("Ignoring unreadable JSON document: %s", path)
            return None

    def set(self, key: str, value: object) -> None:
        """Overwrite the document for a key."""
        self.root.mkdir(parents=True, exist_ok=True)
        document = json.dumps(value, ensure_ascii=False, indent=2, allow_nan=False)
        self._path(key).write_text(document, encoding="utf-8")
