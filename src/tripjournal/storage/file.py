from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileKeyValueStore:
    """Key/value store persisted as a single JSON object on disk.

    A missing or unreadable file reads as an empty mapping. Every write
    rewrites the whole file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable key/value file %s: %s", self.path, exc)
            return {}

        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        # holds a bearer token; owner read/write only
        self.path.chmod(0o600)
