from __future__ import annotations

import json
from typing import Any

from .record_store import RecordStore


class InMemoryRecordStore(RecordStore):
    """Process-local store. Values are kept as JSON text so callers never share state."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._raw: dict[str, str] = dict(initial or {})

    def load(self, key: str, default: Any = None) -> Any:
        raw = self._raw.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except ValueError:
            return default

    def save(self, key: str, value: Any) -> None:
        self._raw[key] = json.dumps(value, ensure_ascii=False)
