from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .record_store import RecordStore


class JsonFileRecordStore(RecordStore):
    """All keys live in one JSON object on disk: {"<key>": <value>, ...}.

    Writes go to a temp file which then replaces the real one.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8").strip()
            if not raw:
                return {}
            data = json.loads(raw)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def load(self, key: str, default: Any = None) -> Any:
        return self._read_all().get(key, default)

    def save(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.parent / (self._path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)
