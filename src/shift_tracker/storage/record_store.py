from __future__ import annotations

from typing import Any, Protocol


class RecordStore(Protocol):
    """Persistent mapping from a string key to a JSON-serializable value.

    Contract: load() right after save(key, v) returns a value deep-equal to v.
    A missing key or a stored value that cannot be parsed yields ``default``.
    """

    def load(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError
