from __future__ import annotations

import uuid


def generate_shift_id() -> str:
    """Random 128-bit identifier encoded as 32 hex chars."""
    return uuid.uuid4().hex
