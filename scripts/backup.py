"""Backup stored shifts.

Writes the shift collection of the configured storage backend to
backups/shifts_<timestamp>.json.
"""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from shift_tracker.config import get_settings_module
from shift_tracker.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    shifts = container.shifts_repo.list_all()

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"shifts_{ts}.json"
    out_file.write_text(
        json.dumps([s.to_dict() for s in shifts], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    print(f"OK: Backup created: {out_file} (shifts={len(shifts)})")


if __name__ == "__main__":
    main()
