"""Backup the JSON attendance document.

Note: only the json backend is covered; for mysql use `mysqldump` or MySQL Workbench.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if str(settings.STORAGE_BACKEND).lower() != "json":
        raise SystemExit("STORAGE_BACKEND is not json; back up the MySQL database with mysqldump instead.")

    source = Path(settings.DATA_FILE)
    if not source.exists():
        raise SystemExit(f"Nothing to back up: {source} does not exist.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{source.stem}_{ts}.json"
    shutil.copy2(source, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
