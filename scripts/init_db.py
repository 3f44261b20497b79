from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.club_attendance.club_attendance.container import build_container
from src.club_attendance.club_attendance.database.bootstrap import describe_storage, ensure_storage


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    storage_config = dict(settings.STORAGE_CONFIG)

    container = build_container(storage_config=storage_config, default_agenda=settings.DEFAULT_AGENDA)
    steps = ensure_storage(container)
    print(f"OK: storage ready -> {describe_storage(storage_config)} (steps={len(steps)})")


if __name__ == "__main__":
    main()
