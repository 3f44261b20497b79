from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFile:
    """One human-readable JSON document on disk, always read and written whole.

    Loading never raises: a missing or unreadable file yields the supplied
    default and a warning. Saving writes a sibling temp file and swaps it in
    with ``os.replace`` so readers never see a half-written document.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self, default: Any) -> Any:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            logger.warning("%s does not exist yet, starting from default", self._path)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s, starting from default: %s", self._path, exc)
        return default

    def save(self, value: Any) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(value, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            logger.error("Failed to write %s: %s", self._path, exc)
            raise StorageError(f"Failed to write {self._path.name}") from exc
