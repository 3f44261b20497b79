from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import Meeting


class MeetingRepository(Protocol):
    def get_latest(self) -> Optional[Meeting]:
        """Return the most recently updated meeting, or None when there is none."""

        raise NotImplementedError

    def upsert_latest(self, *, meeting_date: str, agenda: str, updated_at: datetime) -> Meeting:
        """Overwrite the most recently updated meeting, creating one if none exists."""

        raise NotImplementedError
