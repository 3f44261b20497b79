from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Meeting:
    """The current meeting: the date and agenda new attendance is marked against."""

    meeting_date: str
    agenda: str
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {"meetingDate": self.meeting_date, "agenda": self.agenda}
