from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class AttendanceRecord:
    """One attendance mark.

    ``meeting_date`` and ``agenda`` are copied from the meeting at submission
    time and are never rewritten when the current meeting changes later.
    """

    attendance_id: str
    name: str
    branch: str
    year: str
    meeting_date: str
    agenda: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "name": self.name,
            "branch": self.branch,
            "year": self.year,
            "meetingDate": self.meeting_date,
            "agenda": self.agenda,
            "timestamp": to_iso(self.timestamp),
        }
