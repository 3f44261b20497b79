from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def add(
        self,
        *,
        name: str,
        branch: str,
        year: str,
        meeting_date: str,
        agenda: str,
        timestamp: datetime,
    ) -> AttendanceRecord:
        """Persist a new record under a freshly allocated id and return it."""

        raise NotImplementedError

    def list_by_meeting_date(self, meeting_date: str) -> Sequence[AttendanceRecord]:
        """Records for one meeting date, newest first; ties put the later insert first."""

        raise NotImplementedError

    def delete_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        """Remove one record whose id equals ``attendance_id`` as a string.

        Returns the removed record, or None when nothing matched.
        """

        raise NotImplementedError
