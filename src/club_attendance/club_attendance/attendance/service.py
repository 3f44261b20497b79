from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import ensure_utc, now_utc
from ..common.validators import optional_text, require_all, require_iso_date
from ..core.exceptions import NotFoundError
from ..meetings.service import MeetingStore
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceStore:
    """Append, query and delete attendance marks.

    Creates and deletes are serialized by one lock, which covers the file
    backend's read-modify-write of the whole ledger. Reads take no lock.
    """

    def __init__(self, attendance: AttendanceRepository, meetings: MeetingStore):
        self._attendance = attendance
        self._meetings = meetings
        self._lock = threading.Lock()

    def create(
        self,
        name: Any,
        branch: Any,
        year: Any,
        meeting_date: Any = None,
        agenda: Any = None,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        fields = require_all(
            {"name": name, "branch": branch, "year": year},
            "Name, branch, and year are required.",
        )
        date_to_use = optional_text(meeting_date)
        agenda_to_use = optional_text(agenda)
        if date_to_use:
            date_to_use = require_iso_date(date_to_use, "Meeting date")

        # Fall back to the current meeting for whichever of the two is missing.
        if date_to_use is None or agenda_to_use is None:
            current = self._meetings.get_current_meeting(now=now)
            date_to_use = date_to_use or current.meeting_date
            agenda_to_use = agenda_to_use or current.agenda

        with self._lock:
            record = self._attendance.add(
                name=fields["name"],
                branch=fields["branch"],
                year=fields["year"],
                meeting_date=date_to_use,
                agenda=agenda_to_use,
                timestamp=ensure_utc(now or now_utc()),
            )
        logger.info("Marked attendance %s: %s for %s", record.attendance_id, record.name, record.meeting_date)
        return record

    def list_by_meeting_date(self, meeting_date: Optional[str] = None) -> Sequence[AttendanceRecord]:
        date_to_filter = optional_text(meeting_date)
        if date_to_filter is None:
            current = self._meetings.find_current_meeting()
            if current is None:
                return []
            date_to_filter = current.meeting_date
        return self._attendance.list_by_meeting_date(date_to_filter)

    def delete_by_id(self, attendance_id: Any) -> AttendanceRecord:
        key = optional_text(attendance_id)
        if key is None:
            raise NotFoundError("Attendance record not found.")

        with self._lock:
            removed = self._attendance.delete_by_id(key)
        if removed is None:
            raise NotFoundError("Attendance record not found.")
        logger.info("Deleted attendance %s: %s for %s", removed.attendance_id, removed.name, removed.meeting_date)
        return removed
