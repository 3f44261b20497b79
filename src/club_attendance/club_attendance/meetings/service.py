from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import ensure_utc, now_utc
from ..common.validators import require_all, require_iso_date
from ..core.constants import DEFAULT_AGENDA
from ..core.exceptions import PreconditionError
from .model import Meeting
from .repository import MeetingRepository


logger = logging.getLogger(__name__)


class MeetingStore:
    """Owns the current meeting.

    All writes go through one lock, so two first reads on an empty store
    cannot both create a default meeting.
    """

    def __init__(
        self,
        meetings: MeetingRepository,
        *,
        default_agenda: str = DEFAULT_AGENDA,
        auto_create: bool = True,
    ):
        self._meetings = meetings
        self._default_agenda = default_agenda
        self._auto_create = bool(auto_create)
        self._lock = threading.Lock()

    def find_current_meeting(self) -> Optional[Meeting]:
        """Read-only lookup; never creates a meeting."""
        return self._meetings.get_latest()

    def get_current_meeting(self, *, now: datetime | None = None) -> Meeting:
        with self._lock:
            meeting = self._meetings.get_latest()
            if meeting is not None:
                return meeting
            if not self._auto_create:
                raise PreconditionError("No current meeting configured.")

            now = ensure_utc(now or now_utc())
            meeting = self._meetings.upsert_latest(
                meeting_date=now.date().isoformat(),
                agenda=self._default_agenda,
                updated_at=now,
            )
        logger.info("No meeting configured, created default for %s", meeting.meeting_date)
        return meeting

    def set_current_meeting(self, meeting_date: str, agenda: str, *, now: datetime | None = None) -> Meeting:
        fields = require_all(
            {"meeting_date": meeting_date, "agenda": agenda},
            "Meeting date and agenda are required.",
        )
        meeting_date = require_iso_date(fields["meeting_date"], "Meeting date")

        with self._lock:
            meeting = self._meetings.upsert_latest(
                meeting_date=meeting_date,
                agenda=fields["agenda"],
                updated_at=ensure_utc(now or now_utc()),
            )
        logger.info("Updated meeting: %s (%s)", meeting.meeting_date, meeting.agenda)
        return meeting
