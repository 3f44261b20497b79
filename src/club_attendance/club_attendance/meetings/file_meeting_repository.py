from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import from_iso, to_iso
from ..database.json_file import JsonFile
from .model import Meeting
from .repository import MeetingRepository

logger = logging.getLogger(__name__)


class FileMeetingRepository(MeetingRepository):
    """The current meeting kept as a single JSON object.

    The file is read once at construction; afterwards the in-memory copy is
    authoritative and every update rewrites the file before the copy changes.
    """

    def __init__(self, file: JsonFile):
        self._file = file
        self._current = self._load()

    def _load(self) -> Optional[Meeting]:
        data = self._file.load(None)
        if data is None:
            return None
        if not isinstance(data, dict) or not data.get("meetingDate") or not data.get("agenda"):
            logger.warning("Ignoring malformed meeting data in %s", self._file.path)
            return None

        updated_at = None
        if data.get("updatedAt"):
            try:
                updated_at = from_iso(str(data["updatedAt"]))
            except ValueError:
                logger.warning("Ignoring bad updatedAt %r in %s", data["updatedAt"], self._file.path)
        return Meeting(meeting_date=str(data["meetingDate"]), agenda=str(data["agenda"]), updated_at=updated_at)

    def get_latest(self) -> Optional[Meeting]:
        return self._current

    def upsert_latest(self, *, meeting_date: str, agenda: str, updated_at: datetime) -> Meeting:
        meeting = Meeting(meeting_date=meeting_date, agenda=agenda, updated_at=updated_at)
        self._file.save(
            {
                "meetingDate": meeting.meeting_date,
                "agenda": meeting.agenda,
                "updatedAt": to_iso(updated_at),
            }
        )
        self._current = meeting
        return meeting
