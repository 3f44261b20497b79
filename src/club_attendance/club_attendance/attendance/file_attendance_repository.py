from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import from_iso, to_iso
from ..database.json_file import JsonFile
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("id", "name", "branch", "year", "meetingDate", "agenda", "timestamp")


def _to_record(doc: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=str(doc["id"]),
        name=str(doc["name"]),
        branch=str(doc["branch"]),
        year=str(doc["year"]),
        meeting_date=str(doc["meetingDate"]),
        agenda=str(doc["agenda"]),
        timestamp=from_iso(str(doc["timestamp"])),
    )


class FileAttendanceRepository(AttendanceRepository):
    """The ledger kept as one JSON array in insertion order.

    The array is cached in memory after the startup read. Mutations build a
    new list, write it to disk, and only then replace the cache, so a failed
    write leaves both the file and the cache as they were.
    """

    def __init__(self, file: JsonFile):
        self._file = file
        self._records: list[dict] = self._load()

    def _load(self) -> list[dict]:
        data = self._file.load([])
        if not isinstance(data, list):
            logger.warning("Expected a list of records in %s, starting empty", self._file.path)
            return []

        records: list[dict] = []
        for doc in data:
            try:
                if not isinstance(doc, dict) or any(doc.get(k) in (None, "") for k in _REQUIRED_KEYS):
                    raise ValueError("missing fields")
                from_iso(str(doc["timestamp"]))
            except ValueError:
                logger.warning("Skipping malformed attendance entry in %s: %r", self._file.path, doc)
                continue
            records.append(doc)
        return records

    def ensure_file(self) -> bool:
        """Write the current ledger if the file does not exist yet. Returns True if written."""
        if self._file.path.exists():
            return False
        self._file.save(self._records)
        return True

    def _allocate_id(self) -> str:
        return uuid.uuid4().hex

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
        doc = {
            "id": self._allocate_id(),
            "name": name,
            "branch": branch,
            "year": year,
            "meetingDate": meeting_date,
            "agenda": agenda,
            "timestamp": to_iso(timestamp),
        }
        records = [*self._records, doc]
        self._file.save(records)
        self._records = records
        return _to_record(doc)

    def list_by_meeting_date(self, meeting_date: str) -> Sequence[AttendanceRecord]:
        matches = [
            (index, _to_record(doc))
            for index, doc in enumerate(self._records)
            if str(doc["meetingDate"]) == meeting_date
        ]
        matches.sort(key=lambda item: (item[1].timestamp, item[0]), reverse=True)
        return [record for _, record in matches]

    def delete_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        index = next(
            (i for i, doc in enumerate(self._records) if str(doc["id"]) == attendance_id),
            None,
        )
        if index is None:
            return None

        removed = self._records[index]
        records = self._records[:index] + self._records[index + 1 :]
        self._file.save(records)
        self._records = records
        return _to_record(removed)
