from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from ..common.datetime_utils import ensure_utc
from ..core.constants import ATTENDANCE_COLLECTION
from ..database.mongo import MongoConnection, bson_datetime, mongo_errors
from .model import AttendanceRecord
from .repository import AttendanceRepository

# ObjectIds grow with insertion order, so they break timestamp ties.
_NEWEST_FIRST = [("timestamp", DESCENDING), ("_id", DESCENDING)]


def _id_candidates(attendance_id: str) -> list[Any]:
    """Every native ``_id`` form whose string value equals ``attendance_id``."""
    candidates: list[Any] = [attendance_id]
    if ObjectId.is_valid(attendance_id):
        candidates.append(ObjectId(attendance_id))
    if attendance_id.isdigit() and str(int(attendance_id)) == attendance_id:
        candidates.append(int(attendance_id))
    return candidates


def _to_record(doc: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=str(doc["_id"]),
        name=str(doc["name"]),
        branch=str(doc["branch"]),
        year=str(doc["year"]),
        meeting_date=str(doc["meetingDate"]),
        agenda=str(doc["agenda"]),
        timestamp=ensure_utc(doc["timestamp"]),
    )


class MongoAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: MongoConnection):
        self._conn = conn

    @property
    def _collection(self):
        return self._conn.collection(ATTENDANCE_COLLECTION)

    def ensure_indexes(self) -> None:
        with mongo_errors("create attendance indexes"):
            self._collection.create_index([("meetingDate", ASCENDING), ("timestamp", DESCENDING)])

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
        timestamp = bson_datetime(timestamp)
        doc = {
            "name": name,
            "branch": branch,
            "year": year,
            "meetingDate": meeting_date,
            "agenda": agenda,
            "timestamp": timestamp,
            "createdAt": timestamp,
            "updatedAt": timestamp,
        }
        with mongo_errors("mark attendance"):
            result = self._collection.insert_one(doc)
        return AttendanceRecord(
            attendance_id=str(result.inserted_id),
            name=name,
            branch=branch,
            year=year,
            meeting_date=meeting_date,
            agenda=agenda,
            timestamp=timestamp,
        )

    def list_by_meeting_date(self, meeting_date: str) -> Sequence[AttendanceRecord]:
        with mongo_errors("fetch attendance"):
            docs = list(self._collection.find({"meetingDate": meeting_date}).sort(_NEWEST_FIRST))
        return [_to_record(d) for d in docs]

    def delete_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        with mongo_errors("delete attendance"):
            doc = self._collection.find_one_and_delete({"_id": {"$in": _id_candidates(attendance_id)}})
        return _to_record(doc) if doc else None
