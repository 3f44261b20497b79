from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from pymongo import DESCENDING

from ..common.datetime_utils import ensure_utc
from ..core.constants import MEETING_COLLECTION
from ..database.mongo import MongoConnection, bson_datetime, mongo_errors
from .model import Meeting
from .repository import MeetingRepository

logger = logging.getLogger(__name__)

_LATEST_FIRST = [("updatedAt", DESCENDING)]


class MongoMeetingRepository(MeetingRepository):
    """Meetings stored as documents; the newest ``updatedAt`` is the current one.

    Several meeting documents may exist (older deployments inserted one per
    update). Updates rewrite the newest document in place instead of adding
    another, so the collection stops growing.
    """

    def __init__(self, conn: MongoConnection):
        self._conn = conn

    @property
    def _collection(self):
        return self._conn.collection(MEETING_COLLECTION)

    def ensure_indexes(self) -> None:
        with mongo_errors("create meeting indexes"):
            self._collection.create_index(_LATEST_FIRST)

    def get_latest(self) -> Optional[Meeting]:
        with mongo_errors("fetch meeting"):
            doc = self._collection.find_one({}, sort=_LATEST_FIRST)
        if not doc:
            return None
        if not doc.get("meetingDate") or not doc.get("agenda"):
            # The next update rewrites this same document.
            logger.warning("Ignoring malformed meeting document %s", doc.get("_id"))
            return None

        updated_at = doc.get("updatedAt")
        return Meeting(
            meeting_date=str(doc["meetingDate"]),
            agenda=str(doc["agenda"]),
            updated_at=ensure_utc(updated_at) if isinstance(updated_at, datetime) else None,
        )

    def upsert_latest(self, *, meeting_date: str, agenda: str, updated_at: datetime) -> Meeting:
        updated_at = bson_datetime(updated_at)
        fields = {"meetingDate": meeting_date, "agenda": agenda, "updatedAt": updated_at}
        with mongo_errors("update meeting"):
            latest = self._collection.find_one({}, projection={"_id": 1}, sort=_LATEST_FIRST)
            if latest is None:
                self._collection.insert_one({**fields, "createdAt": updated_at})
            else:
                self._collection.update_one({"_id": latest["_id"]}, {"$set": fields})
        return Meeting(meeting_date=meeting_date, agenda=agenda, updated_at=updated_at)
