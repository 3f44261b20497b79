from __future__ import annotations

import logging

from ..attendance.file_attendance_repository import FileAttendanceRepository
from ..attendance.mongo_attendance_repository import MongoAttendanceRepository
from ..core.constants import STORAGE_FILE, STORAGE_MONGO
from ..meetings.mongo_meeting_repository import MongoMeetingRepository

logger = logging.getLogger(__name__)


def describe_storage(storage_config: dict) -> str:
    """One-line, credential-free description of where data lives."""

    backend = str(storage_config.get("backend", STORAGE_FILE)).lower()
    if backend == STORAGE_MONGO:
        return f"mongo database={storage_config.get('mongo_database')}"
    return f"file data_dir={storage_config.get('data_dir')}"


def ensure_storage(container) -> list[str]:
    """Prepare storage for first use. Idempotent.

    MongoDB gets its query indexes. The file backend gets an empty ledger file
    so operators can see where data will be written. No meeting is created
    here; the first read does that.
    """

    done: list[str] = []

    if isinstance(container.meetings_repo, MongoMeetingRepository):
        container.meetings_repo.ensure_indexes()
        done.append("meetings index (updatedAt desc)")
    if isinstance(container.attendance_repo, MongoAttendanceRepository):
        container.attendance_repo.ensure_indexes()
        done.append("attendance index (meetingDate, timestamp desc)")
    if isinstance(container.attendance_repo, FileAttendanceRepository):
        if container.attendance_repo.ensure_file():
            done.append("attendance ledger file")

    for step in done:
        logger.info("Storage ready: %s", step)
    return done
