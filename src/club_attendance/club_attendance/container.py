from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.file_attendance_repository import FileAttendanceRepository
from .attendance.mongo_attendance_repository import MongoAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceStore
from .core.constants import (
    ATTENDANCE_FILE_NAME,
    DEFAULT_AGENDA,
    DEFAULT_MONGO_DATABASE,
    DEFAULT_MONGO_TIMEOUT_MS,
    MEETING_FILE_NAME,
    STORAGE_FILE,
    STORAGE_MONGO,
)
from .core.exceptions import StorageError
from .database.json_file import JsonFile
from .database.mongo import MongoConfig, MongoConnection
from .meetings.file_meeting_repository import FileMeetingRepository
from .meetings.mongo_meeting_repository import MongoMeetingRepository
from .meetings.repository import MeetingRepository
from .meetings.service import MeetingStore


@dataclass(frozen=True)
class Container:
    backend: str
    mongo: Optional[MongoConnection]

    meetings_repo: MeetingRepository
    attendance_repo: AttendanceRepository

    meeting_store: MeetingStore
    attendance_store: AttendanceStore


def build_container(
    *,
    storage_config: dict,
    default_agenda: str = DEFAULT_AGENDA,
    auto_create_meeting: bool = True,
    mongo: Optional[MongoConnection] = None,
) -> Container:
    """Wire repositories and stores for the backend named in ``storage_config``.

    ``storage_config["backend"]`` is ``"file"`` (needs ``data_dir``) or
    ``"mongo"`` (needs ``mongo_uri``). A ready ``mongo`` connection may be
    passed in instead of letting this function open one.
    """

    backend = str(storage_config.get("backend", STORAGE_FILE)).lower()

    meetings_repo: MeetingRepository
    attendance_repo: AttendanceRepository
    if backend == STORAGE_FILE:
        data_dir = Path(storage_config.get("data_dir") or "data")
        meetings_repo = FileMeetingRepository(JsonFile(data_dir / MEETING_FILE_NAME))
        attendance_repo = FileAttendanceRepository(JsonFile(data_dir / ATTENDANCE_FILE_NAME))
    elif backend == STORAGE_MONGO:
        if mongo is None:
            uri = storage_config.get("mongo_uri")
            if not uri:
                raise StorageError("MONGODB_URI is not set")
            config = MongoConfig(
                uri=str(uri),
                database=str(storage_config.get("mongo_database") or DEFAULT_MONGO_DATABASE),
                timeout_ms=int(storage_config.get("mongo_timeout_ms", DEFAULT_MONGO_TIMEOUT_MS)),
            )
            mongo = MongoConnection(config).connect()
        meetings_repo = MongoMeetingRepository(mongo)
        attendance_repo = MongoAttendanceRepository(mongo)
    else:
        raise ValueError(f"Unknown storage backend: {backend!r}")

    meeting_store = MeetingStore(
        meetings_repo,
        default_agenda=default_agenda,
        auto_create=auto_create_meeting,
    )
    attendance_store = AttendanceStore(attendance_repo, meeting_store)

    return Container(
        backend=backend,
        mongo=mongo if backend == STORAGE_MONGO else None,
        meetings_repo=meetings_repo,
        attendance_repo=attendance_repo,
        meeting_store=meeting_store,
        attendance_store=attendance_store,
    )
