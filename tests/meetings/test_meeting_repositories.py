from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

from src.club_attendance.club_attendance.database.json_file import JsonFile
from src.club_attendance.club_attendance.meetings.file_meeting_repository import FileMeetingRepository
from src.club_attendance.club_attendance.meetings.mongo_meeting_repository import MongoMeetingRepository


def test_file_repository_persists_across_instances(tmp_path, fixed_now):
    path = tmp_path / "meeting.json"
    FileMeetingRepository(JsonFile(path)).upsert_latest(meeting_date="2024-05-01", agenda="Kickoff", updated_at=fixed_now)

    reloaded = FileMeetingRepository(JsonFile(path)).get_latest()

    assert reloaded is not None
    assert (reloaded.meeting_date, reloaded.agenda) == ("2024-05-01", "Kickoff")
    assert reloaded.updated_at == fixed_now
    assert json.loads(path.read_text(encoding="utf-8"))["meetingDate"] == "2024-05-01"


def test_file_repository_starts_empty_on_corrupt_file(tmp_path, caplog):
    path = tmp_path / "meeting.json"
    path.write_text("{not json", encoding="utf-8")

    repo = FileMeetingRepository(JsonFile(path))

    assert repo.get_latest() is None
    assert "meeting.json" in caplog.text


def test_file_repository_ignores_malformed_object(tmp_path):
    path = tmp_path / "meeting.json"
    path.write_text(json.dumps({"meetingDate": "", "agenda": "x"}), encoding="utf-8")

    assert FileMeetingRepository(JsonFile(path)).get_latest() is None


def test_mongo_latest_is_newest_by_updated_at(fake_mongo, fixed_now):
    collection = fake_mongo.collection("meetings")
    collection.insert_one({"meetingDate": "2024-04-01", "agenda": "Old", "updatedAt": fixed_now - timedelta(days=30)})
    collection.insert_one({"meetingDate": "2024-04-20", "agenda": "Newest", "updatedAt": fixed_now})
    collection.insert_one({"meetingDate": "2024-04-10", "agenda": "Middle", "updatedAt": fixed_now - timedelta(days=10)})

    latest = MongoMeetingRepository(fake_mongo).get_latest()

    assert latest is not None
    assert latest.agenda == "Newest"


def test_mongo_upsert_updates_newest_document_in_place(fake_mongo, fixed_now):
    collection = fake_mongo.collection("meetings")
    collection.insert_one({"meetingDate": "2024-04-01", "agenda": "Old", "updatedAt": fixed_now - timedelta(days=30)})
    collection.insert_one({"meetingDate": "2024-04-20", "agenda": "Newest", "updatedAt": fixed_now - timedelta(days=1)})
    repo = MongoMeetingRepository(fake_mongo)

    repo.upsert_latest(meeting_date="2024-05-01", agenda="Kickoff", updated_at=fixed_now)

    assert len(collection.docs) == 2
    assert {d["agenda"] for d in collection.docs} == {"Old", "Kickoff"}
    assert repo.get_latest().meeting_date == "2024-05-01"


def test_mongo_upsert_creates_first_document(fake_mongo, fixed_now):
    repo = MongoMeetingRepository(fake_mongo)

    repo.upsert_latest(meeting_date="2024-05-01", agenda="Kickoff", updated_at=fixed_now)

    [doc] = fake_mongo.collection("meetings").docs
    assert doc["createdAt"] == doc["updatedAt"] == fixed_now


def test_mongo_naive_timestamps_are_read_as_utc(fake_mongo):
    fake_mongo.collection("meetings").insert_one(
        {"meetingDate": "2024-05-01", "agenda": "Kickoff", "updatedAt": datetime(2024, 5, 1, 9, 0)}
    )

    latest = MongoMeetingRepository(fake_mongo).get_latest()

    assert latest.updated_at == datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def test_mongo_malformed_latest_document_is_skipped_then_rewritten(fake_mongo, fixed_now, caplog):
    collection = fake_mongo.collection("meetings")
    collection.insert_one({"agenda": "No date", "updatedAt": fixed_now})
    repo = MongoMeetingRepository(fake_mongo)

    assert repo.get_latest() is None
    assert "malformed meeting" in caplog.text

    repo.upsert_latest(meeting_date="2024-05-01", agenda="Kickoff", updated_at=fixed_now)

    assert len(collection.docs) == 1
    assert repo.get_latest().meeting_date == "2024-05-01"


def test_mongo_meeting_reads_back_what_was_written(fake_mongo, fixed_now):
    repo = MongoMeetingRepository(fake_mongo)

    written = repo.upsert_latest(
        meeting_date="2024-05-01", agenda="Kickoff", updated_at=fixed_now.replace(microsecond=987654)
    )

    assert repo.get_latest() == written
