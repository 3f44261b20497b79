"""Example: using the stores directly, without Flask.

Controllers are a thin layer; all the behaviour lives in the stores.
"""

import importlib

from config import get_settings_module

from src.club_attendance.club_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config=settings.STORAGE_CONFIG)
    meeting = container.meeting_store.get_current_meeting()
    print(meeting.to_dict())
    print([r.to_dict() for r in container.attendance_store.list_by_meeting_date(meeting.meeting_date)])


if __name__ == "__main__":
    main()
