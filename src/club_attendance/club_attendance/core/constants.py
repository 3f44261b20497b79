"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_AGENDA = "Devign Club Meeting"
DEFAULT_MONGO_DATABASE = "devign-attendance"
DEFAULT_MONGO_TIMEOUT_MS = 5000

# Collection names match the ones mongoose derived from the model names,
# so existing databases keep working.
MEETING_COLLECTION = "meetings"
ATTENDANCE_COLLECTION = "attendances"

MEETING_FILE_NAME = "meeting.json"
ATTENDANCE_FILE_NAME = "attendance.json"

STORAGE_FILE = "file"
STORAGE_MONGO = "mongo"
