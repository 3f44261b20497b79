import os

SECRET_KEY = "test-secret"

STORAGE_CONFIG = {
    "backend": "file",
    "data_dir": os.getenv("DATA_DIR", "test-data"),
    "mongo_uri": None,
    "mongo_database": "devign-attendance-test",
}

DEFAULT_AGENDA = "Devign Club Meeting"
AUTO_CREATE_MEETING = True

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
PORT = 5000

AUTO_INIT_DB = False
