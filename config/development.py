import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "file" keeps data in DATA_DIR as JSON; "mongo" needs MONGODB_URI
STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "data_dir": os.getenv("DATA_DIR", "data"),
    "mongo_uri": os.getenv("MONGODB_URI"),
    "mongo_database": os.getenv("MONGODB_DB", "devign-attendance"),
}

DEFAULT_AGENDA = os.getenv("DEFAULT_AGENDA", "Devign Club Meeting")
# If enabled, GET /api/meeting creates today's meeting when none exists
AUTO_CREATE_MEETING = bool(int(os.getenv("AUTO_CREATE_MEETING", "1")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
PORT = int(os.getenv("PORT", "5000"))

# If enabled, app prepares storage on startup (indexes / empty ledger file)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
