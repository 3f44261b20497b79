import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "mongo"),
    "data_dir": os.getenv("DATA_DIR", "data"),
    "mongo_uri": os.getenv("MONGODB_URI"),
    "mongo_database": os.getenv("MONGODB_DB", "devign-attendance"),
}

DEFAULT_AGENDA = os.getenv("DEFAULT_AGENDA", "Devign Club Meeting")
AUTO_CREATE_MEETING = bool(int(os.getenv("AUTO_CREATE_MEETING", "1")))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "5000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
