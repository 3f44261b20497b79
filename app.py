from __future__ import annotations

import importlib

from config import get_settings_module

from src.club_attendance.club_attendance.main import create_app

app = create_app()


if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host="0.0.0.0", port=int(getattr(settings, "PORT", 5000)), debug=app.config["DEBUG"])
