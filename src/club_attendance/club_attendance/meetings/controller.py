from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import PreconditionError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/meeting", methods=["GET"], endpoint="get_meeting")
    def get_meeting():
        """Current meeting; created with today's date on first call."""
        try:
            meeting = container.meeting_store.get_current_meeting()
            return jsonify(meeting.to_dict())
        except PreconditionError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("GET /api/meeting failed")
            return jsonify({"message": "Failed to fetch meeting."}), 500

    @app.route("/api/meeting", methods=["PUT"], endpoint="update_meeting")
    def update_meeting():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        try:
            meeting = container.meeting_store.set_current_meeting(data.get("meetingDate"), data.get("agenda"))
            return jsonify(meeting.to_dict())
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            logger.exception("PUT /api/meeting failed")
            return jsonify({"message": "Failed to update meeting."}), 500
