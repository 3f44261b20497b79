from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, PreconditionError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        """Body: name, branch, year and optionally meetingDate/agenda."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        try:
            record = container.attendance_store.create(
                data.get("name"),
                data.get("branch"),
                data.get("year"),
                data.get("meetingDate"),
                data.get("agenda"),
            )
            return jsonify(record.to_dict()), 201
        except (ValidationError, PreconditionError) as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            logger.exception("POST /api/attendance failed")
            return jsonify({"message": "Failed to mark attendance."}), 500

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        try:
            records = container.attendance_store.list_by_meeting_date(request.args.get("meetingDate"))
            return jsonify([r.to_dict() for r in records])
        except Exception:
            logger.exception("GET /api/attendance failed")
            return jsonify({"message": "Failed to fetch attendance."}), 500

    @app.route("/api/attendance/<attendance_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(attendance_id: str):
        try:
            removed = container.attendance_store.delete_by_id(attendance_id)
            return jsonify({"message": "Deleted successfully.", "record": removed.to_dict()})
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("DELETE /api/attendance/%s failed", attendance_id)
            return jsonify({"message": "Failed to delete attendance."}), 500
