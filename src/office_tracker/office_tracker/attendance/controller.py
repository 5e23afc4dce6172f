from __future__ import annotations

from flask import Flask, jsonify, request
from pydantic import ValidationError as SchemaError

from ..common.http import bad_request, json_error, read_json_object
from ..common.logging_utils import get_logger
from ..common.validators import require_iso_date
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendancePatch
from .schemas import AttendanceCreate, AttendanceUpdate
from .service import record_to_dict

logger = get_logger("attendance.api")


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        try:
            return jsonify([record_to_dict(r) for r in service.list_all()])
        except Exception:
            logger.exception("Listing attendance failed")
            return json_error("Failed to fetch attendance records", 500)

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        try:
            body = AttendanceCreate.model_validate(read_json_object())
            record, created = service.log(body.date, body.location, quarter=body.quarter, month=body.month)
            return jsonify(record_to_dict(record)), (201 if created else 200)
        except (SchemaError, ValidationError) as e:
            return bad_request("Invalid attendance data", e)
        except Exception:
            logger.exception("Saving attendance failed")
            return json_error("Failed to save attendance record", 500)

    @app.route("/api/attendance", methods=["DELETE"], endpoint="attendance_reset")
    def attendance_reset():
        """Settings screen "reset all data"."""
        try:
            return jsonify({"deleted": service.reset()})
        except Exception:
            logger.exception("Resetting attendance failed")
            return json_error("Failed to reset attendance data", 500)

    @app.route("/api/attendance/recent", methods=["GET"], endpoint="attendance_recent")
    def attendance_recent():
        try:
            limit = int(request.args.get("limit", DEFAULT_HISTORY_LIMIT))
        except ValueError as e:
            return bad_request("limit must be an integer", e)
        try:
            return jsonify([record_to_dict(r) for r in service.history(limit=limit)])
        except Exception:
            logger.exception("Listing recent attendance failed")
            return json_error("Failed to fetch attendance records", 500)

    @app.route("/api/attendance/quarter/<quarter>", methods=["GET"], endpoint="attendance_by_quarter")
    def attendance_by_quarter(quarter: str):
        try:
            return jsonify([record_to_dict(r) for r in service.list_by_quarter(quarter)])
        except Exception:
            logger.exception("Listing attendance for %s failed", quarter)
            return json_error("Failed to fetch quarterly attendance", 500)

    @app.route("/api/attendance/month/<month>", methods=["GET"], endpoint="attendance_by_month")
    def attendance_by_month(month: str):
        try:
            return jsonify([record_to_dict(r) for r in service.list_by_month(month)])
        except Exception:
            logger.exception("Listing attendance for %s failed", month)
            return json_error("Failed to fetch monthly attendance", 500)

    @app.route("/api/attendance/date/<date_s>", methods=["GET"], endpoint="attendance_by_date")
    def attendance_by_date(date_s: str):
        try:
            record = service.get_by_date(require_iso_date(date_s))
            return jsonify(record_to_dict(record))
        except ValidationError as e:
            return bad_request("Invalid date", e)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Fetching attendance for %s failed", date_s)
            return json_error("Failed to fetch attendance record", 500)

    @app.route("/api/attendance/<date_s>", methods=["PUT"], endpoint="attendance_update")
    def attendance_update(date_s: str):
        try:
            work_date = require_iso_date(date_s)
            body = AttendanceUpdate.model_validate(read_json_object())
            if body.date is not None and body.date != work_date:
                raise ValidationError("date in body does not match the date in the URL")

            record = service.update(
                work_date,
                AttendancePatch(location=body.location),
                quarter=body.quarter,
                month=body.month,
            )
            return jsonify(record_to_dict(record))
        except (SchemaError, ValidationError) as e:
            return bad_request("Invalid attendance data", e)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Updating attendance for %s failed", date_s)
            return json_error("Failed to update attendance record", 500)

    @app.route("/api/attendance/<date_s>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(date_s: str):
        try:
            service.delete(require_iso_date(date_s))
            return "", 204
        except ValidationError as e:
            return bad_request("Invalid date", e)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Deleting attendance for %s failed", date_s)
            return json_error("Failed to delete attendance record", 500)
