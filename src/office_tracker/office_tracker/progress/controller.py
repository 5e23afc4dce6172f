from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_iso_date, today_local
from ..common.http import bad_request, json_error
from ..common.logging_utils import get_logger
from ..common.validators import require_iso_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..periods.classifier import classify, format_display_date, quarter_to_months

logger = get_logger("progress.api")


def register(app: Flask, container: Container) -> None:
    service = container.progress_service

    @app.route("/api/progress/current", methods=["GET"], endpoint="progress_current")
    def progress_current():
        try:
            return jsonify(service.current_progress(today=today_local()))
        except Exception:
            logger.exception("Computing current progress failed")
            return json_error("Failed to compute progress", 500)

    @app.route("/api/progress/quarter/<quarter>", methods=["GET"], endpoint="progress_quarter")
    def progress_quarter(quarter: str):
        try:
            return jsonify(service.quarter_progress(quarter))
        except Exception:
            logger.exception("Computing progress for %s failed", quarter)
            return json_error("Failed to compute quarter progress", 500)

    @app.route("/api/progress/month/<month>", methods=["GET"], endpoint="progress_month")
    def progress_month(month: str):
        try:
            return jsonify(service.month_progress(month))
        except Exception:
            logger.exception("Computing progress for %s failed", month)
            return json_error("Failed to compute month progress", 500)

    @app.route("/api/periods/<date_s>", methods=["GET"], endpoint="periods_for_date")
    def periods_for_date(date_s: str):
        """Quarter/month labels the server would store for a date."""
        try:
            day = require_iso_date(date_s)
        except ValidationError as e:
            return bad_request("Invalid date", e)

        labels = classify(day, container.policy)
        return jsonify(
            {
                "date": format_iso_date(day),
                "displayDate": format_display_date(day),
                "policy": container.policy.name,
                "quarter": labels.quarter,
                "month": labels.month,
                "quarterMonths": quarter_to_months(labels.quarter, container.policy),
            }
        )
