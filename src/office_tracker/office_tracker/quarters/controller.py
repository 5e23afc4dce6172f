from __future__ import annotations

from flask import Flask, jsonify
from pydantic import ValidationError as SchemaError

from ..common.http import bad_request, json_error, read_json_object
from ..common.logging_utils import get_logger
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import QuarterSettingsPatch
from .schemas import QuarterSettingsCreate, QuarterSettingsUpdate
from .service import quarter_settings_to_dict

logger = get_logger("quarters.api")


def register(app: Flask, container: Container) -> None:
    service = container.quarter_settings_service

    @app.route("/api/quarter-settings", methods=["GET"], endpoint="quarter_settings_list")
    def quarter_settings_list():
        try:
            return jsonify([quarter_settings_to_dict(s) for s in service.list_all()])
        except Exception:
            logger.exception("Listing quarter settings failed")
            return json_error("Failed to fetch quarter settings", 500)

    @app.route("/api/quarter-settings/<quarter>", methods=["GET"], endpoint="quarter_settings_get")
    def quarter_settings_get(quarter: str):
        try:
            return jsonify(quarter_settings_to_dict(service.get(quarter)))
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Fetching quarter settings for %s failed", quarter)
            return json_error("Failed to fetch quarter settings", 500)

    @app.route("/api/quarter-settings", methods=["POST"], endpoint="quarter_settings_create")
    def quarter_settings_create():
        try:
            body = QuarterSettingsCreate.model_validate(read_json_object())
            settings = service.save(
                quarter=body.quarter,
                year=body.year,
                month1_work_days=body.month1_work_days,
                month2_work_days=body.month2_work_days,
                month3_work_days=body.month3_work_days,
            )
            return jsonify(quarter_settings_to_dict(settings)), 201
        except (SchemaError, ValidationError) as e:
            return bad_request("Invalid quarter settings", e)
        except Exception:
            logger.exception("Saving quarter settings failed")
            return json_error("Failed to save quarter settings", 500)

    @app.route("/api/quarter-settings/<quarter>", methods=["PUT"], endpoint="quarter_settings_update")
    def quarter_settings_update(quarter: str):
        try:
            body = QuarterSettingsUpdate.model_validate(read_json_object())
            if body.quarter is not None and body.quarter != quarter:
                raise ValidationError("quarter in body does not match the quarter in the URL")

            settings = service.update(
                quarter,
                QuarterSettingsPatch(
                    year=body.year,
                    month1_work_days=body.month1_work_days,
                    month2_work_days=body.month2_work_days,
                    month3_work_days=body.month3_work_days,
                ),
            )
            return jsonify(quarter_settings_to_dict(settings))
        except (SchemaError, ValidationError) as e:
            return bad_request("Invalid quarter settings", e)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Updating quarter settings for %s failed", quarter)
            return json_error("Failed to update quarter settings", 500)
