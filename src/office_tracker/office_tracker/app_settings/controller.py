from __future__ import annotations

from flask import Flask, jsonify
from pydantic import ValidationError as SchemaError

from ..common.http import bad_request, json_error, read_json_object
from ..common.logging_utils import get_logger
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import AppSettingsPatch
from .schemas import AppSettingsCreate, AppSettingsUpdate
from .service import app_settings_to_dict

logger = get_logger("app_settings.api")


def register(app: Flask, container: Container) -> None:
    service = container.app_settings_service

    @app.route("/api/app-settings", methods=["GET"], endpoint="app_settings_get")
    def app_settings_get():
        try:
            return jsonify(app_settings_to_dict(service.get()))
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Fetching app settings failed")
            return json_error("Failed to fetch app settings", 500)

    @app.route("/api/app-settings", methods=["POST"], endpoint="app_settings_create")
    def app_settings_create():
        try:
            body = AppSettingsCreate.model_validate(read_json_object())
            settings = service.create(
                current_quarter=body.current_quarter,
                dark_mode=body.dark_mode,
                notifications=body.notifications,
            )
            return jsonify(app_settings_to_dict(settings)), 201
        except (SchemaError, ValidationError) as e:
            return bad_request("Invalid app settings", e)
        except Exception:
            logger.exception("Saving app settings failed")
            return json_error("Failed to save app settings", 500)

    @app.route("/api/app-settings", methods=["PUT"], endpoint="app_settings_update")
    def app_settings_update():
        try:
            body = AppSettingsUpdate.model_validate(read_json_object())
            settings = service.update(
                AppSettingsPatch(
                    current_quarter=body.current_quarter,
                    dark_mode=body.dark_mode,
                    notifications=body.notifications,
                )
            )
            return jsonify(app_settings_to_dict(settings))
        except (SchemaError, ValidationError) as e:
            return bad_request("Invalid app settings", e)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Updating app settings failed")
            return json_error("Failed to update app settings", 500)
