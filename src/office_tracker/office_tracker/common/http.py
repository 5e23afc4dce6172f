from __future__ import annotations

from flask import jsonify, request
from pydantic import ValidationError as SchemaError

from ..core.exceptions import ValidationError
from .validators import schema_error_details


def json_error(message: str, status: int, **extra):
    body = {"message": message}
    body.update(extra)
    return jsonify(body), status


def bad_request(message: str, exc: Exception):
    """400 with ``error`` and ``details``; details stay empty unless pydantic reported field errors."""
    details = schema_error_details(exc) if isinstance(exc, SchemaError) else []
    return json_error(message, 400, error=str(exc), details=details)


def read_json_object() -> dict:
    """Request body as a dict; malformed or non-object JSON is a validation error."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload
