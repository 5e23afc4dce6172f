from __future__ import annotations

from datetime import date

from pydantic import ValidationError as SchemaError

from ..core.exceptions import ValidationError
from ..periods.classifier import parse_quarter_label
from .datetime_utils import parse_iso_date


def require_iso_date(value: str, field_name: str = "date") -> date:
    try:
        return parse_iso_date((value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}") from None


def require_quarter_label(value: str, field_name: str = "quarter") -> str:
    if not parse_quarter_label(value):
        raise ValidationError(f"{field_name} must look like 'Q3-2025', got {value!r}")
    return value.strip()


def schema_error_details(exc: SchemaError) -> list[dict]:
    """JSON-safe view of pydantic's error list."""
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
