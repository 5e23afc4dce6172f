from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_validator

from ..common.datetime_utils import parse_iso_date
from ..core.enums import Location


def _iso_date_only(value):
    # Numbers would otherwise be read as Unix timestamps
    if value is None or isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        raise ValueError("date must be a YYYY-MM-DD string")
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValueError(f"date must be a YYYY-MM-DD string, got {value!r}") from None


class AttendanceCreate(BaseModel):
    date: dt.date
    location: Location
    # Optional: computed from ``date`` when omitted, checked when given
    quarter: Optional[str] = None
    month: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def date_is_iso_string(cls, value):
        return _iso_date_only(value)


class AttendanceUpdate(BaseModel):
    date: Optional[dt.date] = None
    location: Optional[Location] = None
    quarter: Optional[str] = None
    month: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def date_is_iso_string(cls, value):
        return _iso_date_only(value)
