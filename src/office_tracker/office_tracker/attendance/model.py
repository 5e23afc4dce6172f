from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Location


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): một ngày đã ghi nhận. ``work_date`` là khóa."""

    record_id: str
    work_date: date
    location: Location
    quarter: str
    month: str


@dataclass(frozen=True)
class AttendancePatch:
    """Mutable fields of an existing record.

    Only ``location`` can change; quarter/month always follow the key date.
    ``None`` keeps the stored value.
    """

    location: Optional[Location] = None
