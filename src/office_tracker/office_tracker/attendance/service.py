from __future__ import annotations

import uuid
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import format_iso_date
from ..common.logging_utils import get_logger
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import Location
from ..core.exceptions import NotFoundError, ValidationError
from ..periods.classifier import PeriodLabels, classify
from ..periods.policy import CALENDAR_POLICY, FiscalPolicy
from .model import AttendancePatch, AttendanceRecord
from .repository import AttendanceRepository

logger = get_logger("attendance")


def record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "date": format_iso_date(r.work_date),
        "location": r.location.value,
        "quarter": r.quarter,
        "month": r.month,
    }


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        policy: FiscalPolicy = CALENDAR_POLICY,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._attendance = attendance
        self._policy = policy
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_all(self) -> list[AttendanceRecord]:
        return list(self._attendance.list_all())

    def list_by_quarter(self, quarter: str) -> list[AttendanceRecord]:
        return list(self._attendance.list_by_quarter(quarter))

    def list_by_month(self, month: str) -> list[AttendanceRecord]:
        return list(self._attendance.list_by_month(month))

    def get_by_date(self, work_date: date) -> AttendanceRecord:
        record = self._attendance.get_by_date(work_date)
        if not record:
            raise NotFoundError("No attendance record found for this date")
        return record

    def history(self, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        """Most recent dates first."""
        rows = sorted(self._attendance.list_all(), key=lambda r: r.work_date, reverse=True)
        return rows[: max(int(limit), 0)]

    def log(
        self,
        work_date: date,
        location: Location,
        *,
        quarter: Optional[str] = None,
        month: Optional[str] = None,
    ) -> tuple[AttendanceRecord, bool]:
        """Create the record for ``work_date`` or overwrite the existing one.

        Returns the stored record and whether it was newly created.
        """
        labels = self._labels_for(work_date, quarter=quarter, month=month)
        existing = self._attendance.get_by_date(work_date)

        record = AttendanceRecord(
            record_id=existing.record_id if existing else self._new_id(),
            work_date=work_date,
            location=Location(location),
            quarter=labels.quarter,
            month=labels.month,
        )
        self._attendance.upsert(record)

        if existing:
            logger.info("Overwrote %s: %s -> %s", work_date, existing.location.value, record.location.value)
        else:
            logger.info("Logged %s as %s (%s)", work_date, record.location.value, record.quarter)
        return record, existing is None

    def update(
        self,
        work_date: date,
        patch: AttendancePatch,
        *,
        quarter: Optional[str] = None,
        month: Optional[str] = None,
    ) -> AttendanceRecord:
        self._labels_for(work_date, quarter=quarter, month=month)
        location = Location(patch.location) if patch.location is not None else None
        record = self._attendance.update(work_date, AttendancePatch(location=location))
        if record is None:
            logger.warning("Update for unknown date %s", work_date)
            raise NotFoundError("Attendance record not found")
        logger.info("Updated %s: location=%s", work_date, record.location.value)
        return record

    def delete(self, work_date: date) -> None:
        if not self._attendance.delete(work_date):
            logger.warning("Delete for unknown date %s", work_date)
            raise NotFoundError("Attendance record not found")
        logger.info("Deleted %s", work_date)

    def reset(self) -> int:
        """Delete every record; returns how many were removed."""
        removed = 0
        for r in list(self._attendance.list_all()):
            if self._attendance.delete(r.work_date):
                removed += 1
        logger.info("Reset attendance data (%d records removed)", removed)
        return removed

    def _labels_for(self, work_date: date, *, quarter: Optional[str], month: Optional[str]) -> PeriodLabels:
        labels = classify(work_date, self._policy)
        if quarter is not None and quarter != labels.quarter:
            raise ValidationError(
                f"quarter {quarter!r} does not match {format_iso_date(work_date)} (expected {labels.quarter!r})"
            )
        if month is not None and month != labels.month:
            raise ValidationError(
                f"month {month!r} does not match {format_iso_date(work_date)} (expected {labels.month!r})"
            )
        return labels
