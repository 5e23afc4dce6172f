from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from .model import AttendancePatch, AttendanceRecord


class InMemoryAttendanceRepository:
    """Attendance records keyed by date, listed in insertion order."""

    def __init__(self):
        self._by_date: dict[date, AttendanceRecord] = {}

    def list_all(self) -> list[AttendanceRecord]:
        return list(self._by_date.values())

    def list_by_quarter(self, quarter: str) -> list[AttendanceRecord]:
        return [r for r in self._by_date.values() if r.quarter == quarter]

    def list_by_month(self, month: str) -> list[AttendanceRecord]:
        return [r for r in self._by_date.values() if r.month == month]

    def get_by_date(self, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_date.get(work_date)

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        self._by_date[record.work_date] = record
        return record

    def update(self, work_date: date, patch: AttendancePatch) -> Optional[AttendanceRecord]:
        current = self._by_date.get(work_date)
        if current is None:
            return None
        if patch.location is not None:
            current = replace(current, location=patch.location)
            self._by_date[work_date] = current
        return current

    def delete(self, work_date: date) -> bool:
        return self._by_date.pop(work_date, None) is not None
