from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendancePatch, AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_quarter(self, quarter: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_month(self, month: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_date(self, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        """Store ``record`` under its date, replacing any existing one."""

        raise NotImplementedError

    def update(self, work_date: date, patch: AttendancePatch) -> Optional[AttendanceRecord]:
        """Apply ``patch`` to the record for ``work_date``; None when there is none."""

        raise NotImplementedError

    def delete(self, work_date: date) -> bool:
        raise NotImplementedError
