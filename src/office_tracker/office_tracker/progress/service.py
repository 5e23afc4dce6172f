from __future__ import annotations

from datetime import date
from typing import Optional

from ..app_settings.repository import AppSettingsRepository
from ..attendance.repository import AttendanceRepository
from ..periods.classifier import current_month, current_quarter, quarter_of_month_label, quarter_to_months
from ..periods.policy import CALENDAR_POLICY, FiscalPolicy
from ..quarters.repository import QuarterSettingsRepository
from .calculator.base import ProgressCalculator
from .calculator.standard_calculator import StandardProgressCalculator
from .model import ProgressSnapshot, StatusLine
from .status import above_target_color, bar_color, month_line, round_half_up, status_line


def _status_to_dict(s: StatusLine) -> dict:
    return {"state": s.state.value, "color": s.color.value, "text": s.text}


def _snapshot_to_dict(p: ProgressSnapshot) -> dict:
    return {
        "officeDays": p.office_days,
        "totalWorkDays": p.total_work_days,
        "targetDays": p.target_days,
        "percentage": p.percentage,
        "percentageRounded": round_half_up(p.percentage),
        "remaining": p.remaining,
    }


class ProgressService:
    """Quarter/month progress figures for the dashboard and history views."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        quarters: QuarterSettingsRepository,
        app_settings: AppSettingsRepository,
        *,
        policy: FiscalPolicy = CALENDAR_POLICY,
        calculator: Optional[ProgressCalculator] = None,
    ):
        self._attendance = attendance
        self._quarters = quarters
        self._app_settings = app_settings
        self._policy = policy
        self._calculator = calculator or StandardProgressCalculator()

    def quarter_progress(self, quarter: str) -> dict:
        records = list(self._attendance.list_by_quarter(quarter))
        settings = self._quarters.get_by_quarter(quarter)
        total_work_days = settings.total_work_days if settings else 0

        snapshot = self._calculator.compute(records, total_work_days)

        months = []
        for slot, label in enumerate(quarter_to_months(quarter, self._policy)):
            month_records = [r for r in records if r.month == label]
            work_days = settings.work_days_for_slot(slot) if settings else 0
            m = self._calculator.compute(month_records, work_days)
            months.append(
                {
                    "month": label,
                    "workDays": m.total_work_days,
                    "officeDays": m.office_days,
                    "targetDays": m.target_days,
                    "percentage": m.percentage,
                    "percentageRounded": round_half_up(m.percentage),
                    "barColor": bar_color(m.percentage).value,
                    "recordsLogged": len(month_records),
                }
            )

        out = {"quarter": quarter, "configured": settings is not None}
        out.update(_snapshot_to_dict(snapshot))
        out.update(
            {
                "aboveTarget": snapshot.above_target,
                "aboveTargetColor": above_target_color(snapshot.above_target).value,
                "unloggedDays": max(0, snapshot.total_work_days - len(records)),
                "recordsLogged": len(records),
                "barColor": bar_color(snapshot.percentage).value,
                "status": _status_to_dict(status_line(snapshot.percentage)),
                "months": months,
            }
        )
        return out

    def month_progress(self, month: str, *, quarter: Optional[str] = None) -> dict:
        quarter = quarter or quarter_of_month_label(month, self._policy)
        settings = self._quarters.get_by_quarter(quarter) if quarter else None

        work_days = 0
        if settings:
            months = quarter_to_months(quarter, self._policy)
            if month in months:
                work_days = settings.work_days_for_slot(months.index(month))

        records = list(self._attendance.list_by_month(month))
        snapshot = self._calculator.compute(records, work_days)

        out = {"month": month, "quarter": quarter, "workDays": snapshot.total_work_days}
        out.update(_snapshot_to_dict(snapshot))
        out.update(
            {
                "barColor": bar_color(snapshot.percentage).value,
                "status": _status_to_dict(month_line(snapshot.office_days, snapshot.target_days)),
            }
        )
        return out

    def current_progress(self, *, today: Optional[date] = None) -> dict:
        today = today or date.today()
        app_settings = self._app_settings.get()
        quarter = app_settings.current_quarter if app_settings else current_quarter(self._policy, today=today)
        month = current_month(today=today)
        return {
            "quarter": quarter,
            "month": month,
            "quarterProgress": self.quarter_progress(quarter),
            "monthProgress": self.month_progress(month, quarter=quarter),
        }
