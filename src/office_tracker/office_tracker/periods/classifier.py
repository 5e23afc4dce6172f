from __future__ import annotations

import re
from calendar import monthrange
from dataclasses import dataclass
from datetime import MINYEAR, date, timedelta
from typing import Optional

from .policy import CALENDAR_POLICY, FiscalPolicy

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_QUARTER_RE = re.compile(r"^Q([1-4])-(\d{4})$")
_MONTH_RE = re.compile(r"^([A-Za-z]+)-(\d{4})$")


@dataclass(frozen=True)
class PeriodLabels:
    quarter: str
    month: str


def quarter_label(index: int, year: int) -> str:
    return f"Q{index}-{year:04d}"


def month_label(month: int, year: int) -> str:
    return f"{MONTH_NAMES[month - 1]}-{year:04d}"


def quarter_from_date(day: date, policy: FiscalPolicy = CALENDAR_POLICY) -> str:
    return quarter_label(policy.quarter_index(day.month), policy.quarter_year(day.month, day.year))


def month_from_date(day: date) -> str:
    return month_label(day.month, day.year)


def classify(day: date, policy: FiscalPolicy = CALENDAR_POLICY) -> PeriodLabels:
    """Quarter and month labels for a calendar day under ``policy``."""
    return PeriodLabels(quarter=quarter_from_date(day, policy), month=month_from_date(day))


def parse_quarter_label(label: str) -> Optional[tuple[int, int]]:
    m = _QUARTER_RE.match((label or "").strip())
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def parse_month_label(label: str) -> Optional[tuple[int, int]]:
    m = _MONTH_RE.match((label or "").strip())
    if not m or m.group(1) not in MONTH_NAMES or int(m.group(2)) < MINYEAR:
        return None
    return MONTH_NAMES.index(m.group(1)) + 1, int(m.group(2))


def quarter_to_months(quarter: str, policy: FiscalPolicy = CALENDAR_POLICY) -> list[str]:
    """Month labels of a quarter, in order.

    Malformed quarter labels give an empty list rather than an error, so that
    read paths (history, progress) degrade to "no months" instead of failing.
    Write paths validate labels separately.
    """
    parsed = parse_quarter_label(quarter)
    if not parsed:
        return []
    index, year = parsed
    return [month_label(m, y) for m, y in policy.months_of_quarter(index, year)]


def quarter_of_month_label(label: str, policy: FiscalPolicy = CALENDAR_POLICY) -> Optional[str]:
    parsed = parse_month_label(label)
    if not parsed:
        return None
    month, year = parsed
    return quarter_from_date(date(year, month, 1), policy)


def current_quarter(policy: FiscalPolicy = CALENDAR_POLICY, *, today: Optional[date] = None) -> str:
    return quarter_from_date(today or date.today(), policy)


def current_month(*, today: Optional[date] = None) -> str:
    return month_from_date(today or date.today())


def is_work_day(day: date) -> bool:
    # Monday..Friday
    return day.weekday() < 5


def work_days_in_month(year: int, month: int) -> int:
    first = date(year, month, 1)
    days = monthrange(year, month)[1]
    return sum(1 for offset in range(days) if is_work_day(first + timedelta(days=offset)))


def format_display_date(day: date) -> str:
    """e.g. 'Tuesday, July 15, 2025'."""
    return f"{WEEKDAY_NAMES[day.weekday()]}, {MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"
