from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class QuarterSettings:
    """Số ngày làm việc cấu hình cho từng tháng của một quý."""

    settings_id: str
    quarter: str
    year: int
    month1_work_days: int
    month2_work_days: int
    month3_work_days: int

    @property
    def total_work_days(self) -> int:
        return self.month1_work_days + self.month2_work_days + self.month3_work_days

    def work_days_for_slot(self, slot: int) -> int:
        """Work days of the 0-based month slot within the quarter (0 if out of range)."""
        return {
            0: self.month1_work_days,
            1: self.month2_work_days,
            2: self.month3_work_days,
        }.get(slot, 0)


@dataclass(frozen=True)
class QuarterSettingsPatch:
    year: Optional[int] = None
    month1_work_days: Optional[int] = None
    month2_work_days: Optional[int] = None
    month3_work_days: Optional[int] = None
