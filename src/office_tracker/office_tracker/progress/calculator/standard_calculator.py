from __future__ import annotations

import math
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ...core.constants import DEFAULT_TARGET_RATIO
from ...core.enums import Location
from ..model import ProgressSnapshot
from .base import ProgressCalculator


class StandardProgressCalculator(ProgressCalculator):
    """Standard rule: target = ceil(work days * ratio); only office days count."""

    def __init__(self, target_ratio: float = DEFAULT_TARGET_RATIO):
        self.target_ratio = float(target_ratio)

    def compute(self, records: Iterable[AttendanceRecord], total_work_days: int) -> ProgressSnapshot:
        total = max(int(total_work_days or 0), 0)
        office_days = sum(1 for r in records if r.location == Location.OFFICE)
        target = math.ceil(total * self.target_ratio)
        percentage = (office_days / total) * 100 if total > 0 else 0.0
        return ProgressSnapshot(
            office_days=office_days,
            total_work_days=total,
            target_days=target,
            percentage=percentage,
            remaining=max(0, target - office_days),
        )
