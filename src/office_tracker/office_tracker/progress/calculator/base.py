from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ..model import ProgressSnapshot


class ProgressCalculator(ABC):
    """Calculator interface (Strategy Pattern for progress)."""

    @abstractmethod
    def compute(self, records: Iterable[AttendanceRecord], total_work_days: int) -> ProgressSnapshot:
        raise NotImplementedError
