from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ProgressColor, ProgressState


@dataclass(frozen=True)
class ProgressSnapshot:
    office_days: int
    total_work_days: int
    target_days: int
    percentage: float
    remaining: int

    @property
    def above_target(self) -> int:
        """Office days over (positive) or under (negative) the target."""
        return self.office_days - self.target_days


@dataclass(frozen=True)
class StatusLine:
    state: ProgressState
    color: ProgressColor
    text: str
