"""Colour/status tables used by the dashboard and history views.

The progress-bar table and the status-line table are independent and use
different breakpoints.
"""

from __future__ import annotations

import math

from ..core.constants import BAR_GREEN_MIN, BAR_ORANGE_MIN, STATUS_TARGET_PERCENTAGE, STATUS_WARNING_MARGIN
from ..core.enums import ProgressColor, ProgressState
from .model import StatusLine


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def bar_color(percentage: float) -> ProgressColor:
    if percentage >= BAR_GREEN_MIN:
        return ProgressColor.GREEN
    if percentage >= BAR_ORANGE_MIN:
        return ProgressColor.ORANGE
    return ProgressColor.RED


def status_line(percentage: float) -> StatusLine:
    diff = percentage - STATUS_TARGET_PERCENTAGE
    if diff >= 0:
        return StatusLine(ProgressState.AHEAD, ProgressColor.GREEN, f"{round_half_up(diff)}% ahead of target")
    if diff > -STATUS_WARNING_MARGIN:
        return StatusLine(ProgressState.BEHIND, ProgressColor.ORANGE, f"{round_half_up(abs(diff))}% behind target")
    return StatusLine(ProgressState.BEHIND, ProgressColor.RED, f"{round_half_up(abs(diff))}% behind target")


def month_line(office_days: int, target_days: int) -> StatusLine:
    if office_days >= target_days:
        return StatusLine(ProgressState.AHEAD, ProgressColor.GREEN, f"{office_days - target_days} days ahead this month")
    return StatusLine(ProgressState.BEHIND, ProgressColor.ORANGE, f"{target_days - office_days} days behind this month")


def above_target_color(above_target: int) -> ProgressColor:
    return ProgressColor.GREEN if above_target >= 0 else ProgressColor.RED
