from __future__ import annotations

from enum import Enum


class Location(str, Enum):
    """Nơi làm việc của một ngày đã ghi nhận."""

    OFFICE = "office"
    HOME = "home"
    DAYOFF = "dayoff"


class ProgressState(str, Enum):
    AHEAD = "ahead"
    BEHIND = "behind"


class ProgressColor(str, Enum):
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
