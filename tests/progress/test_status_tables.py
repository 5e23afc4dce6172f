import pytest

from src.office_tracker.office_tracker.core.enums import ProgressColor, ProgressState
from src.office_tracker.office_tracker.progress.status import (
    above_target_color,
    bar_color,
    month_line,
    round_half_up,
    status_line,
)


@pytest.mark.parametrize(
    "percentage, expected",
    [
        (100, ProgressColor.GREEN),
        (50, ProgressColor.GREEN),
        (49.9, ProgressColor.ORANGE),
        (40, ProgressColor.ORANGE),
        (39.9, ProgressColor.RED),
        (0, ProgressColor.RED),
    ],
)
def test_bar_color_breakpoints(percentage, expected):
    assert bar_color(percentage) == expected


@pytest.mark.parametrize(
    "percentage, state, color",
    [
        (75, ProgressState.AHEAD, ProgressColor.GREEN),
        (60, ProgressState.AHEAD, ProgressColor.GREEN),
        (55, ProgressState.AHEAD, ProgressColor.GREEN),
        (50, ProgressState.AHEAD, ProgressColor.GREEN),
        (45, ProgressState.BEHIND, ProgressColor.ORANGE),
        (40.1, ProgressState.BEHIND, ProgressColor.ORANGE),
        (40, ProgressState.BEHIND, ProgressColor.RED),
        (10, ProgressState.BEHIND, ProgressColor.RED),
    ],
)
def test_status_line_breakpoints(percentage, state, color):
    s = status_line(percentage)

    assert s.state == state
    assert s.color == color


def test_tables_are_independent():
    # 40%: orange bar, red status line
    assert bar_color(40) == ProgressColor.ORANGE
    assert status_line(40).color == ProgressColor.RED


def test_status_text():
    assert status_line(62.5).text == "13% ahead of target"
    assert status_line(42.5).text == "8% behind target"
    assert status_line(50).text == "0% ahead of target"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(12.5) == 13
    assert round_half_up(12.4) == 12


def test_month_line():
    assert month_line(12, 11).text == "1 days ahead this month"
    assert month_line(11, 11).color == ProgressColor.GREEN
    behind = month_line(5, 11)
    assert behind.text == "6 days behind this month"
    assert behind.color == ProgressColor.ORANGE


def test_above_target_color():
    assert above_target_color(0) == ProgressColor.GREEN
    assert above_target_color(-1) == ProgressColor.RED
