from __future__ import annotations

from datetime import date, timedelta

from src.office_tracker.office_tracker.container import build_container
from src.office_tracker.office_tracker.core.enums import Location


def _log_office_days(container, start: date, count: int):
    day = start
    logged = 0
    while logged < count:
        if day.weekday() < 5:
            container.attendance_service.log(day, Location.OFFICE)
            logged += 1
        day += timedelta(days=1)


def test_quarter_progress_without_settings_is_zero(container):
    container.attendance_service.log(date(2025, 7, 1), Location.OFFICE)

    report = container.progress_service.quarter_progress("Q3-2025")

    assert report["configured"] is False
    assert report["officeDays"] == 1
    assert report["totalWorkDays"] == 0
    assert report["percentage"] == 0
    assert [m["month"] for m in report["months"]] == ["July-2025", "August-2025", "September-2025"]


def test_quarter_progress_with_settings(container):
    container.quarter_settings_service.save(
        quarter="Q3-2025", month1_work_days=23, month2_work_days=21, month3_work_days=21
    )
    _log_office_days(container, date(2025, 7, 1), 13)
    container.attendance_service.log(date(2025, 8, 4), Location.HOME)

    report = container.progress_service.quarter_progress("Q3-2025")

    assert report["totalWorkDays"] == 65
    assert report["officeDays"] == 13
    assert report["targetDays"] == 33
    assert report["remaining"] == 20
    assert report["aboveTarget"] == -20
    assert report["aboveTargetColor"] == "red"
    assert report["unloggedDays"] == 65 - 14
    assert report["status"]["state"] == "behind"
    assert report["status"]["color"] == "red"

    july, august, september = report["months"]
    assert july["workDays"] == 23
    assert july["officeDays"] == 13
    assert july["targetDays"] == 12
    assert july["barColor"] == "green"
    assert august["officeDays"] == 0
    assert august["recordsLogged"] == 1
    assert september["workDays"] == 21


def test_month_progress_uses_month_slot(container):
    container.quarter_settings_service.save(
        quarter="Q3-2025", month1_work_days=23, month2_work_days=20, month3_work_days=21
    )
    _log_office_days(container, date(2025, 8, 1), 10)

    report = container.progress_service.month_progress("August-2025")

    assert report["quarter"] == "Q3-2025"
    assert report["workDays"] == 20
    assert report["targetDays"] == 10
    assert report["percentage"] == 50
    assert report["status"]["text"] == "0 days ahead this month"


def test_month_progress_outside_configured_quarter(container):
    container.quarter_settings_service.save(
        quarter="Q3-2025", month1_work_days=23, month2_work_days=20, month3_work_days=21
    )

    report = container.progress_service.month_progress("October-2025", quarter="Q3-2025")

    assert report["workDays"] == 0
    assert report["percentage"] == 0


def test_invalid_quarter_progress_has_no_months(container):
    report = container.progress_service.quarter_progress("not-a-quarter")

    assert report["months"] == []
    assert report["totalWorkDays"] == 0


def test_current_progress_prefers_app_settings(container, fixed_today):
    container.app_settings_service.create(current_quarter="Q2-2025")

    report = container.progress_service.current_progress(today=fixed_today)

    assert report["quarter"] == "Q2-2025"
    assert report["month"] == "July-2025"
    # July is not a month of Q2, so no work days are attributed to it
    assert report["monthProgress"]["workDays"] == 0


def test_current_progress_falls_back_to_policy(fixed_today):
    container = build_container(fiscal_policy="fiscal")

    report = container.progress_service.current_progress(today=fixed_today)

    assert report["quarter"] == "Q2-2025"
    assert report["quarterProgress"]["months"][2]["month"] == "July-2025"
