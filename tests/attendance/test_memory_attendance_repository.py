from datetime import date

from src.office_tracker.office_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.office_tracker.office_tracker.attendance.model import AttendancePatch, AttendanceRecord
from src.office_tracker.office_tracker.core.enums import Location


def test_listing_keeps_insertion_order_and_last_write_wins():
    repo = InMemoryAttendanceRepository()
    repo.upsert(AttendanceRecord("a", date(2025, 7, 3), Location.OFFICE, "Q3-2025", "July-2025"))
    repo.upsert(AttendanceRecord("b", date(2025, 7, 1), Location.HOME, "Q3-2025", "July-2025"))
    repo.upsert(AttendanceRecord("a", date(2025, 7, 3), Location.DAYOFF, "Q3-2025", "July-2025"))

    rows = repo.list_all()

    assert [r.record_id for r in rows] == ["a", "b"]
    assert rows[0].location == Location.DAYOFF


def test_delete_reports_absence():
    repo = InMemoryAttendanceRepository()

    assert repo.delete(date(2025, 7, 3)) is False


def test_update_changes_location_and_keeps_the_rest():
    repo = InMemoryAttendanceRepository()
    repo.upsert(AttendanceRecord("a", date(2025, 7, 3), Location.OFFICE, "Q3-2025", "July-2025"))

    updated = repo.update(date(2025, 7, 3), AttendancePatch(location=Location.HOME))
    untouched = repo.update(date(2025, 7, 3), AttendancePatch())

    assert updated == AttendanceRecord("a", date(2025, 7, 3), Location.HOME, "Q3-2025", "July-2025")
    assert untouched == updated
    assert repo.get_by_date(date(2025, 7, 3)).location == Location.HOME


def test_update_missing_date_returns_none():
    repo = InMemoryAttendanceRepository()

    assert repo.update(date(2025, 7, 3), AttendancePatch(location=Location.HOME)) is None
    assert repo.list_all() == []
